"""
CLI interface for punctmerge.

Usage:
    punctmerge "他_n 说_v …_w …_w 完_v 了_u"
    punctmerge --dict punctuation.txt < segmented.txt
    punctmerge --json "“_w …_w …_w ”_w"
"""

import argparse
import json
import logging
import sys
from typing import Iterable, List

from punctmerge import TaggedWord, __version__
from punctmerge.dictionary import load_dictionary
from punctmerge.punctuation import PunctuationPass
from punctmerge.tagged import DEFAULT_SEPARATOR, format_tagged, parse_tagged

logger = logging.getLogger(__name__)


# ============================================================================
# Output Formatting
# ============================================================================

def format_json(sentence: List[TaggedWord]) -> str:
    """Format a sentence as a JSON array of {text, tag} objects."""
    data = [{"text": w.text, "tag": w.tag} for w in sentence]
    return json.dumps(data, ensure_ascii=False)


def iter_lines(text, stream) -> Iterable[str]:
    if text is not None:
        yield text
        return
    for line in stream:
        line = line.rstrip("\n")
        if line.strip():
            yield line


# ============================================================================
# Main
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="punctmerge",
        description="Merge split punctuation in segmented, tagged text",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Tagged sentence, e.g. '他_n …_w …_w' (reads stdin if omitted)",
    )
    parser.add_argument(
        "--dict", "-D",
        dest="dictionary",
        metavar="PATH",
        help="Punctuation dictionary (.dic trie or one entry per line)",
    )
    parser.add_argument(
        "--separator", "-s",
        default=DEFAULT_SEPARATOR,
        help=f"Word/tag separator (default: {DEFAULT_SEPARATOR!r})",
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log each merge",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"punctmerge {__version__}",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    try:
        punctuation_pass = PunctuationPass(load_dictionary(args.dictionary))

        for line in iter_lines(args.text, sys.stdin):
            sentence = parse_tagged(line, args.separator)
            punctuation_pass.process(sentence)

            if args.json:
                print(format_json(sentence))
            else:
                print(format_tagged(sentence, args.separator))

    except (OSError, ValueError) as e:
        logger.debug("punctmerge failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
