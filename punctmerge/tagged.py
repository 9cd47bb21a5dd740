"""
Reading and writing tagged sentences.

Segmenter output lines look like ``他_n 说_v …_w``: words separated by
spaces, each word joined to its tag by a separator.
"""

from typing import List

from punctmerge import TaggedWord

DEFAULT_SEPARATOR = "_"


def parse_tagged(line: str, separator: str = DEFAULT_SEPARATOR) -> List[TaggedWord]:
    """
    Parse one line of segmenter output into tagged words.

    Each item is split at its last separator, so the separator may also
    appear inside the word itself. Items without a separator get an empty
    tag.

    Example:
        >>> parse_tagged("他_n …_w")
        [TaggedWord('他', tag='n'), TaggedWord('…', tag='w')]
    """
    if not separator:
        raise ValueError("separator must be non-empty")

    words = []
    for item in line.split():
        text, sep, tag = item.rpartition(separator)
        if not sep:
            text, tag = item, ""
        words.append(TaggedWord(text, tag))
    return words


def format_tagged(sentence: List[TaggedWord], separator: str = DEFAULT_SEPARATOR) -> str:
    """Inverse of ``parse_tagged``."""
    return " ".join(
        f"{word.text}{separator}{word.tag}" if word.tag else word.text
        for word in sentence
    )
