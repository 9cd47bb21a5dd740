"""
Punctuation Dictionary for punctmerge.

This module provides the lookup structure queried by the punctuation pass.
Entries are punctuation strings such as "……" or "——", stored in a
marisa_trie.Trie so that both exact lookups and prefix walks are cheap.

The pass only needs three questions answered:
- exact_match: is this string an entry?
- can_continue: can this string still grow into a longer entry?
- has_prefix: does any entry start with this string?
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

import marisa_trie

logger = logging.getLogger(__name__)


# ============================================================================
# Default Entries
# ============================================================================

DEFAULT_PUNCTUATION = [
    # Chinese full-width
    '。', '，', '、', '；', '：', '？', '！',
    '“', '”', '‘', '’', '（', '）', '【', '】', '《', '》', '〈', '〉',
    '「', '」', '『', '』', '·', '～',
    # Multi-character sequences
    '……', '——', '？！', '！？', '！！', '？？',
    '。”', '！”', '？”', '”。', '）。',
    # ASCII
    '.', ',', ';', ':', '?', '!', '"', "'", '(', ')', '[', ']',
    '...', '--', '?!', '!?', '!!', '??', '->', '<-',
]

# Environment variable pointing at a dictionary file
DICTIONARY_ENV_VAR = "PUNCTMERGE_DICT"

# Comment marker in text dictionaries
COMMENT_PREFIX = "# "

DictionaryPath = Union[str, Path]


# ============================================================================
# Dictionary
# ============================================================================

class PunctuationDictionary:
    """
    Read-only punctuation lookup.

    Never mutated after construction, so a single instance can be shared by
    any number of threads running the punctuation pass.
    """

    __slots__ = ("_trie",)

    def __init__(self, entries: Iterable[str] = ()):
        self._trie = marisa_trie.Trie([e for e in entries if e])

    @classmethod
    def from_trie(cls, trie: marisa_trie.Trie) -> "PunctuationDictionary":
        """Wrap an already built trie."""
        instance = cls.__new__(cls)
        instance._trie = trie
        return instance

    @classmethod
    def load(cls, path: DictionaryPath) -> "PunctuationDictionary":
        """
        Load a dictionary from disk.

        A ``.dic`` file is memory-mapped as a saved marisa trie. Anything
        else is read as UTF-8 text with one entry per line; empty lines and
        lines starting with ``# `` (hash, space) are ignored, so ``#`` itself
        can still be an entry.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If a ``.dic`` file is not a valid marisa trie
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Punctuation dictionary not found at {path}")

        if path.suffix == ".dic":
            trie = marisa_trie.Trie()
            try:
                trie.mmap(str(path))
            except RuntimeError as e:
                raise ValueError(f"Malformed punctuation dictionary {path}: {e}") from e
            logger.info(f"Mapped punctuation dictionary {path} ({len(trie)} entries)")
            return cls.from_trie(trie)

        with open(path, encoding="utf-8") as f:
            lines = (line.rstrip("\r\n") for line in f)
            entries = [line for line in lines if line and not line.startswith(COMMENT_PREFIX)]
        dictionary = cls(entries)
        logger.info(f"Loaded punctuation dictionary {path} ({len(dictionary)} entries)")
        return dictionary

    def save(self, path: DictionaryPath) -> None:
        """Write the trie in marisa format (loadable back via ``load``)."""
        self._trie.save(str(path))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def exact_match(self, text: str) -> bool:
        """True if ``text`` is, in its entirety, an entry."""
        return bool(text) and text in self._trie

    def can_continue(self, text: str) -> bool:
        """True if some entry strictly longer than ``text`` starts with it."""
        if not text:
            return False
        length = len(text)
        return any(len(key) > length for key in self._trie.iterkeys(text))

    def has_prefix(self, text: str) -> bool:
        """True if some entry starts with ``text`` (entries included)."""
        if not text:
            return False

        try:
            next(iter(self._trie.iterkeys(text)))
            return True
        except StopIteration:
            return False

    def entries(self) -> List[str]:
        return self._trie.keys()

    def __contains__(self, text: str) -> bool:
        return self.exact_match(text)

    def __len__(self) -> int:
        return len(self._trie)

    def __bool__(self) -> bool:
        return len(self._trie) > 0

    def __repr__(self) -> str:
        return f"PunctuationDictionary({len(self)} entries)"


# ============================================================================
# Dictionary Loading
# ============================================================================

# Module-level singleton
_DICTIONARY: Optional[PunctuationDictionary] = None


def get_dictionary_path() -> Optional[Path]:
    """Get the configured dictionary path, or None for the built-in entries."""
    value = os.environ.get(DICTIONARY_ENV_VAR)
    return Path(value) if value else None


def is_dictionary_loaded() -> bool:
    """Check if dictionary is loaded."""
    return _DICTIONARY is not None


def load_dictionary(path: Optional[DictionaryPath] = None) -> PunctuationDictionary:
    """
    Load the shared punctuation dictionary.

    Loaded once per process; later calls return the same instance.

    Args:
        path: Dictionary file. Falls back to $PUNCTMERGE_DICT, then to
            DEFAULT_PUNCTUATION.

    Returns:
        The loaded PunctuationDictionary
    """
    global _DICTIONARY

    if _DICTIONARY is not None:
        return _DICTIONARY

    if path is None:
        path = get_dictionary_path()

    if path is None:
        _DICTIONARY = PunctuationDictionary(DEFAULT_PUNCTUATION)
        logger.debug(f"Using built-in punctuation dictionary ({len(_DICTIONARY)} entries)")
    else:
        _DICTIONARY = PunctuationDictionary.load(path)

    return _DICTIONARY


def unload_dictionary():
    """Drop the shared dictionary so the next load starts fresh."""
    global _DICTIONARY
    _DICTIONARY = None
