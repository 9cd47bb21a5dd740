"""
punctmerge: Punctuation merging for tagged token streams

A postprocessing pass for word segmenters. Runs of tokens that together
spell a known punctuation sequence ("…" + "…" -> "……") are collapsed into
a single token tagged as punctuation.

Basic Usage:
    import punctmerge
    from punctmerge import TaggedWord

    sentence = [TaggedWord("他", "n"), TaggedWord("…", "w"), TaggedWord("…", "w")]
    punctmerge.merge_punctuation(sentence)
    # [TaggedWord('他', tag='n'), TaggedWord('……', tag='w')]
"""

from dataclasses import dataclass
from typing import List

__version__ = "0.1.0"

# Tag given to merged punctuation tokens
PUNCTUATION_TAG = "w"


# =============================================================================
# Token Data Structure
# =============================================================================

@dataclass(slots=True)
class TaggedWord:
    """
    A segmented word and its tag.

    Attributes:
        text: The word as it appears in the sentence
        tag: Category label assigned upstream (e.g., "n", "v", "w")
    """
    text: str
    tag: str = ""

    def __repr__(self) -> str:
        return f"TaggedWord({self.text!r}, tag={self.tag!r})"


# =============================================================================
# Exceptions
# =============================================================================

class MalformedTokenError(ValueError):
    """Raised when a token handed to the pass has no usable text."""
    pass


# =============================================================================
# Main API
# =============================================================================

def merge_punctuation(sentence: List[TaggedWord], dictionary=None) -> List[TaggedWord]:
    """
    Merge punctuation runs in a sentence, in place.

    Args:
        sentence: Tagged words of one sentence (mutated in place)
        dictionary: PunctuationDictionary to use. Uses the shared
            dictionary (see ``dictionary.load_dictionary``) if not given.

    Returns:
        The same list, for chaining

    Raises:
        MalformedTokenError: If a token's text is missing
    """
    from punctmerge.dictionary import load_dictionary
    from punctmerge.punctuation import PunctuationPass

    if dictionary is None:
        dictionary = load_dictionary()

    PunctuationPass(dictionary).process(sentence)
    return sentence


def get_version() -> str:
    """Get the library version."""
    return __version__


# =============================================================================
# Module-level exports
# =============================================================================

__all__ = [
    # Data classes
    "TaggedWord",
    "PUNCTUATION_TAG",
    # API
    "merge_punctuation",
    "get_version",
    # Exceptions
    "MalformedTokenError",
    # Version
    "__version__",
]
