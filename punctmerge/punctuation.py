"""
Punctuation pass for punctmerge.

Scans a tagged sentence for runs of words that together form a punctuation
entry and collapses each run into one word tagged as punctuation.

Runs are found greedily: starting at a word the dictionary knows, words are
appended while the concatenation stays a valid dictionary prefix. The
candidates are then checked from the longest back, and the first one that
cannot be extended any further becomes the merged word.
"""

import logging
from typing import List, Optional

from punctmerge import PUNCTUATION_TAG, MalformedTokenError, TaggedWord
from punctmerge.dictionary import PunctuationDictionary

logger = logging.getLogger(__name__)


def check_sentence(sentence: List[TaggedWord]) -> None:
    """
    Make sure every word has text before anything is mutated.

    Raises:
        MalformedTokenError: If a word has no text or non-string text
    """
    for index, word in enumerate(sentence):
        text = getattr(word, "text", None)
        if not isinstance(text, str):
            raise MalformedTokenError(
                f"word at position {index} has no text (got {text!r})"
            )


class PunctuationPass:
    """
    Postprocess pass that merges split punctuation.

    A pass built without a dictionary (or with an empty one) is disabled and
    leaves every sentence untouched.
    """

    def __init__(self, dictionary: Optional[PunctuationDictionary] = None):
        self.dictionary = dictionary

    @property
    def enabled(self) -> bool:
        return self.dictionary is not None and len(self.dictionary) > 0

    def process(self, sentence: List[TaggedWord]) -> None:
        """Merge punctuation runs in ``sentence`` in place."""
        if not self.enabled:
            return
        if not sentence:
            return

        check_sentence(sentence)
        dictionary = self.dictionary

        i = 0
        while i < len(sentence):
            word = sentence[i]
            text = word.text
            if not dictionary.has_prefix(text):
                i += 1
                continue

            # Longer and longer spans starting at i, while still a prefix
            candidates = []
            for j in range(i + 1, len(sentence)):
                text += sentence[j].text
                if not dictionary.has_prefix(text):
                    break
                candidates.append(text)

            k = len(candidates) - 1
            while k >= 0 and dictionary.can_continue(candidates[k]):
                k -= 1

            if k >= 0:
                end = i + k + 2
                logger.debug(
                    f"Merging {[w.text for w in sentence[i:end]]} -> {candidates[k]!r}"
                )
                word.text = candidates[k]
                word.tag = PUNCTUATION_TAG
                del sentence[i + 1:end]
            else:
                word.tag = PUNCTUATION_TAG

            i += 1


def process_sentences(
    sentences: List[List[TaggedWord]],
    dictionary: Optional[PunctuationDictionary],
) -> List[List[TaggedWord]]:
    """Run one pass over several sentences, sharing the dictionary."""
    punctuation_pass = PunctuationPass(dictionary)
    if not punctuation_pass.enabled:
        logger.warning("No punctuation dictionary loaded; punctuation merging disabled")
    for sentence in sentences:
        punctuation_pass.process(sentence)
    return sentences
