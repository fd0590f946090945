# word_scramble/services/spell_checker.py
import logging
from functools import lru_cache
from typing import Callable, Container, Iterable, Protocol, Set

from spellchecker import SpellChecker as PySpellChecker
from wordfreq import zipf_frequency

logger = logging.getLogger("word_scramble.services.spell_checker")  # Logger for this module

DEFAULT_LANGUAGE = "en"

class SpellChecker(Protocol):
    def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool: ...


@lru_cache(maxsize=None)
def load_lexicon(language: str = DEFAULT_LANGUAGE) -> PySpellChecker:
    """English (or other) dictionary shipped with pyspellchecker, loaded once per language."""
    logger.info(f"Loading '{language}' dictionary for spell checking.")
    return PySpellChecker(language=language)


class WordfreqSpellChecker:
    """
    A word is real when it is in the dictionary for its language and wordfreq
    has also seen it often enough.

    wordfreq alone counts anything that shows up in web text (letter clusters
    such as "lmr" or "klm" have a Zipf score above 2), so dictionary membership
    comes first. wordfreq reports frequencies on the Zipf scale (log10 of
    occurrences per billion words); unknown words score 0.
    """

    def __init__(self, min_zipf: float = 1.0, lexicon_loader: Callable[[str], Container[str]] = load_lexicon):
        self.min_zipf = min_zipf
        self.lexicon_loader = lexicon_loader

    def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if not word or not word.isalpha():
            return False
        word = word.lower()
        if word not in self.lexicon_loader(language):
            logger.debug(f"'{word}' is not in the '{language}' dictionary.")
            return False
        frequency = zipf_frequency(word, language)
        logger.debug(f"wordfreq zipf for '{word}' ({language}): {frequency}")
        return frequency >= self.min_zipf


class WordListSpellChecker:
    """Fixed lexicon lookup. The language tag is accepted but a single list serves all."""

    def __init__(self, words: Iterable[str]):
        self._words: Set[str] = {w.strip().lower() for w in words if w and w.strip()}

    def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if not word:
            return False
        return word.lower() in self._words
