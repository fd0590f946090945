# word_scramble/services/word_validator.py
import logging
from typing import List

from word_scramble.core.config import settings
from word_scramble.models.enums import WordErrorKind
from word_scramble.models.game import GameState
from word_scramble.models.validation import WordValidationResult
from word_scramble.services.spell_checker import SpellChecker

logger = logging.getLogger("word_scramble.services.word_validator")  # Logger for this module

_NUMBER_WORDS = {1: "one", 2: "two", 3: "three", 4: "four", 5: "five", 6: "six"}

def normalize_word(raw_word: str) -> str:
    return (raw_word or "").strip().lower()

def is_long_enough(word: str, min_length: int = 3) -> bool:
    return len(word) >= min_length

def is_not_root_word(word: str, root_word: str) -> bool:
    return word != root_word

def is_original(word: str, used_words: List[str]) -> bool:
    return word not in used_words

def is_possible(word: str, root_word: str) -> bool:
    """
    True if `word` can be spelled from the letters of `root_word`, using each
    letter of the root at most as many times as it occurs there.
    """
    available = list(root_word)
    for letter in word:
        try:
            available.remove(letter)  # Consumes the first remaining occurrence
        except ValueError:
            return False
    return True

def is_real(word: str, spell_checker: SpellChecker, language: str = "en") -> bool:
    return spell_checker.is_real_word(word, language)


def validate_word(
    raw_word: str,
    state: GameState,
    spell_checker: SpellChecker,
    language: str | None = None,
    min_length: int | None = None,
) -> WordValidationResult:
    """
    Runs the checks in a fixed order and stops at the first failure:
    length, root word, originality, spellable from root, dictionary.
    The spell checker is only consulted once every local check has passed.
    """
    language = language or settings.SPELL_CHECK_LANGUAGE
    min_length = settings.MIN_WORD_LENGTH if min_length is None else min_length
    word = normalize_word(raw_word)
    root_word = state.root_word

    if not is_long_enough(word, min_length):
        length_text = _NUMBER_WORDS.get(min_length, str(min_length))
        return WordValidationResult.rejected(
            word, WordErrorKind.TOO_SHORT,
            "Entry is too short",
            f"Your input word is too short. Make sure your new word has at least {length_text} letters."
        )

    if not is_not_root_word(word, root_word):
        return WordValidationResult.rejected(
            word, WordErrorKind.SAME_AS_ROOT,
            "Same as Root Word",
            f"You have to build a new word out of the letters of {root_word}"
        )

    if not is_original(word, state.used_words):
        return WordValidationResult.rejected(
            word, WordErrorKind.ALREADY_USED,
            "Word used already",
            "Be more original!"
        )

    if not is_possible(word, root_word):
        return WordValidationResult.rejected(
            word, WordErrorKind.NOT_POSSIBLE,
            "Word not possible",
            f"You can't spell that word from '{root_word}'"
        )

    if not is_real(word, spell_checker, language):
        return WordValidationResult.rejected(
            word, WordErrorKind.NOT_REAL,
            "Word not recognized",
            "You can't just make them up, you know!"
        )

    logger.debug(f"Word '{word}' passed all checks against root '{root_word}'.")
    return WordValidationResult.accepted(word)
