# word_scramble/services/word_source.py
import logging
import pathlib
import random
from typing import List, Optional

from word_scramble.models.game import WordListLoadResult

logger = logging.getLogger("word_scramble.services.word_source")  # Logger for this module

def load_word_list(path: str | pathlib.Path) -> WordListLoadResult:
    """
    Loads root words from a text file, one word per line.

    Lines are stripped and lowercased, blank lines are skipped and duplicates
    dropped (first occurrence wins). Never raises for a missing, unreadable
    or empty file: the problem is reported through `error` instead.
    """
    path = pathlib.Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw_lines = f.read().splitlines()
    except OSError as e:
        logger.warning(f"Could not read word list at {path}: {e}")
        return WordListLoadResult(source=str(path), error=f"Could not read word list: {e}")
    except UnicodeDecodeError as e:
        logger.warning(f"Word list at {path} is not valid UTF-8: {e}")
        return WordListLoadResult(source=str(path), error=f"Word list is not valid UTF-8: {e}")

    words: List[str] = []
    seen = set()
    for line in raw_lines:
        word = line.strip().lower()
        if word and word not in seen:
            seen.add(word)
            words.append(word)

    if not words:
        logger.warning(f"Word list at {path} contains no words.")
        return WordListLoadResult(source=str(path), error="Word list is empty.")

    logger.info(f"Loaded {len(words)} root words from {path}")
    return WordListLoadResult(words=words, source=str(path))


class WordSource:
    """Supplies random root words, falling back to a fixed word when it has none."""

    def __init__(self, words: List[str], fallback_word: str = "silkworm", load_error: Optional[str] = None):
        self._words = [w.strip().lower() for w in words if w and w.strip()]
        self.fallback_word = fallback_word.strip().lower()
        self.load_error = load_error

    @classmethod
    def from_file(cls, path: str | pathlib.Path, fallback_word: str = "silkworm") -> "WordSource":
        result = load_word_list(path)
        if not result.ok:
            logger.warning(f"Using fallback root word '{fallback_word}': {result.error}")
        return cls(result.words, fallback_word=fallback_word, load_error=result.error)

    @property
    def words(self) -> List[str]:
        return list(self._words)

    @property
    def is_fallback(self) -> bool:
        return not self._words

    def random_word(self) -> str:
        if not self._words:
            return self.fallback_word
        return random.choice(self._words)
