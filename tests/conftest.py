# tests/conftest.py
import pytest

from word_scramble.services.game_service import GameSession
from word_scramble.services.spell_checker import WordListSpellChecker
from word_scramble.services.word_source import WordSource

# Real words that can be spelled from "silkworm", plus a few that cannot
TEST_LEXICON = [
    "silk", "worm", "worms", "milk", "mil", "slim", "skim", "lorm",
    "silkworm", "owl", "row", "low", "mow", "rim", "limo", "word", "sword",
]

@pytest.fixture
def spell_checker() -> WordListSpellChecker:
    return WordListSpellChecker(TEST_LEXICON)

@pytest.fixture
def word_source() -> WordSource:
    return WordSource(["silkworm"])

@pytest.fixture
def session(word_source, spell_checker) -> GameSession:
    """A fresh game on root word 'silkworm'."""
    return GameSession(word_source, spell_checker)

@pytest.fixture
def recorded_events(session):
    events = []
    session.subscribe(events.append)
    return events

@pytest.fixture
def start_words_file(tmp_path):
    path = tmp_path / "start.txt"
    path.write_text("silkworm\nairplane\n\nBirthday\nairplane\n", encoding="utf-8")
    return path
