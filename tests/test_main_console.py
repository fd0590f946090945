# tests/test_main_console.py
import json
import logging

import pytest

from word_scramble import main as main_module
from word_scramble.core.config import settings
from word_scramble.main import render_game, run_console

class ScriptedInput:
    """Feeds prepared lines to run_console, then signals EOF."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

def test_render_game_lists_words_with_lengths(session):
    session.submit("worm")
    session.submit("slim")
    text = render_game(session)
    assert text.splitlines() == [
        "== silkworm ==",
        "Your current score is: 80",
        "  (4) slim",
        "  (4) worm",
    ]

def test_run_console_plays_until_quit(session):
    output = []
    run_console(session, ScriptedInput(["Worm", "ab", ":quit", "silk"]), output.append)

    assert "+40 for 'worm'" in output
    assert "Entry is too short: Your input word is too short. Make sure your new word has at least three letters." in output
    assert session.used_words == ["worm"]  # "silk" comes after :quit

def test_run_console_new_game_and_eof(session):
    output = []
    inputs = ScriptedInput(["silk", ":NEW", "worm"])
    run_console(session, inputs, output.append)

    assert session.used_words == ["worm"]
    assert session.score == 40
    assert len(inputs.prompts) == 4  # the last prompt hits EOF

def test_run_console_leaves_no_error_displayed(session):
    run_console(session, ScriptedInput(["silkworm"]), lambda line: None)
    assert session.last_error is None

def test_run_console_shows_fallback_notice(tmp_path, spell_checker):
    from word_scramble.services.game_service import GameSession
    from word_scramble.services.word_source import WordSource

    session = GameSession(WordSource.from_file(tmp_path / "missing.txt"), spell_checker)
    output = []
    run_console(session, ScriptedInput([":new"]), output.append)
    assert "Word list unavailable, playing with 'silkworm'." in output

@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    main_module.shutdown_logging()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)

def test_configure_logging_writes_json_lines(tmp_path, monkeypatch, restore_logging):
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    main_module.configure_logging_from_file()

    logging.getLogger("word_scramble.tests").info("Accepted 'silk'", extra={"points": 40})
    main_module.shutdown_logging()

    log_file = tmp_path / "logs" / "word_scramble.log.jsonl"
    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    record = next(r for r in records if r["message"] == "Accepted 'silk'")
    assert record["level"] == "INFO"
    assert record["logger"] == "word_scramble.tests"
    assert record["points"] == 40

def test_configure_logging_missing_file_falls_back(tmp_path, restore_logging):
    main_module.configure_logging_from_file(tmp_path / "nope.json")
    assert main_module._queue_handler_instance is None

def test_main_runs_console(mocker):
    configure = mocker.patch("word_scramble.main.configure_logging_from_file")
    run = mocker.patch("word_scramble.main.run_console")
    main_module.main()
    configure.assert_called_once()
    run.assert_called_once()

def test_run_console_shows_fallback_notice_before_first_prompt(tmp_path, spell_checker):
    from word_scramble.services.game_service import GameSession
    from word_scramble.services.word_source import WordSource

    session = GameSession(WordSource.from_file(tmp_path / "missing.txt"), spell_checker)
    output = []
    run_console(session, ScriptedInput([]), output.append)
    assert output[0] == "Word list unavailable, playing with 'silkworm'."
