# tests/services/test_word_source.py
import random

from word_scramble.services.word_source import WordSource, load_word_list

def test_load_word_list_cleans_lines(start_words_file):
    result = load_word_list(start_words_file)
    assert result.ok
    assert result.words == ["silkworm", "airplane", "birthday"]
    assert result.source == str(start_words_file)

def test_load_word_list_missing_file(tmp_path):
    result = load_word_list(tmp_path / "missing.txt")
    assert not result.ok
    assert result.words == []
    assert "Could not read word list" in result.error

def test_load_word_list_empty_file(tmp_path):
    path = tmp_path / "start.txt"
    path.write_text("\n\n   \n", encoding="utf-8")
    result = load_word_list(path)
    assert not result.ok
    assert result.error == "Word list is empty."

def test_random_word_comes_from_list(start_words_file):
    source = WordSource.from_file(start_words_file)
    assert not source.is_fallback
    assert source.load_error is None
    for _ in range(20):
        assert source.random_word() in {"silkworm", "airplane", "birthday"}

def test_random_word_uses_random_choice(mocker):
    choice = mocker.patch("word_scramble.services.word_source.random.choice", return_value="airplane")
    source = WordSource(["silkworm", "airplane"])
    assert source.random_word() == "airplane"
    choice.assert_called_once_with(["silkworm", "airplane"])

def test_missing_file_falls_back(tmp_path):
    source = WordSource.from_file(tmp_path / "missing.txt", fallback_word="Silkworm")
    assert source.is_fallback
    assert source.load_error is not None
    assert source.random_word() == "silkworm"

def test_words_property_is_a_copy():
    source = WordSource(["silkworm"])
    source.words.append("airplane")
    assert source.words == ["silkworm"]

def test_bundled_list_loads():
    from word_scramble.core.config import settings
    source = WordSource.from_file(settings.START_WORDS_PATH)
    assert not source.is_fallback
    random.seed(1)
    assert source.random_word() in source.words
