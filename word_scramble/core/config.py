# word_scramble/core/config.py
import pathlib
import logging
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

logger = logging.getLogger("word_scramble.core.config")  # Logger for this module

PACKAGE_DIR = pathlib.Path(__file__).resolve().parent.parent

class Settings(BaseSettings):
    PROJECT_NAME: str = "Word Scramble"

    # Bundled list of root words, one per line
    START_WORDS_PATH: pathlib.Path = PACKAGE_DIR / "data" / "start.txt"
    # Used whenever the start word list cannot be loaded or is empty
    FALLBACK_ROOT_WORD: str = "silkworm"

    MIN_WORD_LENGTH: int = 3
    POINTS_PER_LETTER: int = 10

    SPELL_CHECK_LANGUAGE: str = "en"
    # wordfreq Zipf scale: 0 means never seen, ~1 is roughly once per billion words
    SPELL_CHECK_MIN_ZIPF: float = 1.0

    LOG_DIR: pathlib.Path = pathlib.Path("logs")
    LOGGING_CONFIG_PATH: pathlib.Path = PACKAGE_DIR / "logging_config.json"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

@lru_cache()
def get_settings():
    settings_instance = Settings()
    logger.debug(f"Start words path set to: {settings_instance.START_WORDS_PATH}")
    return settings_instance

settings = get_settings()
