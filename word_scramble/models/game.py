# word_scramble/models/game.py
from pydantic import BaseModel, Field, field_validator
from typing import List

def _clean_root_word(value: str) -> str:
    value = value.strip().lower()
    if not value:
        raise ValueError("Root word cannot be empty.")
    return value

class GameState(BaseModel):
    root_word: str = Field(min_length=1)
    used_words: List[str] = Field(default_factory=list, description="Accepted words, most recent first.")
    score: int = Field(default=0, ge=0)

    @field_validator("root_word")
    @classmethod
    def _normalize_root_word(cls, value: str) -> str:
        return _clean_root_word(value)

    def reset(self, new_root: str) -> None:
        """Starts over on a new root word. Nothing from the previous game is kept."""
        self.root_word = _clean_root_word(new_root)
        self.used_words = []  # New list, earlier snapshots keep their own
        self.score = 0

    def record(self, word: str, points: int) -> None:
        """Stores an already validated word on top of the list and adds its points."""
        self.used_words.insert(0, word)
        self.score += points

class WordListLoadResult(BaseModel):
    words: List[str] = []
    source: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.words)
