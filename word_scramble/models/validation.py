# word_scramble/models/validation.py
from typing import Optional
from pydantic import BaseModel

from word_scramble.models.enums import WordErrorKind

class WordValidationResult(BaseModel):
    is_valid: bool
    word: str  # Normalized form of the submission
    error_kind: Optional[WordErrorKind] = None
    error_title: Optional[str] = None
    error_message: Optional[str] = None
    points_awarded: int = 0

    @classmethod
    def accepted(cls, word: str, points: int = 0) -> "WordValidationResult":
        return cls(is_valid=True, word=word, points_awarded=points)

    @classmethod
    def rejected(cls, word: str, kind: WordErrorKind, title: str, message: str) -> "WordValidationResult":
        return cls(is_valid=False, word=word, error_kind=kind, error_title=title, error_message=message)
