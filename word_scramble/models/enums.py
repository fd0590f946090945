from enum import Enum

class WordErrorKind(Enum):
    TOO_SHORT = "too_short"
    SAME_AS_ROOT = "same_as_root"
    ALREADY_USED = "already_used"
    NOT_POSSIBLE = "not_possible"
    NOT_REAL = "not_real"

class GamePhase(Enum):
    IDLE = "idle"  # Waiting for the next submission
    DISPLAYING_ERROR = "displaying_error"  # A rejection is being shown to the player
