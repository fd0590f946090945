# word_scramble/services/game_service.py
import logging
import threading
from typing import Any, Callable, Dict, List, Literal, Optional, Tuple

from word_scramble.core.config import settings
from word_scramble.models.enums import GamePhase
from word_scramble.models.game import GameState
from word_scramble.models.validation import WordValidationResult
from word_scramble.services.spell_checker import SpellChecker, WordfreqSpellChecker
from word_scramble.services.word_source import WordSource
from word_scramble.services.word_validator import validate_word

logger = logging.getLogger("word_scramble.services.game_service")  # Logger for this module

GameEventType = Literal[
    "game_started",
    "word_accepted",
    "word_rejected",
    "error_dismissed",
    "info_message",
]

class GameEvent:
    def __init__(self, event_type: GameEventType, payload: Dict[str, Any]):
        self.type = event_type
        self.payload = payload

    def to_dict(self):
        return {"type": self.type, "payload": self.payload}

    def __repr__(self):
        return f"GameEvent({self.type!r}, {self.payload!r})"


class SubmissionInFlightError(RuntimeError):
    """Raised when the session is asked to act while a submission is still being validated."""


def calculate_points(word: str, points_per_letter: int | None = None) -> int:
    if points_per_letter is None:
        points_per_letter = settings.POINTS_PER_LETTER
    return points_per_letter * len(word)


def process_word_submission(
    current_game_state: GameState,
    raw_word: str,
    spell_checker: SpellChecker,
    language: str | None = None,
) -> Tuple[GameState, WordValidationResult, List[GameEvent]]:
    """
    Validates one submission against the current game and, if accepted,
    records the word and its points. Modifies current_game_state IN PLACE,
    and only when the word is accepted.
    Returns the state, the validation result and the events to publish.
    """
    events: List[GameEvent] = []

    result = validate_word(raw_word, current_game_state, spell_checker, language=language)

    if not result.is_valid:
        logger.info(f"Rejected '{result.word}' for root '{current_game_state.root_word}': {result.error_kind.value}")
        events.append(GameEvent(event_type="word_rejected", payload={
            "word": result.word,
            "error_kind": result.error_kind.value,
            "title": result.error_title,
            "message": result.error_message,
        }))
        return current_game_state, result, events

    points = calculate_points(result.word)
    current_game_state.record(result.word, points)
    result.points_awarded = points

    logger.info(
        f"Accepted '{result.word}' for root '{current_game_state.root_word}': +{points}, score {current_game_state.score}",
        extra={"root_word": current_game_state.root_word, "points": points},
    )
    events.append(GameEvent(event_type="word_accepted", payload={
        "word": result.word,
        "points": points,
        "score": current_game_state.score,
        "used_words": list(current_game_state.used_words),
    }))
    return current_game_state, result, events


class GameSession:
    """
    The one live game of a running process, plus what the player is currently
    looking at (idle or an error being shown).

    Presentation code reads the game through the read-only accessors or
    `snapshot()`, and drives it with `submit`, `start_new_game` and
    `dismiss_error`. Subscribers get every GameEvent after the state change
    it describes has been applied.
    """

    def __init__(self, word_source: WordSource, spell_checker: SpellChecker, language: str | None = None):
        self.word_source = word_source
        self.spell_checker = spell_checker
        self.language = language or settings.SPELL_CHECK_LANGUAGE
        self._state: Optional[GameState] = None
        self._phase = GamePhase.IDLE
        self._last_error: Optional[WordValidationResult] = None
        self._notice: Optional[str] = None
        self._subscribers: List[Callable[[GameEvent], None]] = []
        self._submit_lock = threading.Lock()
        self.start_new_game()

    # --- Read-only access ---
    @property
    def root_word(self) -> str:
        return self._state.root_word

    @property
    def used_words(self) -> List[str]:
        return list(self._state.used_words)

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def last_error(self) -> Optional[WordValidationResult]:
        return self._last_error

    @property
    def notice(self) -> Optional[str]:
        """Standing message about the current game, e.g. that the word list could not be loaded."""
        return self._notice

    def snapshot(self) -> GameState:
        return self._state.model_copy(deep=True)

    # --- Observation ---
    def subscribe(self, callback: Callable[[GameEvent], None]) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[GameEvent], None]) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def _publish(self, events: List[GameEvent]) -> None:
        for event in events:
            for callback in list(self._subscribers):
                try:
                    callback(event)
                except Exception as e:
                    logger.exception(f"Subscriber {callback!r} failed on event '{event.type}': {e}")

    # --- Actions ---
    def start_new_game(self) -> GameState:
        """Replaces the current game with a fresh one on a random root word."""
        events: List[GameEvent] = []
        if not self._submit_lock.acquire(blocking=False):
            logger.warning("New game requested while a submission is in flight. Refusing.")
            raise SubmissionInFlightError("A word is still being checked.")
        try:
            root_word = self.word_source.random_word() or settings.FALLBACK_ROOT_WORD
            if self._state is None:
                self._state = GameState(root_word=root_word)
            else:
                self._state.reset(root_word)
            self._phase = GamePhase.IDLE
            self._last_error = None
            logger.info(f"New game started with root word '{self._state.root_word}'.")

            self._notice = None
            if self.word_source.is_fallback:
                self._notice = f"Word list unavailable, playing with '{self._state.root_word}'."
                events.append(GameEvent(event_type="info_message", payload={
                    "message": self._notice,
                    "reason": self.word_source.load_error,
                }))
            events.append(GameEvent(event_type="game_started", payload=self._state.model_dump()))
        finally:
            self._submit_lock.release()

        self._publish(events)
        return self.snapshot()

    def submit(self, raw_word: str) -> WordValidationResult:
        """
        Validates and, when accepted, records one word. Rejections are returned,
        never raised. Only one submission may be in flight at a time.
        """
        if not self._submit_lock.acquire(blocking=False):
            logger.warning(f"Submission of '{raw_word}' refused: another submission is in flight.")
            raise SubmissionInFlightError("A word is still being checked.")
        events: List[GameEvent] = []
        try:
            if self._phase is GamePhase.DISPLAYING_ERROR:
                events.extend(self._clear_error())

            self._state, result, submission_events = process_word_submission(
                self._state, raw_word, self.spell_checker, language=self.language
            )
            events.extend(submission_events)

            if not result.is_valid:
                self._phase = GamePhase.DISPLAYING_ERROR
                self._last_error = result
        finally:
            self._submit_lock.release()
            # Published even when validation raises
            self._publish(events)

        return result

    def dismiss_error(self) -> None:
        self._publish(self._clear_error())

    def _clear_error(self) -> List[GameEvent]:
        if self._phase is not GamePhase.DISPLAYING_ERROR:
            return []
        self._phase = GamePhase.IDLE
        self._last_error = None
        return [GameEvent(event_type="error_dismissed", payload={})]


def create_session(
    word_source: WordSource | None = None,
    spell_checker: SpellChecker | None = None,
) -> GameSession:
    """Builds the session from settings: bundled word list and the wordfreq spell checker."""
    if word_source is None:
        word_source = WordSource.from_file(settings.START_WORDS_PATH, fallback_word=settings.FALLBACK_ROOT_WORD)
    if spell_checker is None:
        spell_checker = WordfreqSpellChecker(min_zipf=settings.SPELL_CHECK_MIN_ZIPF)
    return GameSession(word_source, spell_checker)
