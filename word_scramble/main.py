# word_scramble/main.py
# Start the game with `word-scramble` (or `python -m word_scramble.main`).
import atexit
import json
import logging
import logging.config
import logging.handlers
import pathlib
from typing import Callable, Optional

from word_scramble.core.config import settings
from word_scramble.services.game_service import GameEvent, GameSession, create_session

_queue_handler_instance: Optional[logging.handlers.QueueHandler] = None  # Module-level variable

NEW_GAME_COMMAND = ":new"
QUIT_COMMAND = ":quit"

def configure_logging_from_file(config_file: pathlib.Path | None = None):
    """Loads logging configuration from the JSON file and starts the QueueHandler's listener."""
    global _queue_handler_instance
    config_file = config_file or settings.LOGGING_CONFIG_PATH
    try:
        with open(config_file) as f_in:
            config = json.load(f_in)

        log_dir = pathlib.Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = config.get("handlers", {}).get("file_json")
        if file_handler:
            file_handler["filename"] = str(log_dir / pathlib.Path(file_handler["filename"]).name)

        logging.config.dictConfig(config)

        root_logger = logging.getLogger()
        for handler in root_logger.handlers:
            if isinstance(handler, logging.handlers.QueueHandler):
                _queue_handler_instance = handler
                break

        if _queue_handler_instance and getattr(_queue_handler_instance, "listener", None):
            _queue_handler_instance.listener.start()
            atexit.register(shutdown_logging)
        else:
            logging.getLogger("word_scramble.main.logging_setup_check").error(
                "QueueHandler not found in root logger. Off-thread logging will not work as intended."
            )
    except FileNotFoundError:
        logging.basicConfig(level=logging.INFO, format='%(levelname)-8s [%(name)s] %(message)s')
        logging.getLogger("word_scramble.main.logging_setup_fallback").error(
            f"Logging configuration file not found at {config_file}. Using basic logging.")
    except json.JSONDecodeError as e:
        logging.basicConfig(level=logging.INFO, format='%(levelname)-8s [%(name)s] %(message)s')
        logging.getLogger("word_scramble.main.logging_setup_fallback").error(
            f"Failed to parse logging configuration file {config_file}: {e}. Using basic logging.")
    except (ValueError, OSError) as e:
        # dictConfig raises ValueError for bad handler definitions
        logging.basicConfig(level=logging.INFO, format='%(levelname)-8s [%(name)s] %(message)s')
        logging.getLogger("word_scramble.main.logging_setup_fallback").error(
            f"Failed to configure logging from file: {e}. Using basic logging.", exc_info=True)

def shutdown_logging():
    global _queue_handler_instance
    if _queue_handler_instance and getattr(_queue_handler_instance, "listener", None):
        _queue_handler_instance.listener.stop()
    _queue_handler_instance = None


logger = logging.getLogger("word_scramble.main")  # Logger for this module

def render_game(session: GameSession) -> str:
    lines = [
        f"== {session.root_word} ==",
        f"Your current score is: {session.score}",
    ]
    for word in session.used_words:
        lines.append(f"  ({len(word)}) {word}")
    return "\n".join(lines)

def run_console(
    session: GameSession,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    """
    Minimal text front end: every line is a word submission, except
    `:new` (start a new game) and `:quit`. EOF also quits.
    """
    def on_event(event: GameEvent):
        if event.type == "info_message":
            output_fn(event.payload["message"])

    session.subscribe(on_event)
    try:
        if session.notice:
            output_fn(session.notice)
        output_fn(render_game(session))
        output_fn(f"Type a word, {NEW_GAME_COMMAND} for a new game or {QUIT_COMMAND} to leave.")
        while True:
            try:
                line = input_fn("> ")
            except EOFError:
                break

            command = line.strip().lower()
            if command == QUIT_COMMAND:
                break
            if command == NEW_GAME_COMMAND:
                session.start_new_game()
                output_fn(render_game(session))
                continue

            result = session.submit(line)
            if result.is_valid:
                output_fn(f"+{result.points_awarded} for '{result.word}'")
                output_fn(render_game(session))
            else:
                output_fn(f"{result.error_title}: {result.error_message}")
                session.dismiss_error()
    finally:
        session.unsubscribe(on_event)

def main():
    configure_logging_from_file()
    logger.info(f"{settings.PROJECT_NAME} starting.")
    session = create_session()
    run_console(session)
    logger.info(f"{settings.PROJECT_NAME} finished with score {session.score}.")


if __name__ == "__main__":
    main()
