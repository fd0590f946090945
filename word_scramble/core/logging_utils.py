import logging
import json
import datetime as dt
from typing import Dict, Any, Optional, Set

# Attributes from LogRecord that are often included by default or are special
LOG_RECORD_BUILTIN_ATTRS: Set[str] = {
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "thread", "threadName", "taskName",
}

class JSONFormatter(logging.Formatter):
    """Renders each record as one JSON object per line.

    `fmt_keys` maps output keys to LogRecord attribute names, e.g.
    {"level": "levelname", "logger": "name"}. Anything passed through
    `extra=` on the logging call is copied in as-is.
    """

    def __init__(self, *, fmt_keys: Optional[Dict[str, str]] = None, datefmt: Optional[str] = None):
        super().__init__(datefmt=datefmt)
        self.fmt_keys = fmt_keys if fmt_keys is not None else {}

    def format(self, record: logging.LogRecord) -> str:
        message = self._prepare_log_dict(record)
        return json.dumps(message, default=str)

    def _prepare_log_dict(self, record: logging.LogRecord) -> Dict[str, Any]:
        always_fields: Dict[str, Any] = {"message": record.getMessage()}

        if self.datefmt:
            always_fields["timestamp"] = self.formatTime(record, self.datefmt)
        else:  # ISO format in UTC
            always_fields["timestamp"] = dt.datetime.fromtimestamp(
                record.created, tz=dt.timezone.utc
            ).isoformat()

        if record.exc_info:
            always_fields["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            always_fields["stack_info"] = self.formatStack(record.stack_info)

        message_dict: Dict[str, Any] = {}
        for key, attr_name in self.fmt_keys.items():
            if attr_name in always_fields:
                message_dict[key] = always_fields[attr_name]
                continue
            val = getattr(record, attr_name, None)
            if val is not None:
                message_dict[key] = val

        mapped_attrs = set(self.fmt_keys.values())
        for key, value in always_fields.items():
            if key not in mapped_attrs and key not in message_dict:
                message_dict[key] = value

        # Extra fields that are not part of standard LogRecord attributes
        for key, val in record.__dict__.items():
            if key not in LOG_RECORD_BUILTIN_ATTRS and key not in message_dict and key not in mapped_attrs:
                message_dict[key] = val

        return message_dict
