"""Structured Logging — one handler on the root logger, JSON or plain text.

Invariants:
    - Every record carries timestamp (taken from the record), level, logger, message
    - Only the known extras in LOG_EXTRAS are emitted; session tokens are never
      among them, so an ad-hoc extra cannot leak one
    - setup_logging() is idempotent: a repeated call replaces the handler it
      installed instead of stacking a second one

Design Decisions:
    - stdlib logging with small formatters, configured from the lifespan
    - The text format appends the same extras as key=value pairs, so local
      runs still show order ids and usernames
"""

import json
import logging
from datetime import datetime, timezone

LOG_EXTRAS = (
    "username", "order_id", "error_code", "operation",
    "path", "backend", "status_code",
)

_HANDLER_NAME = "orderflow"


def _extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in LOG_EXTRAS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Plain line for development, extras appended as key=value."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s %(message)s")

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        extras = _extras(record)
        if extras:
            line += " " + " ".join(f"{k}={v}" for k, v in extras.items())
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the application handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
