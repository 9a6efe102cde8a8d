"""Structured Logging: JSON formatter and setup for the console's diagnostic sink.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (command, service, task_name, error_code, error_category) surfaced when present
    - Logs go to stderr by default, never to the operator's output stream

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once per session by main.open_console
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TextIO

_EXTRA_FIELDS = (
    "command", "service", "task_name", "error_code", "error_category",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(
    level: str = "INFO", fmt: str = "text", stream: TextIO | None = None,
) -> logging.Handler:
    """Configure root logging. Returns the installed handler."""
    handler = logging.StreamHandler(stream or sys.stderr)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
