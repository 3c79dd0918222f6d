"""Logging setup.

Plain text in development, one JSON object per line in production
(``LOG_FORMAT=json``). Modules log through ``logging.getLogger(__name__)``;
fields passed with ``extra=`` are kept under ``"context"`` in JSON output.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Any

from sanhuu.core.config import settings

PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

# Chatty third-party loggers and the level they are capped at.
_QUIET_LOGGERS = {"uvicorn.access": logging.WARNING, "slowapi": logging.WARNING}


def _context(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON line; Cyrillic text is kept readable."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        context = _context(record)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


def _resolve_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or settings.LOG_LEVEL).upper()
    return logging.getLevelName(name) if isinstance(logging.getLevelName(name), int) else logging.INFO


def init_logging(level: int | str | None = None) -> None:
    """Attach a stdout handler to the root logger. Safe to call more than once."""
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    if settings.LOG_FORMAT.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    root.addHandler(handler)
    root.setLevel(_resolve_level(level))
    for name, cap in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(cap)
