"""Structured JSON logger.

Outputs one JSON object per line:
{"time":"2026-03-02T07:12:44.102311+01:00","level":"INFO","source":{"function":"extract","file":"extractor.py","line":88},"msg":"schedule extracted","classes":12}
"""

import json
import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

LOG_LEVEL_ENV_VAR = "SUBSTITUTION_LOG_LEVEL"

# Fields attached to every record logged inside a log_context block
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def _resolve_level(value: str | None, default: int = logging.INFO) -> int:
    """Map a level name or number from the environment to a logging level."""
    if not value or not value.strip():
        return default
    value = value.strip()
    if value.isdigit():
        return int(value)
    resolved = logging.getLevelName(value.upper())
    return resolved if isinstance(resolved, int) else default


class StructuredFormatter(logging.Formatter):
    """JSON formatter with source location and extra fields."""

    def format(self, record: logging.LogRecord) -> str:
        now = datetime.now(timezone.utc).astimezone()

        log_entry: dict[str, Any] = {
            "time": now.isoformat(),
            "level": record.levelname,
            "source": {
                "function": record.funcName,
                "file": record.pathname,
                "line": record.lineno,
            },
            "msg": record.getMessage(),
        }

        ctx_fields = _log_context.get()
        if ctx_fields:
            log_entry.update(ctx_fields)

        if hasattr(record, "extra_fields"):
            log_entry.update(record.extra_fields)

        return json.dumps(log_entry, default=str)


class StructuredLogger:
    """Logger that outputs structured JSON logs with context support."""

    def __init__(self, name: str = "app", level: int | None = None):
        self._logger = logging.getLogger(name)
        if level is None:
            level = _resolve_level(os.getenv(LOG_LEVEL_ENV_VAR))
        self._logger.setLevel(level)

        self._logger.handlers.clear()

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        self._logger.addHandler(handler)

        self._logger.propagate = False

    @property
    def level(self) -> int:
        return self._logger.level

    def _log(
        self,
        level: int,
        msg: str,
        stacklevel: int = 3,
        **fields: Any,
    ) -> None:
        extra = {"extra_fields": fields} if fields else {}
        self._logger.log(level, msg, stacklevel=stacklevel, extra=extra)

    def debug(self, msg: str, **fields: Any) -> None:
        """Log a debug message with optional fields."""
        self._log(logging.DEBUG, msg, **fields)

    def info(self, msg: str, **fields: Any) -> None:
        """Log an info message with optional fields."""
        self._log(logging.INFO, msg, **fields)

    def warn(self, msg: str, **fields: Any) -> None:
        """Log a warning message with optional fields."""
        self._log(logging.WARNING, msg, **fields)

    def error(self, msg: str, **fields: Any) -> None:
        """Log an error message with optional fields."""
        self._log(logging.ERROR, msg, **fields)


@contextmanager
def log_context(**fields: Any) -> Iterator[None]:
    """Attach fields to every log message emitted inside the block.

    Example:
        with log_context(pdf="plan.pdf"):
            logger.info("loading pdf")  # includes pdf
    """
    token = _log_context.set({**_log_context.get(), **fields})
    try:
        yield
    finally:
        _log_context.reset(token)


def get_context() -> dict[str, Any]:
    """Get current context fields."""
    return _log_context.get().copy()


# Default logger instance
logger = StructuredLogger("substitution_extractor")
