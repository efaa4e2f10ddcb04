from __future__ import annotations

import logging
from typing import Any


# LogRecord attributes that `extra` must not overwrite
_RESERVED = frozenset({
    "name", "msg", "args", "message", "asctime", "levelname", "levelno", "pathname",
    "filename", "module", "lineno", "funcName", "created", "msecs", "exc_info", "exc_text",
    "stack_info", "thread", "threadName", "process", "processName",
})


class LoggingEventSink:
    """Forwards pipeline events to stdlib logging; fields land on the record as extras."""

    def __init__(self, logger_name: str = "registry.events", level: int = logging.INFO) -> None:
        self.logger = logging.getLogger(logger_name)
        self.level = level

    def emit(self, event: str, **fields: Any) -> None:
        level = logging.WARNING if fields.get("status") == "error" else self.level
        extra = {(f"event_{k}" if k in _RESERVED else k): v for k, v in fields.items()}
        self.logger.log(level, event, extra=extra)


class NullEventSink:
    def emit(self, event: str, **fields: Any) -> None:
        return None
