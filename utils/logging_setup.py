from __future__ import annotations

import logging
import sys
from typing import Any, Optional, TextIO

from config.settings import get_settings


LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s %(message)s "
    "step=%(step)s status=%(status)s duration_ms=%(duration_ms)s "
    "url=%(url)s count=%(count)s error=%(error)s"
)

# Loggers of the HTTP stack that log every request at DEBUG
QUIET_LOGGERS = ("urllib3", "charset_normalizer")

_HANDLER: Optional[logging.Handler] = None


class SafeExtraFormatter(logging.Formatter):
    """Formatter that tolerates missing extra fields by injecting defaults."""

    DEFAULTS: dict[str, Any] = {
        "step": "-",
        "status": "-",
        "duration_ms": "-",
        "url": "-",
        "count": "-",
        "error": "-",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        for key, value in self.DEFAULTS.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return super().format(record)


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever sys.stderr is at emit time, so stdout stays free for JSON output."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def resolve_level(level: str | None) -> int:
    """Level name (any case) to its number; unknown names fall back to INFO."""
    value = logging.getLevelName((level or get_settings().log_level).upper())
    return value if isinstance(value, int) else logging.INFO


def init_logging(level: str | None = None, stream: Optional[TextIO] = None) -> logging.Handler:
    """Install the structured handler on the root logger once; later calls only change the level."""
    global _HANDLER
    log_level = resolve_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if _HANDLER is None:
        _HANDLER = logging.StreamHandler(stream) if stream is not None else _StderrHandler()
        _HANDLER.setFormatter(SafeExtraFormatter(fmt=LOG_FORMAT))
        root_logger.addHandler(_HANDLER)
    _HANDLER.setLevel(log_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
    return _HANDLER
