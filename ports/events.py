from __future__ import annotations

from typing import Any, Protocol


class EventSinkPort(Protocol):
    def emit(self, event: str, **fields: Any) -> None:
        ...
