from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol

from ports.events import EventSinkPort
from services.events import NullEventSink


@dataclass
class RunContext:
    params: Any = None
    url: Optional[str] = None
    html: Optional[str] = None
    document: Any = None
    entries: list = field(default_factory=list)
    total_count: int = 0
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step], events: Optional[EventSinkPort] = None):
        self.steps = steps
        self.events = events or NullEventSink()

    def run(self, ctx: RunContext) -> RunContext:
        for step in self.steps:
            name = getattr(step, "name", type(step).__name__)
            started = time.perf_counter()
            try:
                ctx = step.run(ctx)
            except Exception as exc:
                self.events.emit(
                    "step",
                    step=name,
                    status="error",
                    duration_ms=int((time.perf_counter() - started) * 1000),
                    error=str(exc),
                )
                raise
            self.events.emit(
                "step",
                step=name,
                status="ok",
                duration_ms=int((time.perf_counter() - started) * 1000),
            )
        return ctx
