from __future__ import annotations

from typing import Optional

from config.settings import Settings
from extraction.entries import locate_entries
from extraction.fields import ExtractionContext, extract_entries
from extraction.payload import PayloadIndex, find_payload_records
from pipelines.runner import RunContext
from ports.events import EventSinkPort
from services.events import NullEventSink


class ExtractEntries:
    name = "extract_entries"

    def __init__(self, settings: Settings, events: Optional[EventSinkPort] = None, use_requested_location: bool = True) -> None:
        self.settings = settings
        self.events = events or NullEventSink()
        self.use_requested_location = use_requested_location

    def run(self, ctx: RunContext) -> RunContext:
        fragments = locate_entries(ctx.document, self.settings)
        payload = PayloadIndex(find_payload_records(ctx.document), self.settings)
        requested = getattr(ctx.params, "location", None) if self.use_requested_location else None
        extraction_ctx = ExtractionContext(settings=self.settings, requested_location=requested)

        ctx.entries = extract_entries(fragments, payload, extraction_ctx)
        ctx.meta["fragments_found"] = len(fragments)
        ctx.meta["payload_records"] = len(payload.mapped)
        ctx.meta["entries_extracted"] = len(ctx.entries)
        self.events.emit(
            "entries.extracted",
            step=self.name,
            status="ok",
            count=len(ctx.entries),
            fragments=len(fragments),
            payload_records=len(payload.mapped),
        )
        return ctx
