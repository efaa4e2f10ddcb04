from __future__ import annotations

from extraction.total_count import extract_total_count
from pipelines.runner import RunContext


class ExtractTotalCount:
    name = "extract_total_count"

    def run(self, ctx: RunContext) -> RunContext:
        ctx.total_count = extract_total_count(ctx.document)
        return ctx
