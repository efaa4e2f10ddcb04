from __future__ import annotations

from extraction.document import load_document
from pipelines.runner import RunContext


class ParseDocument:
    name = "parse_document"

    def run(self, ctx: RunContext) -> RunContext:
        ctx.document = load_document(ctx.html)
        return ctx
