from __future__ import annotations

from ports.fetcher import PageFetcherPort
from pipelines.runner import RunContext


class FetchPage:
    name = "fetch_page"

    def __init__(self, fetcher: PageFetcherPort) -> None:
        self.fetcher = fetcher

    def run(self, ctx: RunContext) -> RunContext:
        if not ctx.url:
            raise ValueError("FetchPage requires ctx.url")
        ctx.html = self.fetcher.fetch_page(ctx.url)
        ctx.meta["html_bytes"] = len(ctx.html or "")
        return ctx
