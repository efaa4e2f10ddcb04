from __future__ import annotations

from typing import Protocol


class PageFetcherPort(Protocol):
    def fetch_page(self, url: str) -> str:
        """Return the raw HTML at url or raise FetchFailure."""
        ...
