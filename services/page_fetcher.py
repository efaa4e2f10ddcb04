"""
HTTP retrieval of registry pages.

Fail fast: a transport error or non-2xx status becomes a single FetchFailure; nothing is retried.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

from config.settings import Settings, get_settings
from services.errors import FetchFailure


logger = logging.getLogger(__name__)

DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Connection": "keep-alive",
}


class RequestsPageFetcher:
    """Fetches pages with the fixed browser-like header set."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def fetch_page(self, url: str) -> str:
        logger.debug("Fetching page", extra={"url": url})
        try:
            response = requests.get(
                url,
                headers=DEFAULT_HEADERS,
                timeout=self.settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as exc:
            logger.warning("Fetch failed", extra={"url": url, "status": "error", "error": str(exc)})
            raise FetchFailure(url, str(exc)) from exc
        logger.debug("Page received", extra={"url": url, "status": response.status_code})
        return response.text
