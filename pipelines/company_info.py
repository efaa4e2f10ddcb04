from __future__ import annotations

from typing import Optional

from config.settings import Settings, get_settings
from extraction.detail import parse_company_info
from models.company_info import CompanyInfo
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import FetchPage, ParseDocument
from ports.events import EventSinkPort
from ports.fetcher import PageFetcherPort
from services.events import LoggingEventSink
from services.page_fetcher import RequestsPageFetcher
from services.url_builder import build_detail_url


def get_company_info(
    path: str,
    *,
    fetcher: Optional[PageFetcherPort] = None,
    events: Optional[EventSinkPort] = None,
    settings: Optional[Settings] = None,
) -> CompanyInfo:
    """Detail lookup by the link path from a search result (e.g. /foretag/<slug>/...).

    Raises ParseFailure when the page title does not carry "<name> - <org number>".
    """
    settings = settings or get_settings()
    fetcher = fetcher or RequestsPageFetcher(settings)
    events = events or LoggingEventSink()

    url = build_detail_url(path, settings)
    ctx = Pipeline([FetchPage(fetcher), ParseDocument()], events=events).run(RunContext(url=url))
    info = parse_company_info(ctx.document, url, settings)
    events.emit("company_info.parsed", step="parse_company_info", status="ok", url=url)
    return info
