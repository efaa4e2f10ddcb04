from __future__ import annotations

from typing import List, Optional

from config.settings import Settings, get_settings
from models.company_entry import ORG_NUMBER_MISSING
from models.company_search_result import CompanySearchResult
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import ExtractEntries, FetchPage, ParseDocument
from ports.events import EventSinkPort
from ports.fetcher import PageFetcherPort
from services.events import LoggingEventSink
from services.page_fetcher import RequestsPageFetcher
from services.url_builder import build_search_url


def search_companies(
    query: str,
    *,
    fetcher: Optional[PageFetcherPort] = None,
    events: Optional[EventSinkPort] = None,
    settings: Optional[Settings] = None,
) -> List[CompanySearchResult]:
    """Free-text search; hits without a name or a registry org number are left out."""
    settings = settings or get_settings()
    fetcher = fetcher or RequestsPageFetcher(settings)
    events = events or LoggingEventSink()

    pipeline = Pipeline(
        [FetchPage(fetcher), ParseDocument(), ExtractEntries(settings, events, use_requested_location=False)],
        events=events,
    )
    ctx = pipeline.run(RunContext(url=build_search_url(query, settings)))
    return [
        CompanySearchResult(
            name=e.name,
            org_number=e.org_number,
            location=e.location,
            link=e.link,
            revenue=e.revenue,
            employees=e.employees,
        )
        for e in ctx.entries
        if e.name and e.org_number != ORG_NUMBER_MISSING
    ]
