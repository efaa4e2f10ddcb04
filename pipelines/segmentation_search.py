"""
Segmentation search: the filtered, sorted, paginated company listing.

params -> validate -> build URL -> fetch -> parse -> total count -> entries -> range filter,
then assemble_response packs {results, totalCount}.
"""
from __future__ import annotations

from typing import Optional

from config.settings import Settings, get_settings
from models.search_response import SearchResponse
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import (
    BuildSegmentationUrl,
    ExtractEntries,
    ExtractTotalCount,
    FetchPage,
    FilterByRange,
    ParseDocument,
    ValidateParams,
)
from ports.events import EventSinkPort
from ports.fetcher import PageFetcherPort
from services.events import LoggingEventSink
from services.page_fetcher import RequestsPageFetcher
from services.params import ParamsInput


def build_segmentation_pipeline(fetcher: PageFetcherPort, settings: Settings, events: EventSinkPort) -> Pipeline:
    return Pipeline(
        [
            ValidateParams(),
            BuildSegmentationUrl(settings),
            FetchPage(fetcher),
            ParseDocument(),
            ExtractTotalCount(),
            ExtractEntries(settings, events),
            FilterByRange(),
        ],
        events=events,
    )


def run_segmentation(
    params: ParamsInput,
    *,
    fetcher: Optional[PageFetcherPort] = None,
    events: Optional[EventSinkPort] = None,
    settings: Optional[Settings] = None,
) -> RunContext:
    settings = settings or get_settings()
    fetcher = fetcher or RequestsPageFetcher(settings)
    events = events or LoggingEventSink()
    pipeline = build_segmentation_pipeline(fetcher, settings, events)
    return pipeline.run(RunContext(params=params))


def assemble_response(ctx: RunContext) -> SearchResponse:
    # total_count comes from the page heading, never from len(entries)
    return SearchResponse(results=list(ctx.entries), total_count=ctx.total_count)


def segmentation_search(
    params: ParamsInput,
    *,
    fetcher: Optional[PageFetcherPort] = None,
    events: Optional[EventSinkPort] = None,
    settings: Optional[Settings] = None,
) -> SearchResponse:
    """Run one segmentation query and return a page of entries plus the population size.

    Raises InvalidParameter for a bad sort value (before any fetch), FetchFailure when the page
    cannot be retrieved and ParseFailure when the response is not a document.
    """
    ctx = run_segmentation(params, fetcher=fetcher, events=events, settings=settings)
    return assemble_response(ctx)
