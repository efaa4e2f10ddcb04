from .events import EventSinkPort
from .fetcher import PageFetcherPort

__all__ = [
    "EventSinkPort",
    "PageFetcherPort",
]
