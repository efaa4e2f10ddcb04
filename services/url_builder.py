from __future__ import annotations

from typing import List, Tuple
from urllib.parse import quote, urlencode, urljoin

from config.settings import Settings
from models.search_params import SearchParams


# (model attribute, query key) in serialization order
_QUERY_KEYS: Tuple[Tuple[str, str], ...] = (
    ("industry_code", "proffIndustryCode"),
    ("location", "location"),
    ("company_type", "companyType"),
    ("revenue_from", "revenueFrom"),
    ("revenue_to", "revenueTo"),
    ("employees_from", "numEmployeesFrom"),
    ("employees_to", "numEmployeesTo"),
    ("sort", "sort"),
    ("page", "page"),
)


def normalize_location(location: str) -> str:
    """'UMEÅ  östra' -> 'Umeå Östra'. Idempotent."""
    return " ".join(token[:1].upper() + token[1:].lower() for token in location.split())


def segmentation_query_pairs(params: SearchParams) -> List[Tuple[str, str]]:
    pairs: List[Tuple[str, str]] = []
    for attr, key in _QUERY_KEYS:
        value = getattr(params, attr)
        if value is None:
            continue
        if attr == "location":
            value = normalize_location(value)
        text = str(value)
        if not text:
            continue
        pairs.append((key, text))
    return pairs


def build_segmentation_url(params: SearchParams, settings: Settings) -> str:
    base = settings.base_url + quote(settings.segmentation_path)
    query = urlencode(segmentation_query_pairs(params), quote_via=quote)
    return f"{base}?{query}" if query else base


def build_search_url(query: str, settings: Settings) -> str:
    return f"{settings.base_url}{quote(settings.search_path)}?q={quote(query, safe='')}"


def build_detail_url(path: str, settings: Settings) -> str:
    if path.startswith(("http://", "https://")):
        return path
    if not path.startswith("/"):
        path = "/" + path
    # '%' stays safe so already-encoded links are not encoded twice
    return settings.base_url + quote(path, safe="/%")


def absolute_link(href: str, settings: Settings) -> str:
    if not href:
        return ""
    return urljoin(settings.base_url + "/", href)
