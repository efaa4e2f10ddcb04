"""
Field extractors for one company entry.

FIELD_EXTRACTORS maps a CompanyEntry attribute to a small pure function that reads that
attribute from an entry fragment and returns None when the page does not show it. A layout
change should only ever touch one of these functions.

Employees use the strict numeric schema: grouped digits become an int, bracket text such as
"1-4" is treated as absent.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional, Tuple
from urllib.parse import unquote, urlparse

from bs4 import Tag

from config.settings import Settings
from extraction.document import find_label, labelled_value, node_text, text_nodes
from extraction.entries import EntryFragment
from extraction.payload import PayloadIndex
from models.company_entry import ORG_NUMBER_MISSING, CompanyEntry
from services.url_builder import normalize_location
from utils.number_parsing import parse_grouped_int


ORG_NUMBER_LABEL = re.compile(r"Org\.?\s*nr\.?", re.IGNORECASE)
EMPLOYEES_LABEL = re.compile(r"Anställda\b", re.IGNORECASE)
REVENUE_LABEL = re.compile(r"Omsättning\b", re.IGNORECASE)
PROFIT_LABEL = re.compile(r"(?:Årets\s+resultat|Resultat(?:\s+efter\s+finansnetto)?)\b", re.IGNORECASE)
REGISTRATION_LABEL = re.compile(
    r"(?:Registrerings?datum|Registrerad(?:\s+datum)?)\b(?!\s+av\b)", re.IGNORECASE
)
OTHER_LABELS = (ORG_NUMBER_LABEL, EMPLOYEES_LABEL, REVENUE_LABEL, PROFIT_LABEL, REGISTRATION_LABEL)

INDUSTRY_PATH_SEGMENT = "bransch"
DATE_FORMAT = "%Y-%m-%d"

_ORG_NUMBER = re.compile(r"\b(\d{6}-\d{4})\b")
# Space-grouped ("1 024") or a plain digit run ("1024")
_NUMBER = r"\d{1,3}(?:\s\d{3})*|\d+"
_HEADCOUNT = re.compile(rf"^(?P<n>{_NUMBER})(?=\s+\D|$)")
_AMOUNT = re.compile(
    rf"^(?:(?P<year>(?:19|20)\d{{2}})\s+)?(?P<amount>[+-]?(?:{_NUMBER}))(?=\s+\D|$)"
)
_DATE = re.compile(r"\b(\d{4}-\d{2}-\d{2})\b")
_SORT_NOISE = re.compile(r"\b(?:datum|fallande|stigande)\b", re.IGNORECASE)
_POSTAL_ADDRESS = re.compile(r"\b\d{3}\s?\d{2}\s+(?P<city>[A-ZÅÄÖ][\wÅÄÖåäö\- ]*)$")


@dataclass(frozen=True)
class ExtractionContext:
    settings: Settings
    requested_location: Optional[str] = None


FieldExtractor = Callable[[EntryFragment, ExtractionContext], Any]


def _scope(fragment: EntryFragment) -> Optional[Tag]:
    return fragment.node


def _parse_org_number(text: str) -> Optional[str]:
    m = _ORG_NUMBER.search(text)
    return m.group(1) if m else None


def _parse_headcount(text: str) -> Optional[int]:
    m = _HEADCOUNT.match(text)
    return parse_grouped_int(m.group("n")) if m else None


def _parse_amount(text: str) -> Optional[Tuple[Optional[str], int]]:
    m = _AMOUNT.match(text.replace("\u2212", "-"))
    if not m:
        return None
    return m.group("year"), parse_grouped_int(m.group("amount"))


def _parse_date(text: str) -> Optional[date]:
    m = _DATE.search(_SORT_NOISE.sub(" ", text))
    if not m:
        return None
    try:
        return datetime.strptime(m.group(1), DATE_FORMAT).date()
    except ValueError:
        return None


def extract_org_number(fragment: EntryFragment, ctx: ExtractionContext) -> Optional[str]:
    scope = _scope(fragment)
    return labelled_value(scope, ORG_NUMBER_LABEL, _parse_org_number) if scope is not None else None


def extract_employees(fragment: EntryFragment, ctx: ExtractionContext) -> Optional[int]:
    scope = _scope(fragment)
    return labelled_value(scope, EMPLOYEES_LABEL, _parse_headcount) if scope is not None else None


def _financial(fragment: EntryFragment, label: re.Pattern) -> Optional[Tuple[Optional[str], int]]:
    scope = _scope(fragment)
    return labelled_value(scope, label, _parse_amount) if scope is not None else None


def extract_revenue(fragment: EntryFragment, ctx: ExtractionContext) -> Optional[int]:
    found = _financial(fragment, REVENUE_LABEL)
    return found[1] if found else None


def extract_revenue_year(fragment: EntryFragment, ctx: ExtractionContext) -> Optional[str]:
    found = _financial(fragment, REVENUE_LABEL)
    return found[0] if found else None


def extract_profit(fragment: EntryFragment, ctx: ExtractionContext) -> Optional[int]:
    found = _financial(fragment, PROFIT_LABEL)
    return found[1] if found else None


def extract_profit_year(fragment: EntryFragment, ctx: ExtractionContext) -> Optional[str]:
    found = _financial(fragment, PROFIT_LABEL)
    return found[0] if found else None


def extract_registration_date(fragment: EntryFragment, ctx: ExtractionContext) -> Optional[date]:
    scope = _scope(fragment)
    return labelled_value(scope, REGISTRATION_LABEL, _parse_date) if scope is not None else None


def extract_industry(fragment: EntryFragment, ctx: ExtractionContext) -> Optional[List[str]]:
    scope = _scope(fragment)
    if scope is None:
        return None
    tags: List[str] = []
    for anchor in scope.find_all("a", href=lambda href: bool(href) and INDUSTRY_PATH_SEGMENT in unquote(href)):
        text = node_text(anchor)
        if text and text not in tags:
            tags.append(text)
    return tags or None


def _has_other_label(text: str) -> bool:
    return any(label.search(text) for label in OTHER_LABELS)


def location_from_address(scope: Tag) -> Optional[str]:
    for string in text_nodes(scope):
        text = " ".join(str(string).split())
        if _has_other_label(text):
            continue
        m = _POSTAL_ADDRESS.search(text)
        if m:
            return m.group("city").strip()
    return None


def _location_after_org_number(scope: Tag) -> Optional[str]:
    label = find_label(scope, ORG_NUMBER_LABEL)
    if label is None or label.parent is scope:
        return None
    holder = label.parent
    # The org number may sit in the label's element or in its sibling; the location follows both
    for candidate in (holder.find_next_sibling(), holder.parent.find_next_sibling() if holder.parent is not scope else None):
        if candidate is None:
            continue
        text = node_text(candidate)
        if text and not _has_other_label(text) and not _ORG_NUMBER.search(text) and re.search(r"[^\W\d_]", text):
            return text
    return None


def location_from_link(link: str) -> Optional[str]:
    """City segment of a /foretag/<slug>/<city>/<industry>/<id> detail link."""
    parts = [unquote(p) for p in urlparse(link).path.split("/") if p]
    if len(parts) >= 4 and parts[0] == "foretag" and not parts[2].isdigit():
        return normalize_location(parts[2].replace("-", " "))
    return None


def extract_location(fragment: EntryFragment, ctx: ExtractionContext) -> Optional[str]:
    if ctx.requested_location:
        return normalize_location(ctx.requested_location) or None
    scope = _scope(fragment)
    if scope is not None:
        found = location_from_address(scope) or _location_after_org_number(scope)
        if found:
            return found
    return location_from_link(fragment.link) if fragment.link else None


FIELD_EXTRACTORS: Dict[str, FieldExtractor] = {
    "org_number": extract_org_number,
    "location": extract_location,
    "employees": extract_employees,
    "revenue": extract_revenue,
    "revenue_year": extract_revenue_year,
    "profit": extract_profit,
    "profit_year": extract_profit_year,
    "registration_date": extract_registration_date,
    "industry": extract_industry,
}


def extract_fields(fragment: EntryFragment, ctx: ExtractionContext, supplied: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Field values for one entry: supplied (payload) values first, heuristics for the rest."""
    values: Dict[str, Any] = dict(supplied or {})
    values.setdefault("name", fragment.name or None)
    values.setdefault("link", fragment.link or None)
    for field, extractor in FIELD_EXTRACTORS.items():
        if values.get(field) is None:
            values[field] = extractor(fragment, ctx)
    if ctx.requested_location:
        values["location"] = normalize_location(ctx.requested_location)
    return values


def build_entry(values: Dict[str, Any]) -> Optional[CompanyEntry]:
    name = values.get("name") or ""
    link = values.get("link") or ""
    if not name and not link:
        return None
    return CompanyEntry(
        name=name,
        org_number=values.get("org_number") or ORG_NUMBER_MISSING,
        location=values.get("location") or "",
        link=link,
        revenue=values.get("revenue"),
        revenue_year=values.get("revenue_year"),
        employees=values.get("employees"),
        profit=values.get("profit"),
        profit_year=values.get("profit_year"),
        registration_date=values.get("registration_date"),
        industry=values.get("industry") or None,
    )


def extract_entries(fragments: List[EntryFragment], payload: PayloadIndex, ctx: ExtractionContext) -> List[CompanyEntry]:
    """CompanyEntry per fragment in page order; payload-only entries when the DOM yields none."""
    entries: List[CompanyEntry] = []
    if not fragments and payload:
        for supplied in payload.mapped:
            entry = build_entry(extract_fields(EntryFragment(name="", link="", node=None), ctx, supplied))
            if entry is not None:
                entries.append(entry)
        return entries
    for fragment in fragments:
        supplied = payload.lookup(link=fragment.link, name=fragment.name) if payload else None
        if payload and supplied is None:
            supplied = payload.lookup(org_number=extract_org_number(fragment, ctx))
        entry = build_entry(extract_fields(fragment, ctx, supplied))
        if entry is not None:
            entries.append(entry)
    return entries
