"""
Single-company detail page.

The <title> ("<name> - <NNNNNN-NNNN>") is the one required anchor; everything else is optional
and read with the same label extractors the listing pages use.
"""
from __future__ import annotations

import re
from typing import List, Optional

from bs4 import Tag

from config.settings import Settings
from extraction.document import labelled_value, node_text
from extraction.entries import EntryFragment
from extraction.fields import (
    ExtractionContext,
    extract_employees,
    extract_industry,
    extract_revenue,
    location_from_address,
)
from models.company_info import CompanyInfo
from services.errors import ParseFailure


TITLE_PATTERN = re.compile(r"^(.+?) - (\d{6}-\d{4})")
STATUS_LABEL = re.compile(r"Status\b", re.IGNORECASE)
PHONE_LABEL = re.compile(r"^\s*Telefon:?\s*", re.IGNORECASE)
DEFAULT_STATUS = "Active"


def parse_title(document: Tag) -> tuple[str, str]:
    title = node_text(document.title) if document.title else ""
    m = TITLE_PATTERN.match(title)
    if not m:
        raise ParseFailure("Could not parse company name and org number from title")
    return m.group(1).strip(), m.group(2)


def _icon_text(document: Tag, icon_class: str) -> str:
    icon = document.select_one(f".{icon_class}")
    if icon is None or icon.parent is None:
        return ""
    return node_text(icon.parent)


def _industry_tags(document: Tag, fragment: EntryFragment, ctx: ExtractionContext) -> Optional[List[str]]:
    tags: List[str] = []
    for anchor in document.select(".IndustryTags-tags .Tag-root a"):
        text = node_text(anchor)
        if text and text not in tags:
            tags.append(text)
    return tags or extract_industry(fragment, ctx)


def parse_company_info(document: Tag, url: str, settings: Settings) -> CompanyInfo:
    name, org_number = parse_title(document)
    fragment = EntryFragment(name=name, link=url, node=document)
    ctx = ExtractionContext(settings=settings)

    location = _icon_text(document, "fa-location-dot") or location_from_address(document) or ""
    phone = PHONE_LABEL.sub("", _icon_text(document, "fa-phone-flip")).strip()
    description = node_text(document.select_one(".company-description"))
    status = labelled_value(document, STATUS_LABEL, lambda text: text if 0 < len(text) <= 60 else None)

    return CompanyInfo(
        name=name,
        org_number=org_number,
        location=location,
        # A served detail page belongs to a registered company
        status=status or DEFAULT_STATUS,
        revenue=extract_revenue(fragment, ctx),
        employees=extract_employees(fragment, ctx),
        description=description or None,
        phone=phone or None,
        industry=_industry_tags(document, fragment, ctx),
    )
