"""
Entry locator: finds the fragment of the page that belongs to each company.

Pages that mark every result with the card class are split on those
cards. Otherwise each company heading (an h2/h3 linking to a /foretag/ detail page) is widened
to the largest ancestor that still contains no other company heading. When no such ancestor
exists (a flat listing), the heading and its following siblings up to the next company heading
are copied into a detached wrapper.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from config.settings import Settings
from extraction.document import node_text
from services.url_builder import absolute_link


CARD_MARKER_CLASS = "SearchResultCard-card"
DETAIL_PATH = "/foretag/"
ENTRY_HEADING_TAGS = ["h2", "h3"]
PROMOTIONAL_HEADINGS = (
    "köp denna lista",
    "köp lista",
    "ladda ner lista",
    "prova gratis",
)
_STOP_AT = {"body", "html", "main", "[document]"}


@dataclass
class EntryFragment:
    name: str
    link: str
    node: Optional[Tag] = None


def company_anchor(node: Tag) -> Optional[Tag]:
    return node.find("a", href=lambda href: bool(href) and DETAIL_PATH in href)


def _is_promotional(heading: Tag) -> bool:
    text = node_text(heading).lower()
    return any(phrase in text for phrase in PROMOTIONAL_HEADINGS)


def _company_headings(scope: Tag) -> List[Tag]:
    return [
        h for h in scope.find_all(ENTRY_HEADING_TAGS)
        if company_anchor(h) is not None and not _is_promotional(h)
    ]


def _outermost(nodes: List[Tag]) -> List[Tag]:
    ids = {id(n) for n in nodes}
    return [n for n in nodes if not any(id(p) in ids for p in n.parents)]


def _widen(heading: Tag, heading_ids: set) -> Tag:
    node = heading
    while isinstance(node.parent, Tag) and node.parent.name not in _STOP_AT:
        contained = sum(1 for h in node.parent.find_all(ENTRY_HEADING_TAGS) if id(h) in heading_ids)
        if contained != 1:
            break
        node = node.parent
    return node


def _starts_entry(node, heading_ids: set) -> bool:
    if not isinstance(node, Tag):
        return False
    if node.name in ENTRY_HEADING_TAGS and id(node) in heading_ids:
        return True
    return any(id(h) in heading_ids for h in node.find_all(ENTRY_HEADING_TAGS))


def _flat_entry(heading: Tag, heading_ids: set) -> Tag:
    """Detached copy of heading plus the siblings that follow it up to the next company heading."""
    wrapper = BeautifulSoup("", "html.parser").new_tag("div")
    wrapper.append(copy.copy(heading))
    for sibling in list(heading.next_siblings):
        if _starts_entry(sibling, heading_ids):
            break
        if isinstance(sibling, Tag):
            wrapper.append(copy.copy(sibling))
        elif str(sibling).strip():
            wrapper.append(str(sibling))
    return wrapper


def _from_node(node: Tag, settings: Settings) -> EntryFragment:
    heading = next((h for h in node.find_all(ENTRY_HEADING_TAGS) if company_anchor(h) is not None), None)
    anchor = company_anchor(heading) if heading is not None else company_anchor(node)
    if anchor is None and heading is not None:
        return EntryFragment(name=node_text(heading), link="", node=node)
    if anchor is None:
        return EntryFragment(name="", link="", node=node)
    return EntryFragment(
        name=node_text(anchor),
        link=absolute_link(anchor.get("href", ""), settings),
        node=node,
    )


def locate_cards(document: Tag) -> List[Tag]:
    return _outermost(document.find_all(class_=CARD_MARKER_CLASS))


def locate_by_headings(document: Tag) -> List[Tag]:
    scope = document.find("main") or document
    headings = _company_headings(scope)
    heading_ids = {id(h) for h in headings}
    nodes = []
    for heading in headings:
        node = _widen(heading, heading_ids)
        # Flat listings keep the entry's fields as siblings of its heading
        nodes.append(_flat_entry(heading, heading_ids) if node is heading else node)
    return nodes


def locate_entries(document: Tag, settings: Settings) -> List[EntryFragment]:
    """One fragment per company in page order; fragments with neither name nor link are dropped."""
    nodes = locate_cards(document) or locate_by_headings(document)
    fragments = [_from_node(node, settings) for node in nodes]
    return [f for f in fragments if f.name or f.link]
