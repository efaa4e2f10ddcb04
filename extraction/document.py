"""
Document loading and the label-anchored lookup primitives shared by every extractor.

A label is a text node that *starts* with a fixed phrase (e.g. "Omsättning"); the value is read
from the text that follows the label in its element, then from the next sibling element, then
from the enclosing element. Text inside <a>, <script> and <style> never counts as a label.
"""
from __future__ import annotations

import re
from typing import Callable, Iterator, List, Optional, TypeVar, Union

from bs4 import BeautifulSoup, NavigableString, Tag

from services.errors import ParseFailure


T = TypeVar("T")

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
_SKIPPED_PARENTS = {"a", "script", "style", "noscript"}


def load_document(html: Union[str, bytes, None]) -> BeautifulSoup:
    if not isinstance(html, (str, bytes)):
        raise ParseFailure(f"Expected an HTML document, got {type(html).__name__}")
    return BeautifulSoup(html, "html.parser")


def node_text(node: Optional[Union[Tag, NavigableString]]) -> str:
    """Visible text with all whitespace runs (incl. NBSP) collapsed to one space."""
    if node is None:
        return ""
    if isinstance(node, NavigableString):
        return " ".join(str(node).split())
    return " ".join(node.get_text(" ", strip=True).split())


def _inside_skipped(string: NavigableString) -> bool:
    return any(parent.name in _SKIPPED_PARENTS for parent in string.parents if isinstance(parent, Tag))


def text_nodes(scope: Tag) -> Iterator[NavigableString]:
    """Visible text nodes outside links and scripts, in document order."""
    for string in scope.find_all(string=True):
        if not str(string).strip() or _inside_skipped(string):
            continue
        yield string


def find_label(scope: Tag, label: re.Pattern) -> Optional[NavigableString]:
    for string in text_nodes(scope):
        if label.match(" ".join(str(string).split())):
            return string
    return None


def _after_label(text: str, label: re.Pattern) -> str:
    m = label.search(text)
    if not m:
        return ""
    return text[m.end():].lstrip(" :").strip()


def label_candidates(scope: Tag, label: re.Pattern) -> List[str]:
    """Texts that may hold the value for label, most specific first."""
    string = find_label(scope, label)
    if string is None:
        return []
    holder = string.parent
    own = _after_label(node_text(holder), label)
    candidates = [own]
    if holder is not scope:
        # Siblings and parents of the scope itself belong to other entries
        sibling = holder.find_next_sibling()
        if sibling is not None:
            candidates.append(f"{own} {node_text(sibling)}".strip())
        if isinstance(holder.parent, Tag):
            candidates.append(_after_label(node_text(holder.parent), label))
    return [c for c in candidates if c]


def labelled_value(scope: Tag, label: re.Pattern, parse: Callable[[str], Optional[T]]) -> Optional[T]:
    """First candidate text following label that parse accepts; None if none does."""
    for candidate in label_candidates(scope, label):
        value = parse(candidate)
        if value is not None:
            return value
    return None
