from __future__ import annotations

import re

from bs4 import Tag

from extraction.document import HEADING_TAGS, node_text
from extraction.entries import company_anchor
from utils.number_parsing import strip_digit_groups


_TOTAL_PHRASE = re.compile(r"(\d[\d\s]*?)\s*företag\b", re.IGNORECASE)


def extract_total_count(document: Tag) -> int:
    """Population size from the first '<N> företag' heading; 0 when the page has none."""
    for heading in document.find_all(HEADING_TAGS):
        if company_anchor(heading) is not None:
            continue
        m = _TOTAL_PHRASE.search(node_text(heading))
        if m:
            return int(strip_digit_groups(m.group(1)))
    return 0
