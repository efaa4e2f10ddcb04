from __future__ import annotations

import re
from typing import List, Union

from bs4 import Tag

from extraction.document import load_document, node_text
from models.industry_code import IndustryCode


_ITEM_ID = re.compile(r":r\d+:-(\d+)")


def parse_industry_codes(source: Union[str, bytes, Tag]) -> List[IndustryCode]:
    """Industry taxonomy from the tree view: <li class="MuiTreeItem-root" id=":r5:-10001">."""
    document = source if isinstance(source, Tag) else load_document(source)
    codes: List[IndustryCode] = []
    for item in document.select("li.MuiTreeItem-root"):
        m = _ITEM_ID.search(item.get("id") or "")
        if not m:
            continue
        label = item.select_one(".MuiTreeItem-label")
        codes.append(IndustryCode(name=node_text(label), industry_code=m.group(1)))
    return codes
