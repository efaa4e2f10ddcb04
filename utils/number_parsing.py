from __future__ import annotations

import re
from typing import Optional


# \s covers the non-breaking and narrow non-breaking spaces used as digit group separators
_GROUPED_INT = re.compile(r"^[+-]?(?:\d{1,3}(?:\s*\d{3})*|\d+)$")


def _normalize_sign(text: str) -> str:
    # Unicode minus and en dash are used for negative amounts
    return text.replace("\u2212", "-").replace("\u2013", "-")


def strip_digit_groups(text: str) -> str:
    return re.sub(r"\s+", "", text)


def parse_grouped_int(value) -> Optional[int]:
    """Parse space-grouped digit text like '13 170' or '-1 234' into an integer.

    Returns None when the text is not a single grouped number (e.g. '1-4' or '45 tkr').
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    s = _normalize_sign(str(value)).strip()
    if not s or not _GROUPED_INT.match(s):
        return None
    return int(strip_digit_groups(s))
