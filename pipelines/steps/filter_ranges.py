from __future__ import annotations

from typing import List, Optional

from models.company_entry import CompanyEntry
from pipelines.runner import RunContext


def _within(value: Optional[int], lower: Optional[int], upper: Optional[int]) -> bool:
    # Absence is not a range violation
    if value is None:
        return True
    if lower is not None and value < lower:
        return False
    if upper is not None and value > upper:
        return False
    return True


def filter_by_range(entries: List[CompanyEntry], params) -> List[CompanyEntry]:
    return [
        e for e in entries
        if _within(e.employees, params.employees_from, params.employees_to)
        and _within(e.revenue, params.revenue_from, params.revenue_to)
    ]


class FilterByRange:
    name = "filter_ranges"

    def run(self, ctx: RunContext) -> RunContext:
        before = len(ctx.entries)
        ctx.entries = filter_by_range(ctx.entries, ctx.params)
        ctx.meta["filtered_out"] = before - len(ctx.entries)
        return ctx
