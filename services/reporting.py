from __future__ import annotations

import sys
from typing import Optional, TextIO

from pipelines.runner import RunContext


def print_summary(ctx: RunContext, stream: Optional[TextIO] = None) -> None:
    """Print summary of a segmentation run (stderr by default, stdout stays pure JSON)."""
    out = stream or sys.stderr
    meta = ctx.meta
    params = ctx.params

    print("\n" + "=" * 60, file=out)
    print("ALLABOLAG SEGMENTATION - SUMMARY", file=out)
    print("=" * 60, file=out)
    print(f"URL: {ctx.url or 'N/A'}", file=out)
    print(f"Sort: {getattr(params, 'sort', None) or 'default'}", file=out)
    print(f"Page: {getattr(params, 'page', None) or 1}", file=out)
    print(f"Total Count: {ctx.total_count}", file=out)
    print(file=out)
    print("Extraction Statistics:", file=out)
    print(f"  Fragments Found: {meta.get('fragments_found', 0)}", file=out)
    print(f"  Payload Records: {meta.get('payload_records', 0)}", file=out)
    print(f"  Entries Extracted: {meta.get('entries_extracted', 0)}", file=out)
    print(f"  Filtered Out: {meta.get('filtered_out', 0)}", file=out)
    print(f"  Returned: {len(ctx.entries)}", file=out)
    print("=" * 60, file=out)
