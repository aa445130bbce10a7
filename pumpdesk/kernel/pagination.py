"""
PumpDesk Kernel — Pagination Engine

Pure helpers for slicing the sorted view into pages and keeping the page
number in bounds. Pages are 1-indexed. A zero-row view has zero pages,
but the current page never drops below 1.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from pumpdesk.kernel.types import Record


def total_pages(count: int, page_size: int) -> int:
    """ceil(count / page_size); 0 when there is nothing to show."""
    if count <= 0 or page_size <= 0:
        return 0
    return math.ceil(count / page_size)


def clamp_page(page: int, pages: int) -> int:
    """Clamp to [1, max(1, pages)]."""
    return min(max(page, 1), max(pages, 1))


def page_bounds(page: int, page_size: int) -> tuple[int, int]:
    """Start/end offsets (end exclusive) of a page."""
    start = (page - 1) * page_size
    return start, start + page_size


def apply_page(records: Sequence[Record], page_size: int, page: int) -> Sequence[Record]:
    """
    The slice of `records` for this page. The last page may be short;
    a page past the end (or below 1) is empty.
    """
    if page < 1 or page_size <= 0:
        return ()
    start, end = page_bounds(page, page_size)
    return tuple(records[start:end])


def snap_page_size(size: int, allowed: Sequence[int]) -> int:
    """
    Nearest allowed page size. Ties go to the smaller size.
    An empty `allowed` accepts any positive size.
    """
    if not allowed:
        return max(size, 1)
    if size in allowed:
        return size
    return min(sorted(allowed), key=lambda a: abs(a - size))
