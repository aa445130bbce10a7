"""
PumpDesk Kernel — View Pipeline

Pure function of five inputs:

    (records, query, sort, page, page_size) → TableView

filter → sort → paginate, always in that order, always from scratch.
Nothing is cached between calls, so the view can never drift away from
the store.
"""

from __future__ import annotations

from collections.abc import Sequence

from pumpdesk.kernel.filtering import apply_filter
from pumpdesk.kernel.pagination import apply_page, clamp_page, total_pages
from pumpdesk.kernel.sorting import apply_sort
from pumpdesk.kernel.types import Record, SortSpec, TableView


def derive_view(
    records: Sequence[Record],
    query: str,
    sort: SortSpec | None,
    page: int,
    page_size: int,
    *,
    editing: bool = False,
) -> TableView:
    """
    Build the visible page. `page` is clamped against the filtered count
    before slicing, so the result always describes a real page (or the
    empty first page).
    """
    filtered = apply_filter(records, query)
    ordered = apply_sort(filtered, sort)
    pages = total_pages(len(filtered), page_size)
    current = clamp_page(page, pages)

    return TableView(
        rows=tuple(apply_page(ordered, page_size, current)),
        page=current,
        page_size=page_size,
        total_pages=pages,
        filtered_count=len(filtered),
        total_count=len(records),
        query=query,
        sort=sort,
        editing=editing,
    )
