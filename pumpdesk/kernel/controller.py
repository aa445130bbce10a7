"""
PumpDesk Kernel — Table Controller

The surface a renderer talks to. Holds the transient session state
(query, sort spec, page, page size, edit session) on top of one RecordStore
and derives the visible view on demand through the pure pipeline.

Page policy:
  - query or page size change   → page resets to 1
  - sort change                 → page kept
  - set_page(n)                 → clamped to [1, max(1, total_pages)]
  - next_page / previous_page   → no-op at the boundaries
  - committed edit              → page re-clamped (the filtered count may shrink)
  - load                        → page resets to 1, open edit discarded

Single-threaded: each call runs to completion before the next.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pumpdesk.kernel.editing import EditSession
from pumpdesk.kernel.pagination import clamp_page, snap_page_size
from pumpdesk.kernel.pipeline import derive_view
from pumpdesk.kernel.sorting import next_sort_spec
from pumpdesk.kernel.store import RecordStore
from pumpdesk.kernel.types import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_PAGE_SIZES,
    FieldValue,
    Record,
    RecordId,
    SortSpec,
    TableView,
)

logger = logging.getLogger(__name__)


class TableController:
    """Search / sort / paginate / edit over an in-memory record collection."""

    def __init__(
        self,
        records: Iterable[Record] = (),
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        page_sizes: Sequence[int] = DEFAULT_PAGE_SIZES,
    ):
        self._page_sizes = tuple(sorted(set(page_sizes)))
        self._store = RecordStore(records)
        self._session = EditSession(self._store)
        self._query = ""
        self._sort: SortSpec | None = None
        self._page = 1
        self._page_size = snap_page_size(page_size, self._page_sizes)

    # -- state observers --

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def query(self) -> str:
        return self._query

    @property
    def sort(self) -> SortSpec | None:
        return self._sort

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def page_sizes(self) -> tuple[int, ...]:
        return self._page_sizes

    # -- loading --

    def load(self, records: Iterable[Record]) -> None:
        """Replace the collection. Resets paging and drops any open edit."""
        if self._session.is_editing:
            logger.warning("controller: reload discards open edit of record %r", self._session.record_id)
            self._session.cancel()
        self._store.load(records)
        self._page = 1

    # -- query / sort / paging commands --

    def set_query(self, text: str) -> None:
        self._query = text
        self._page = 1

    def set_sort_column(self, key: str) -> SortSpec:
        self._sort = next_sort_spec(self._sort, key)
        return self._sort

    def set_page(self, page: int) -> int:
        self._page = clamp_page(page, self.get_total_pages())
        return self._page

    def set_page_size(self, size: int) -> int:
        self._page_size = snap_page_size(size, self._page_sizes)
        self._page = 1
        return self._page_size

    def next_page(self) -> int:
        if self._page < self.get_total_pages():
            self._page += 1
        return self._page

    def previous_page(self) -> int:
        if self._page > 1:
            self._page -= 1
        return self._page

    # -- derived view --

    def view(self) -> TableView:
        return derive_view(
            self._store.records,
            self._query,
            self._sort,
            self._page,
            self._page_size,
            editing=self._session.is_editing,
        )

    def get_visible_rows(self) -> tuple[Record, ...]:
        return self.view().rows

    def get_filtered_count(self) -> int:
        return self.view().filtered_count

    def get_total_count(self) -> int:
        return len(self._store)

    def get_total_pages(self) -> int:
        return self.view().total_pages

    # -- editing --

    @property
    def is_editing(self) -> bool:
        return self._session.is_editing

    def editing_record(self) -> Record | None:
        """The edit buffer, or None when idle."""
        if not self._session.is_editing:
            return None
        return self._session.snapshot()

    def begin_edit(self, record_id: RecordId) -> Record:
        return self._session.begin(record_id)

    def update_edit_field(self, key: str, value: FieldValue) -> None:
        self._session.update_field(key, value)

    def commit_edit(self) -> Record:
        updated = self._session.commit()
        self._page = clamp_page(self._page, self.get_total_pages())
        return updated

    def cancel_edit(self) -> None:
        self._session.cancel()
