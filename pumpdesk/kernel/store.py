"""
PumpDesk Kernel — Record Store

Owns the canonical, insertion-ordered record collection. The only component
that mutates the source of truth, and only through two operations:

  load(records)        replace the whole collection
  commit_edit(record)  replace one record in place, keeping its position

Both publish a fresh tuple in a single assignment, so observers never see a
half-updated collection.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pumpdesk.kernel.types import NotFound, Record, RecordId

logger = logging.getLogger(__name__)


class RecordStore:
    """Canonical record collection, indexed by id."""

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: tuple[Record, ...] = ()
        self._index: dict[RecordId, int] = {}
        self.load(records)

    # -- observers --

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._index

    def get(self, record_id: RecordId) -> Record:
        """Return the record with this id, or raise NotFound."""
        pos = self._index.get(record_id)
        if pos is None:
            raise NotFound(record_id)
        return self._records[pos]

    # -- mutations --

    def load(self, records: Iterable[Record]) -> None:
        """
        Replace the entire collection. Never fails.

        Ids must be unique, so a record repeating an earlier id is dropped
        (first occurrence wins).
        """
        kept: list[Record] = []
        index: dict[RecordId, int] = {}
        dropped = 0
        for record in records:
            if record.id in index:
                dropped += 1
                continue
            index[record.id] = len(kept)
            kept.append(record)

        if dropped:
            logger.warning("store: dropped %d record(s) with duplicate ids", dropped)

        self._records, self._index = tuple(kept), index
        logger.info("store: loaded %d records", len(kept))

    def commit_edit(self, updated: Record) -> None:
        """
        Replace the record whose id equals updated.id, in place.
        Raises NotFound rather than silently doing nothing.
        """
        pos = self._index.get(updated.id)
        if pos is None:
            raise NotFound(updated.id)

        records = list(self._records)
        records[pos] = updated
        self._records = tuple(records)
        logger.info("store: committed edit to record %r at position %d", updated.id, pos)
