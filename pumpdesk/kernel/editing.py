"""
PumpDesk Kernel — Edit Session

State machine: Idle ⇄ Editing(buffer)

  begin(id)               Idle|Editing → Editing   (copies the stored record)
  update_field(key, raw)  Editing → Editing        (buffer only)
  commit()                Editing → Idle           (store.commit_edit(buffer))
  cancel()                Editing → Idle           (buffer dropped)

The buffer is private until commit(). Values are stored exactly as the
caller passes them; numeric columns are not coerced back to numbers.
"""

from __future__ import annotations

import logging

from pumpdesk.kernel.store import RecordStore
from pumpdesk.kernel.types import (
    COLUMN_KEYS,
    EditState,
    FieldValue,
    NoActiveEdit,
    Record,
    RecordId,
    UnknownColumn,
)

logger = logging.getLogger(__name__)


class EditSession:
    """Single-record edit buffer bound to one RecordStore."""

    def __init__(self, store: RecordStore):
        self._store = store
        self._record_id: RecordId | None = None
        self._buffer: dict[str, FieldValue] | None = None

    @property
    def state(self) -> EditState:
        return "idle" if self._buffer is None else "editing"

    @property
    def is_editing(self) -> bool:
        return self._buffer is not None

    @property
    def record_id(self) -> RecordId | None:
        return self._record_id

    def snapshot(self) -> Record:
        """Current buffer contents as a Record (a copy)."""
        self._require_editing("snapshot")
        return Record(id=self._record_id, values=dict(self._buffer))

    # -- transitions --

    def begin(self, record_id: RecordId) -> Record:
        """
        Open an edit on the record with this id.
        An unsaved buffer from a previous begin() is thrown away.
        NotFound leaves the session as it was.
        """
        record = self._store.get(record_id)

        if self._buffer is not None:
            logger.warning(
                "edit: discarding unsaved buffer for record %r to edit %r",
                self._record_id,
                record_id,
            )

        self._record_id = record.id
        self._buffer = dict(record.values)
        return self.snapshot()

    def update_field(self, key: str, value: FieldValue) -> None:
        self._require_editing("update_field")
        if key not in COLUMN_KEYS:
            raise UnknownColumn(key)
        self._buffer[key] = value

    def commit(self) -> Record:
        """
        Write the buffer back through the store and go idle.
        If the record has vanished, NotFound propagates and the buffer is
        kept so the caller can still cancel.
        """
        self._require_editing("commit")
        updated = self.snapshot()
        self._store.commit_edit(updated)
        self._reset()
        return updated

    def cancel(self) -> None:
        self._require_editing("cancel")
        logger.debug("edit: cancelled edit of record %r", self._record_id)
        self._reset()

    # -- internal --

    def _reset(self) -> None:
        self._record_id = None
        self._buffer = None

    def _require_editing(self, op: str) -> None:
        if self._buffer is None:
            raise NoActiveEdit(f"{op}() called with no edit in progress")
