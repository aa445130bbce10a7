"""
PumpDesk Kernel — Sort Engine

Two pieces:
  apply_sort       (records, spec) → stable single-column ordering
  next_sort_spec   column-click transition: Unsorted → Asc(X) → Desc(X) → Asc(X) ...

Total order used for comparison (ascending):

    numbers (numeric)  <  strings (code point, case-sensitive)  <  absent

Descending flips numbers and strings but absent values always sort last.
NaN counts as absent. Equal keys keep their input order in both directions.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from pumpdesk.kernel.types import FieldValue, Record, SortSpec

_NUMBER = 0
_STRING = 1


def sort_key(value: FieldValue) -> tuple[int, Any] | None:
    """Map a field value onto the total order. None means absent."""
    if isinstance(value, str):
        return (_STRING, value)
    if isinstance(value, int | float):
        if isinstance(value, float) and math.isnan(value):
            return None
        return (_NUMBER, value)
    return None


def apply_sort(records: Sequence[Record], spec: SortSpec | None) -> Sequence[Record]:
    """
    Stable sort by spec.key. No spec means no reordering: the input is
    returned as-is. Unknown keys read as absent on every record, which
    leaves the order unchanged.
    """
    if spec is None:
        return records

    present: list[tuple[tuple[int, Any], Record]] = []
    absent: list[Record] = []
    for record in records:
        key = sort_key(record.get(spec.key))
        if key is None:
            absent.append(record)
        else:
            present.append((key, record))

    # list.sort stays stable with reverse=True
    present.sort(key=lambda pair: pair[0], reverse=spec.descending)
    return tuple(r for _, r in present) + tuple(absent)


def next_sort_spec(current: SortSpec | None, key: str) -> SortSpec:
    """
    Column-click transition. Clicking the active column toggles direction;
    any other click (or the first one) sorts ascending by that column.
    There is no way back to unsorted.
    """
    if current is not None and current.key == key and current.direction == "ascending":
        return SortSpec(key, "descending")
    return SortSpec(key, "ascending")
