"""
PumpDesk Kernel — Filter Engine

Pure function: (records, query) → order-preserving subsequence.
Case-insensitive substring match, ORed across the searchable columns.
"""

from __future__ import annotations

from collections.abc import Sequence

from pumpdesk.kernel.types import SEARCHABLE_KEYS, Record


def apply_filter(records: Sequence[Record], query: str) -> Sequence[Record]:
    """
    Keep the records where any searchable field contains `query`.

    A blank query is the identity filter: the input sequence itself is
    returned, untouched. Absent or non-string fields never match.
    """
    if not query.strip():
        return records

    needle = query.casefold()
    return tuple(r for r in records if _matches(r, needle))


def _matches(record: Record, needle: str) -> bool:
    for key in SEARCHABLE_KEYS:
        value = record.get(key)
        if isinstance(value, str) and needle in value.casefold():
            return True
    return False
