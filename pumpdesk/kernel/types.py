"""
PumpDesk Kernel — Shared Types

Data classes used across the store, engines, edit session, and controller.
These are the contracts that bind the kernel together.

Field values are untyped at the edge: a record field holds a string, a
number, or nothing at all. Absence (key missing) is distinct from "" and 0.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

FieldValue = str | int | float | None
RecordId = str | int

SortDirection = Literal["ascending", "descending"]
EditState = Literal["idle", "editing"]


# ---------------------------------------------------------------------------
# Column registry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Column:
    """One column of the equipment table."""

    key: str
    label: str
    kind: Literal["text", "number"] = "text"
    searchable: bool = False


COLUMNS: tuple[Column, ...] = (
    Column("name", "Pump Name", searchable=True),
    Column("type", "Type", searchable=True),
    Column("block", "Area/Block", searchable=True),
    Column("latitude", "Latitude", kind="number"),
    Column("longitude", "Longitude", kind="number"),
    Column("flowRate", "Flow Rate", kind="number"),
    Column("offset", "Offset", kind="number"),
    Column("currentPressure", "Current Pressure", kind="number"),
    Column("minPressure", "Min Pressure", kind="number"),
    Column("maxPressure", "Max Pressure", kind="number"),
)

COLUMN_KEYS: frozenset[str] = frozenset(c.key for c in COLUMNS)

SEARCHABLE_KEYS: tuple[str, ...] = tuple(c.key for c in COLUMNS if c.searchable)

DEFAULT_PAGE_SIZES: tuple[int, ...] = (1, 5, 10, 25, 50, 100)
DEFAULT_PAGE_SIZE = 10


def column(key: str) -> Column | None:
    """Lookup a column by key. Returns None for unknown keys."""
    for c in COLUMNS:
        if c.key == key:
            return c
    return None


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class NotFound(KeyError):
    """No record with the given identifier exists in the store."""

    def __init__(self, record_id: RecordId):
        super().__init__(record_id)
        self.record_id = record_id

    def __str__(self) -> str:
        return f"record not found: {self.record_id!r}"


class NoActiveEdit(RuntimeError):
    """An edit operation was called while no edit session is open."""
    pass


class UnknownColumn(KeyError):
    """Field key is not one of the known, editable columns."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"unknown column: {self.key!r}"


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Record:
    """
    One equipment record.

    `values` only carries keys from COLUMNS. A missing key means the field
    is absent for this record. The mapping is copied on construction and
    exposed read-only, so a Record can never change after it is built;
    edits build a new Record and replace the old one.
    """

    id: RecordId
    values: Mapping[str, FieldValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __hash__(self) -> int:
        return hash((self.id, tuple(sorted(self.values.items(), key=lambda kv: kv[0]))))

    def get(self, key: str) -> FieldValue:
        return self.values.get(key)

    def has(self, key: str) -> bool:
        return key in self.values

    def with_values(self, values: Mapping[str, FieldValue]) -> Record:
        return Record(id=self.id, values=dict(values))

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"id": self.id}
        d.update(self.values)
        return d

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Record:
        return cls(
            id=d["id"],
            values={k: v for k, v in d.items() if k in COLUMN_KEYS},
        )


@dataclass(frozen=True)
class SortSpec:
    """The single active (column, direction) pair."""

    key: str
    direction: SortDirection = "ascending"

    @property
    def descending(self) -> bool:
        return self.direction == "descending"


@dataclass(frozen=True)
class TableView:
    """Everything a renderer needs to draw the current page."""

    rows: tuple[Record, ...]
    page: int
    page_size: int
    total_pages: int
    filtered_count: int
    total_count: int
    query: str = ""
    sort: SortSpec | None = None
    editing: bool = False

    @property
    def is_empty(self) -> bool:
        return self.filtered_count == 0
