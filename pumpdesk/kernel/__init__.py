"""
PumpDesk Kernel — the tabular record controller.

Components:
  store       — canonical, insertion-ordered record collection
  filtering   — (records, query) → subsequence
  sorting     — (records, spec) → stable ordering; column-click transitions
  pagination  — page slicing and bounds
  pipeline    — filter → sort → paginate, recomputed from scratch
  editing     — single-record edit session
  controller  — the surface a renderer drives
  loader      — one-shot dataset fetch (IO lives here only)
"""

from pumpdesk.kernel.controller import TableController
from pumpdesk.kernel.editing import EditSession
from pumpdesk.kernel.filtering import apply_filter
from pumpdesk.kernel.loader import fetch_records, load_into, parse_records
from pumpdesk.kernel.pagination import apply_page, clamp_page, total_pages
from pumpdesk.kernel.pipeline import derive_view
from pumpdesk.kernel.sorting import apply_sort, next_sort_spec
from pumpdesk.kernel.store import RecordStore
from pumpdesk.kernel.types import (
    COLUMNS,
    NoActiveEdit,
    NotFound,
    Record,
    SortSpec,
    TableView,
    UnknownColumn,
)

__all__ = [
    "TableController",
    "RecordStore",
    "EditSession",
    "apply_filter",
    "apply_sort",
    "next_sort_spec",
    "apply_page",
    "clamp_page",
    "total_pages",
    "derive_view",
    "fetch_records",
    "load_into",
    "parse_records",
    "COLUMNS",
    "Record",
    "SortSpec",
    "TableView",
    "NotFound",
    "NoActiveEdit",
    "UnknownColumn",
]
