"""
PumpDesk configuration — all environment variables in one place.

Read from environment at import time. Malformed numbers fall back to defaults.
"""

from __future__ import annotations

import os

from pumpdesk.kernel.pagination import snap_page_size
from pumpdesk.kernel.types import DEFAULT_PAGE_SIZE, DEFAULT_PAGE_SIZES


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, default))
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, default))
    except ValueError:
        return default


def parse_page_sizes(raw: str | None, default: tuple[int, ...] = DEFAULT_PAGE_SIZES) -> tuple[int, ...]:
    """Parse "5,10,25" into (5, 10, 25). Non-positive or junk entries are dropped."""
    if not raw:
        return default
    sizes: set[int] = set()
    for part in raw.split(","):
        part = part.strip()
        if part.isdigit() and int(part) > 0:
            sizes.add(int(part))
    return tuple(sorted(sizes)) or default


class Settings:
    """Application settings from environment variables."""

    # Dataset
    DATA_SOURCE: str = os.environ.get("PUMPDESK_DATA_SOURCE", "http://localhost:3000/pumps_data.json")
    FETCH_TIMEOUT: float = _env_float("PUMPDESK_FETCH_TIMEOUT", 10.0)

    # Paging
    PAGE_SIZES: tuple[int, ...] = parse_page_sizes(os.environ.get("PUMPDESK_PAGE_SIZES"))
    PAGE_SIZE: int = snap_page_size(_env_int("PUMPDESK_PAGE_SIZE", DEFAULT_PAGE_SIZE), PAGE_SIZES)

    # Logging
    LOG_LEVEL: str = os.environ.get("PUMPDESK_LOG_LEVEL", "WARNING").upper()


# Singleton instance
settings = Settings()
