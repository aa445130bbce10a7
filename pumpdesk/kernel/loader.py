"""
PumpDesk Kernel — Dataset Loader

One-shot fetch of the equipment dataset, at startup. The source is either an
http(s) URL or a local JSON file; the body must be a JSON array of objects.

Failure is never fatal: a bad status, a transport error, unreadable file or
malformed body is logged once and yields an empty collection. No retries.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from pumpdesk.kernel.types import FieldValue, Record

if TYPE_CHECKING:
    from pumpdesk.kernel.controller import TableController

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

_ROWS = TypeAdapter(list[Any])


class PumpPayload(BaseModel):
    """
    One row of the dataset as it arrives on the wire.

    Every column is optional and no value is ever rejected: anything that is
    not a string or a number (null, booleans, nested objects) reads as absent.
    Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | int | None = None
    key: str | int | None = None

    name: FieldValue = None
    type: FieldValue = None
    block: FieldValue = None
    latitude: FieldValue = None
    longitude: FieldValue = None
    flow_rate: FieldValue = Field(default=None, alias="flowRate")
    offset: FieldValue = None
    current_pressure: FieldValue = Field(default=None, alias="currentPressure")
    min_pressure: FieldValue = Field(default=None, alias="minPressure")
    max_pressure: FieldValue = Field(default=None, alias="maxPressure")

    @field_validator(
        "name",
        "type",
        "block",
        "latitude",
        "longitude",
        "flow_rate",
        "offset",
        "current_pressure",
        "min_pressure",
        "max_pressure",
        mode="before",
    )
    @classmethod
    def _scalar_or_absent(cls, v: Any) -> FieldValue:
        if isinstance(v, bool) or not isinstance(v, str | int | float):
            return None
        return v

    @field_validator("id", "key", mode="before")
    @classmethod
    def _usable_id(cls, v: Any) -> Any:
        if isinstance(v, bool) or not isinstance(v, str | int):
            return None
        return v

    def to_record(self) -> Record | None:
        """Convert to a Record. Rows with neither id nor key have no identity."""
        record_id = self.id if self.id is not None else self.key
        if record_id is None:
            return None
        dumped = self.model_dump(by_alias=True, exclude_none=True)
        dumped["id"] = record_id
        return Record.from_dict(dumped)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_records(body: str | bytes) -> list[Record]:
    """
    Parse a JSON array of row objects into Records.
    Raises pydantic.ValidationError when the body is not a JSON array.
    Elements that are not objects, and rows without an id, are skipped.
    """
    rows = _ROWS.validate_json(body)
    records: list[Record] = []
    skipped = 0
    for row in rows:
        record = PumpPayload.model_validate(row).to_record() if isinstance(row, dict) else None
        if record is None:
            skipped += 1
            continue
        records.append(record)

    if skipped:
        logger.warning("loader: skipped %d row(s) that were not objects or had no id", skipped)
    return records


# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


async def _read_source(
    source: str,
    *,
    timeout: float,
    client: httpx.AsyncClient | None,
) -> bytes:
    if not is_url(source):
        return Path(source).expanduser().read_bytes()

    if client is not None:
        res = await client.get(source, timeout=timeout, follow_redirects=True)
        res.raise_for_status()
        return res.content

    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as owned:
        res = await owned.get(source)
        res.raise_for_status()
        return res.content


async def fetch_records(
    source: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.AsyncClient | None = None,
) -> list[Record]:
    """
    Fetch and parse the dataset. Returns [] on any failure.
    """
    try:
        body = await _read_source(source, timeout=timeout, client=client)
    except httpx.HTTPStatusError as e:
        logger.warning(
            "loader: failed to fetch pumps data from %s: HTTP %d",
            source,
            e.response.status_code,
        )
        return []
    except httpx.HTTPError as e:
        logger.warning("loader: failed to fetch pumps data from %s: %s", source, e)
        return []
    except OSError as e:
        logger.warning("loader: failed to read pumps data from %s: %s", source, e)
        return []

    try:
        records = parse_records(body)
    except ValidationError as e:
        logger.warning(
            "loader: pumps data from %s is not a JSON array (%d error(s))",
            source,
            e.error_count(),
        )
        return []

    logger.info("loader: fetched %d records from %s", len(records), source)
    return records


async def load_into(
    controller: TableController,
    source: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.AsyncClient | None = None,
) -> int:
    """Fetch the dataset and hand it to the controller. Returns the record count."""
    records = await fetch_records(source, timeout=timeout, client=client)
    controller.load(records)
    return controller.get_total_count()
