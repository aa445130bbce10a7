"""
Kernel test configuration.

Shared pump fixtures. Records are built with Record.from_dict so the test
data reads like the JSON the loader sees.
"""

import pytest

from pumpdesk.kernel.types import Record

PUMP_ROWS = [
    {"id": 1, "name": "Main Pump", "type": "Centrifugal", "block": "North", "flowRate": 120.5, "offset": 3},
    {"id": 2, "name": "Backup Pump", "type": "Diaphragm", "block": "South", "flowRate": 80, "offset": 1},
    {"id": 3, "name": "Booster", "type": "Centrifugal", "block": "East", "flowRate": 200},
    {"id": 4, "name": "Well Feed", "type": "Submersible", "block": "North-West"},
    {"id": 5, "name": "Sump Drain", "type": "Diaphragm", "flowRate": 45.25, "offset": 0},
]


@pytest.fixture
def pumps():
    return [Record.from_dict(row) for row in PUMP_ROWS]


@pytest.fixture
def many_pumps():
    """25 records named pump_01 .. pump_25."""
    return [
        Record.from_dict({"id": i, "name": f"pump_{i:02d}", "type": "Centrifugal", "flowRate": i * 10})
        for i in range(1, 26)
    ]
