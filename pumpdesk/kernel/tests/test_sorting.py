"""
PumpDesk Sort Tests

Stable single-column sort with the documented total order
(numbers < strings < absent, absent always last), and the column-click
state machine that cycles ascending/descending without ever returning
to unsorted.
"""

import math

import pytest

from pumpdesk.kernel.sorting import apply_sort, next_sort_spec, sort_key
from pumpdesk.kernel.types import Record, SortSpec


def ids(records):
    return [r.id for r in records]


ASC = "ascending"
DESC = "descending"


class TestNoSpec:
    def test_none_is_identity(self, pumps):
        assert apply_sort(pumps, None) is pumps

    def test_empty_input(self):
        assert list(apply_sort([], SortSpec("name"))) == []


class TestStability:
    def test_ties_keep_input_order(self):
        records = [Record.from_dict({"id": 1, "type": "A"}), Record.from_dict({"id": 2, "type": "A"})]
        assert ids(apply_sort(records, SortSpec("type", ASC))) == [1, 2]

    def test_ties_keep_input_order_descending(self, pumps):
        assert ids(apply_sort(pumps, SortSpec("type", DESC))) == [4, 2, 5, 1, 3]

    def test_ties_ascending(self, pumps):
        assert ids(apply_sort(pumps, SortSpec("type", ASC))) == [1, 3, 2, 5, 4]

    def test_descending_reverses_distinct_values(self, pumps):
        asc = ids(apply_sort(pumps, SortSpec("name", ASC)))
        desc = ids(apply_sort(pumps, SortSpec("name", DESC)))
        assert desc == list(reversed(asc))


class TestOrdering:
    def test_strings_by_code_point(self, pumps):
        assert ids(apply_sort(pumps, SortSpec("name", ASC))) == [2, 3, 1, 5, 4]

    def test_case_sensitive(self):
        records = [Record(id=1, values={"name": "alpha"}), Record(id=2, values={"name": "Beta"})]
        # uppercase sorts before lowercase
        assert ids(apply_sort(records, SortSpec("name", ASC))) == [2, 1]

    def test_numbers_numeric(self, pumps):
        assert ids(apply_sort(pumps, SortSpec("flowRate", ASC))) == [5, 2, 1, 3, 4]

    def test_absent_last_ascending(self, pumps):
        assert ids(apply_sort(pumps, SortSpec("block", ASC))) == [3, 1, 4, 2, 5]

    def test_absent_last_descending(self, pumps):
        assert ids(apply_sort(pumps, SortSpec("block", DESC))) == [2, 4, 1, 3, 5]
        assert ids(apply_sort(pumps, SortSpec("flowRate", DESC))) == [3, 1, 2, 5, 4]

    def test_empty_string_is_not_absent(self):
        records = [Record(id=1, values={}), Record(id=2, values={"name": ""}), Record(id=3, values={"name": "a"})]
        assert ids(apply_sort(records, SortSpec("name", ASC))) == [2, 3, 1]

    def test_zero_is_not_absent(self):
        records = [Record(id=1, values={}), Record(id=2, values={"offset": 0}), Record(id=3, values={"offset": -1})]
        assert ids(apply_sort(records, SortSpec("offset", ASC))) == [3, 2, 1]

    def test_numbers_before_strings(self):
        # an edited numeric field holds raw text
        records = [
            Record(id=1, values={"offset": "2"}),
            Record(id=2, values={"offset": 10}),
            Record(id=3, values={"offset": 1.5}),
        ]
        assert ids(apply_sort(records, SortSpec("offset", ASC))) == [3, 2, 1]
        assert ids(apply_sort(records, SortSpec("offset", DESC))) == [1, 2, 3]

    def test_nan_sorts_as_absent(self):
        records = [Record(id=1, values={"offset": math.nan}), Record(id=2, values={"offset": 5})]
        assert ids(apply_sort(records, SortSpec("offset", ASC))) == [2, 1]
        assert sort_key(math.nan) is None

    def test_unknown_column_keeps_order(self, pumps):
        assert ids(apply_sort(pumps, SortSpec("no_such_field", ASC))) == [1, 2, 3, 4, 5]
        assert ids(apply_sort(pumps, SortSpec("no_such_field", DESC))) == [1, 2, 3, 4, 5]

    def test_sort_never_adds_or_drops(self, pumps):
        result = apply_sort(pumps, SortSpec("block", DESC))
        assert sorted(ids(result)) == sorted(ids(pumps))


class TestClickStateMachine:
    def test_first_click_ascending(self):
        assert next_sort_spec(None, "name") == SortSpec("name", ASC)

    def test_three_clicks_cycle(self):
        states = []
        spec = None
        for _ in range(3):
            spec = next_sort_spec(spec, "name")
            states.append(spec.direction)
        assert states == [ASC, DESC, ASC]

    def test_never_returns_to_unsorted(self):
        spec = None
        for _ in range(10):
            spec = next_sort_spec(spec, "type")
            assert spec is not None

    @pytest.mark.parametrize("direction", [ASC, DESC])
    def test_other_column_resets_to_ascending(self, direction):
        assert next_sort_spec(SortSpec("name", direction), "type") == SortSpec("type", ASC)
