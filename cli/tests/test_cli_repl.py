"""Tests for the PumpDesk console REPL and text rendering."""

import pytest

from pumpdesk.kernel.controller import TableController
from pumpdesk.kernel.types import Record

from pumpdesk_cli.render import EMPTY_MESSAGE, format_value, render_table, summary_line
from pumpdesk_cli.repl import Repl

ROWS = [
    {"id": 1, "name": "Main Pump", "type": "Centrifugal", "block": "North", "flowRate": 120.5},
    {"id": 2, "name": "Backup Pump", "type": "Diaphragm", "block": "South"},
    {"id": "v-3", "name": "Valve Feed", "type": "Gear"},
]


@pytest.fixture
def controller():
    return TableController([Record.from_dict(r) for r in ROWS], page_sizes=(1, 2, 10))


@pytest.fixture
def repl(controller):
    return Repl(controller)


class TestRender:
    def test_format_value(self):
        assert format_value(None) == ""
        assert format_value(0) == "0"
        assert format_value("x" * 40).endswith("…")

    def test_table_has_headers_and_rows(self, controller):
        text = render_table(controller.view())
        assert "Pump Name" in text
        assert "Area/Block" in text
        assert "Main Pump" in text
        assert "120.5" in text

    def test_empty_message(self, controller):
        controller.set_query("turbine")
        view = controller.view()
        assert EMPTY_MESSAGE in render_table(view)
        assert summary_line(view) == "Showing 0 of 3 pumps"


class TestCommands:
    def test_search(self, repl, capsys):
        repl.handle_command("/search backup")
        out = capsys.readouterr().out
        assert "Backup Pump" in out
        assert "Main Pump" not in out
        assert "Showing 1 of 3 pumps" in out

    def test_search_empty_clears(self, repl, controller):
        repl.handle_command("/search backup")
        repl.handle_command("/search")
        assert controller.query == ""
        assert controller.get_filtered_count() == 3

    def test_sort_toggles(self, repl, controller, capsys):
        repl.handle_command("/sort name")
        repl.handle_command("/sort name")
        out = capsys.readouterr().out
        assert "(ascending)" in out
        assert "(descending)" in out
        assert [r.id for r in controller.get_visible_rows()] == ["v-3", 1, 2]

    def test_sort_unknown_column_leaves_order(self, repl, controller, capsys):
        repl.handle_command("/sort serial")
        out = capsys.readouterr().out
        assert "Unknown column: serial" in out
        assert controller.sort is None
        assert [r.id for r in controller.get_visible_rows()] == [1, 2, "v-3"]

    def test_sort_reports_column_label(self, repl, capsys):
        repl.handle_command("/sort flowRate")
        assert "Sorted by Flow Rate (ascending)." in capsys.readouterr().out

    def test_paging(self, repl, controller):
        repl.handle_command("/size 1")
        repl.handle_command("/page 99")
        assert controller.page == 3
        repl.handle_command("/next")
        assert controller.page == 3
        repl.handle_command("/prev")
        assert controller.page == 2

    def test_bad_page_argument(self, repl, capsys):
        repl.handle_command("/page two")
        assert "Usage: /page" in capsys.readouterr().out

    def test_edit_and_save(self, repl, controller, capsys):
        repl.handle_command("/edit 1")
        repl.handle_command("/set flowRate 99")
        repl.handle_command("/save")
        out = capsys.readouterr().out
        assert "Edit Pump" in out
        assert "Saved pump 1." in out
        # stored as raw text
        assert controller.store.get(1).get("flowRate") == "99"

    def test_edit_string_id(self, repl, controller):
        repl.handle_command("/edit v-3")
        assert controller.editing_record().id == "v-3"

    def test_set_value_with_spaces(self, repl, controller):
        repl.handle_command("/edit 2")
        repl.handle_command("/set block South West")
        assert controller.editing_record().get("block") == "South West"

    def test_cancel(self, repl, controller):
        repl.handle_command("/edit 2")
        repl.handle_command("/set name Changed")
        repl.handle_command("/cancel")
        assert not controller.is_editing
        assert controller.store.get(2).get("name") == "Backup Pump"

    def test_errors_are_reported(self, repl, capsys):
        repl.handle_command("/edit 42")
        repl.handle_command("/save")
        repl.handle_command("/edit 1")
        repl.handle_command("/set colour red")
        out = capsys.readouterr().out
        assert "record not found" in out
        assert "no edit in progress" in out
        assert "unknown column" in out

    def test_unknown_command(self, repl, capsys):
        repl.handle_command("/frobnicate")
        assert "Unknown command" in capsys.readouterr().out

    def test_quit(self, repl):
        repl.handle_command("/quit")
        assert not repl.running


class TestLoop:
    def test_bare_text_searches_and_eof_exits(self, repl, controller, monkeypatch):
        lines = iter(["pump", "/sort name"])

        def fake_input(prompt):
            try:
                return next(lines)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)
        repl.start()
        assert controller.query == "pump"
        assert [r.id for r in controller.get_visible_rows()] == [2, 1]
