"""Plain-text table rendering for the PumpDesk console."""
from __future__ import annotations

from pumpdesk.kernel.types import COLUMNS, FieldValue, Record, TableView

EMPTY_MESSAGE = "No pumps found matching your search criteria"
MAX_CELL = 24


def format_value(value: FieldValue) -> str:
    """Cell text. Absent fields render blank, like the web table."""
    if value is None:
        return ""
    text = str(value)
    if len(text) > MAX_CELL:
        return text[: MAX_CELL - 1] + "…"
    return text


def summary_line(view: TableView) -> str:
    return f"Showing {view.filtered_count} of {view.total_count} pumps"


def page_line(view: TableView) -> str:
    sort = ""
    if view.sort is not None:
        arrow = "▲" if view.sort.direction == "ascending" else "▼"
        sort = f" · sorted by {view.sort.key} {arrow}"
    return f"Page {view.page} of {view.total_pages} ({view.page_size} per page){sort}"


def render_table(view: TableView) -> str:
    """Render the visible page as an aligned text table."""
    headers = ["ID"] + [c.label for c in COLUMNS]
    rows = [
        [format_value(r.id)] + [format_value(r.get(c.key)) for c in COLUMNS]
        for r in view.rows
    ]

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    # numbers right-aligned
    numeric = [False] + [c.kind == "number" for c in COLUMNS]

    def fmt(cells: list[str]) -> str:
        return "  ".join(
            cell.rjust(widths[i]) if numeric[i] else cell.ljust(widths[i])
            for i, cell in enumerate(cells)
        ).rstrip()

    lines = [fmt(headers), "  ".join("-" * w for w in widths)]
    lines.extend(fmt(row) for row in rows)
    if view.is_empty:
        lines.append("")
        lines.append(EMPTY_MESSAGE)
    return "\n".join(lines)


def render_record(record: Record) -> str:
    """One field per line, for the edit form."""
    width = max(len(c.label) for c in COLUMNS)
    lines = [f"{'ID'.ljust(width)}  {record.id}"]
    for c in COLUMNS:
        lines.append(f"{c.label.ljust(width)}  {format_value(record.get(c.key))}  [{c.key}]")
    return "\n".join(lines)
