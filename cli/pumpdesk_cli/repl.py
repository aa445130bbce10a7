"""REPL for the PumpDesk console."""
from __future__ import annotations

from pumpdesk.kernel.controller import TableController
from pumpdesk.kernel.types import COLUMNS, NoActiveEdit, NotFound, RecordId, UnknownColumn, column

from pumpdesk_cli.render import page_line, render_record, render_table, summary_line


class Repl:
    """Interactive table console over one TableController."""

    def __init__(self, controller: TableController):
        self.controller = controller
        self.running = True

    def start(self):
        """Start the REPL."""
        self._show_table()

        while self.running:
            try:
                line = input(self._prompt()).strip()

                if not line:
                    continue

                if line.startswith("/"):
                    self.handle_command(line)
                else:
                    # Bare text is a search
                    self._search(line)

            except (EOFError, KeyboardInterrupt):
                print()
                break

    def _prompt(self) -> str:
        if self.controller.is_editing:
            return f"pumps [edit {self.controller.editing_record().id}] > "
        return "pumps > "

    def handle_command(self, line: str):
        """Handle REPL commands."""
        parts = line.split(maxsplit=1)
        cmd = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else ""

        try:
            self._dispatch(cmd, arg)
        except (NotFound, UnknownColumn, NoActiveEdit) as e:
            print(f"  Error: {e}")

    def _dispatch(self, cmd: str, arg: str):
        if cmd == "/quit":
            self.running = False
            print("Goodbye.")
        elif cmd == "/search":
            self._search(arg)
        elif cmd == "/sort":
            if arg:
                self._sort(arg.strip())
            else:
                print("Usage: /sort <column>")
        elif cmd == "/page":
            page = self._parse_int(arg)
            if page is None:
                print("Usage: /page <n>")
            else:
                self.controller.set_page(page)
                self._show_table()
        elif cmd == "/next":
            self.controller.next_page()
            self._show_table()
        elif cmd == "/prev":
            self.controller.previous_page()
            self._show_table()
        elif cmd == "/size":
            size = self._parse_int(arg)
            if size is None:
                print(f"Usage: /size <n>  (one of {', '.join(map(str, self.controller.page_sizes))})")
            else:
                self.controller.set_page_size(size)
                self._show_table()
        elif cmd == "/edit":
            if arg:
                self._begin_edit(arg.strip())
            else:
                print("Usage: /edit <id>")
        elif cmd == "/set":
            self._set_field(arg)
        elif cmd == "/save":
            updated = self.controller.commit_edit()
            print(f"  Saved pump {updated.id}.")
            self._show_table()
        elif cmd == "/cancel":
            self.controller.cancel_edit()
            print("  Edit cancelled.")
        elif cmd == "/show":
            self._show_table()
        elif cmd == "/columns":
            self._show_columns()
        elif cmd == "/help":
            self._show_help()
        else:
            print(f"Unknown command: {cmd}")
            print("Type /help for available commands.")

    # -- commands --

    def _search(self, text: str):
        self.controller.set_query(text)
        self._show_table()

    def _sort(self, key: str):
        col = column(key)
        if col is None:
            print(f"  Unknown column: {key}. Type /columns to list them.")
            return
        spec = self.controller.set_sort_column(col.key)
        print(f"  Sorted by {col.label} ({spec.direction}).")
        self._show_table()

    def _begin_edit(self, raw_id: str):
        record = self.controller.begin_edit(self._resolve_id(raw_id))
        print("  Edit Pump")
        for line in render_record(record).split("\n"):
            print(f"  {line}")
        print("  /set <column> <value>, then /save or /cancel.")

    def _set_field(self, arg: str):
        parts = arg.split(maxsplit=1)
        if not parts:
            print("Usage: /set <column> <value>")
            return
        key = parts[0]
        value = parts[1] if len(parts) > 1 else ""
        # Raw text, exactly as typed
        self.controller.update_edit_field(key, value)
        print(f"  {key} = {value!r}")

    def _resolve_id(self, raw: str) -> RecordId:
        """Typed ids are text; match a numeric id when one exists."""
        try:
            as_int = int(raw)
        except ValueError:
            return raw
        if as_int in self.controller.store:
            return as_int
        return raw

    @staticmethod
    def _parse_int(arg: str) -> int | None:
        try:
            return int(arg.strip())
        except ValueError:
            return None

    # -- output --

    def _show_table(self):
        view = self.controller.view()
        print()
        print(render_table(view))
        print()
        print(f"  {summary_line(view)}")
        print(f"  {page_line(view)}")
        print()

    def _show_columns(self):
        print("  Columns:")
        for c in COLUMNS:
            flag = " (searchable)" if c.searchable else ""
            print(f"    {c.key:<16} {c.label}{flag}")

    def _show_help(self):
        """Show help message."""
        print("""
  REPL Commands:
    /search <text>       - Filter by name, type or area (empty clears)
    /sort <column>       - Sort by column; repeat to flip direction
    /page <n>            - Go to page n
    /next, /prev         - Next / previous page
    /size <n>            - Rows per page
    /edit <id>           - Start editing a pump
    /set <column> <val>  - Change a field in the open edit
    /save                - Save the open edit
    /cancel              - Discard the open edit
    /show                - Redraw the table
    /columns             - List column keys
    /help                - Show this help
    /quit                - Exit

  Text without a leading / is treated as a search.
""")
