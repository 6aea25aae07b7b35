"""CustomDataTable widget - standardized wrapper around Textual's DataTable."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from contextlib import contextmanager, suppress
from typing import TYPE_CHECKING, Any

from textual.containers import Container
from textual.coordinate import Coordinate
from textual.widgets import DataTable as TextualDataTable

from bridgespy.constants.limits import MAX_ROWS_DISPLAY
from bridgespy.keyboard import DATA_TABLE_BINDINGS

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from textual.app import ComposeResult


class CustomDataTable(Container):
    """Row-cursor data table wrapper with sticky-bottom following.

    Wraps Textual's built-in DataTable. While ``sticky_bottom`` is on, the
    view scrolls to the newest row after every bulk load, so a live stream
    stays in view.

    CSS Classes: widget-custom-data-table

    Example:
        ```python
        table = CustomDataTable(
            columns=[("Id", "index", 6), ("Data", "args", None)],
            id="spy-table",
        )
        ```
    """

    DEFAULT_CSS = """
    CustomDataTable {
        height: 1fr;
        width: 1fr;
        min-width: 0;
        min-height: 3;
        background: $surface;
    }
    CustomDataTable > DataTable {
        height: 1fr;
        width: 1fr;
        min-width: 0;
        border: none;
        background: transparent;
        overflow-x: auto;
        overflow-y: auto;
    }
    """

    BINDINGS = DATA_TABLE_BINDINGS

    def __init__(
        self,
        columns: Sequence[tuple[str, str, int | None]] | None = None,
        *,
        id: str | None = None,
        classes: str = "",
        zebra_stripes: bool = False,
        sticky_bottom: bool = True,
        max_rows: int = MAX_ROWS_DISPLAY,
    ) -> None:
        """Initialize the custom data table wrapper.

        Args:
            columns: Optional (label, key, width) column definitions; a None
                width lets the column size itself to its content.
            id: Widget ID.
            classes: CSS classes (widget-custom-data-table is automatically added).
            zebra_stripes: Whether to display alternating row colors.
            sticky_bottom: Whether to keep the newest row in view.
            max_rows: Most rows accepted by :meth:`add_rows`.
        """
        super().__init__(id=id, classes=f"widget-custom-data-table {classes}".strip())
        self._columns: list[tuple[str, str, int | None]] = list(columns or [])
        self._zebra_stripes = zebra_stripes
        self._inner_widget: TextualDataTable | None = None
        self.sticky_bottom = sticky_bottom
        self.max_rows = max_rows

    def compose(self) -> ComposeResult:
        """Compose the data table with Textual's DataTable widget."""
        table = TextualDataTable(cursor_type="row")
        table.zebra_stripes = self._zebra_stripes
        self._inner_widget = table
        yield table

        for label, key, width in self._columns:
            table.add_column(label, width=width, key=key)

    @property
    def data_table(self) -> TextualDataTable | None:
        """The composed Textual DataTable, or None before compose."""
        return self._inner_widget

    @contextmanager
    def batch_update(self):
        """Proxy for the inner DataTable's batch_update() context manager."""
        if self._inner_widget is not None:
            with self._inner_widget.batch_update():
                yield
        else:
            yield

    def set_columns(self, columns: Sequence[tuple[str, str, int | None]]) -> None:
        """Replace the column definitions, clearing rows and columns."""
        self._columns = list(columns)
        if self._inner_widget is None:
            return
        self._inner_widget.clear(columns=True)
        for label, key, width in self._columns:
            self._inner_widget.add_column(label, width=width, key=key)

    def add_rows(self, rows: Iterable[tuple[str, Sequence[Any]]]) -> int:
        """Add (row_key, values) rows, truncated to ``max_rows``.

        Returns:
            Number of rows added.
        """
        if self._inner_widget is None:
            return 0
        materialized = list(rows)
        if len(materialized) > self.max_rows:
            logger.warning("Truncating %d rows to %d", len(materialized), self.max_rows)
            materialized = materialized[-self.max_rows :]
        for key, values in materialized:
            self._inner_widget.add_row(*values, key=key)
        if self.sticky_bottom and materialized:
            self.scroll_to_bottom()
        return len(materialized)

    def scroll_to_bottom(self) -> None:
        """Scroll the newest rows into view without moving the cursor."""
        if self._inner_widget is not None:
            self._inner_widget.scroll_end(animate=False)

    def clear(self) -> None:
        """Remove all rows, keeping the columns."""
        if self._inner_widget is not None:
            self._inner_widget.clear(columns=False)

    @property
    def row_count(self) -> int:
        if self._inner_widget is not None:
            return self._inner_widget.row_count
        return 0

    @property
    def cursor_row(self) -> int | None:
        """Current cursor row index, or None when there are no rows."""
        if self._inner_widget is None or self._inner_widget.row_count == 0:
            return None
        return self._inner_widget.cursor_coordinate.row

    @cursor_row.setter
    def cursor_row(self, row: int | None) -> None:
        if self._inner_widget is None or row is None:
            return
        with suppress(Exception):
            max_row = self._inner_widget.row_count - 1
            safe_row = max(0, min(row, max_row))
            self._inner_widget.cursor_coordinate = Coordinate(safe_row, 0)

    def action_cursor_first(self) -> None:
        self.sticky_bottom = False
        self.cursor_row = 0

    def action_cursor_last(self) -> None:
        if self._inner_widget is not None and self._inner_widget.row_count:
            self.cursor_row = self._inner_widget.row_count - 1

    def action_toggle_sticky_bottom(self) -> None:
        self.sticky_bottom = not self.sticky_bottom
        if self.sticky_bottom and self._inner_widget is not None:
            self._inner_widget.scroll_end(animate=False)
        self.notify(f"Stick to bottom: {'on' if self.sticky_bottom else 'off'}")
