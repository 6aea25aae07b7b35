"""Spy screen - live bridge traffic table with throughput KPIs and payload inspector."""

from __future__ import annotations

import logging
from contextlib import suppress

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Resize
from textual.timer import Timer
from textual.widgets import DataTable, Footer, Header, Input

from bridgespy.controllers.base.base_controller import BaseEventSource, WorkerResult
from bridgespy.controllers.spy.controller import SpyController
from bridgespy.keyboard import SPY_SCREEN_BINDINGS
from bridgespy.models.state.session_state import SessionState
from bridgespy.screens.base_screen import BaseScreen
from bridgespy.screens.spy.config import (
    FILTER_INPUT_ID,
    FILTER_PLACEHOLDER,
    INSPECTOR_ID,
    KPI_BANDWIDTH_ID,
    KPI_FOLLOW_ID,
    KPI_RATE_ID,
    KPI_RETAINED_ID,
    SPY_TABLE_COLUMNS,
    SPY_TABLE_ID,
    TABLE_REFRESH_INTERVAL_SECONDS,
)
from bridgespy.screens.spy.presenter import SpyPresenter
from bridgespy.widgets import CustomDataTable, CustomKPI, PayloadInspector

logger = logging.getLogger(__name__)


class SpyScreen(BaseScreen):
    """Live view of the retained bridge calls.

    The controller's rate sampler runs on this screen's ``set_interval``; the
    event source is polled on a second interval from a thread worker and the
    table is rebuilt on a third, only when rows changed.
    """

    BINDINGS = SPY_SCREEN_BINDINGS

    DEFAULT_CSS = """
    SpyScreen {
        layout: vertical;
    }
    #spy-kpi-bar {
        height: 1;
        padding: 0 1;
        background: $panel;
    }
    #filter-input {
        height: 3;
        margin: 0 1;
    }
    #spy-main {
        height: 1fr;
    }
    #spy-table-pane {
        width: 3fr;
    }
    #payload-inspector {
        width: 2fr;
        border-left: solid $primary-background;
    }
    """

    def __init__(
        self,
        controller: SpyController,
        source: BaseEventSource | None = None,
        *,
        presenter: SpyPresenter | None = None,
    ) -> None:
        super().__init__()
        self.controller = controller
        self.source = source
        self._presenter = presenter or SpyPresenter(controller.settings.max_rows_display)
        self._poll_timer: Timer | None = None
        self._refresh_timer: Timer | None = None
        self._poll_in_flight = False
        self._paused = False
        self._table_dirty = True

    @property
    def screen_title(self) -> str:
        return "Live"

    @property
    def presenter(self) -> SpyPresenter:
        return self._presenter

    @property
    def paused(self) -> bool:
        return self._paused

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="spy-kpi-bar"):
            yield CustomKPI("Rate", self._presenter.format_rate(0), id=KPI_RATE_ID)
            yield CustomKPI("Bandwidth", self._presenter.format_bytes(0), id=KPI_BANDWIDTH_ID)
            yield CustomKPI("Retained", self._presenter.format_retained(0), id=KPI_RETAINED_ID)
            yield CustomKPI("Source", self._source_label(), id=KPI_FOLLOW_ID)
        yield Input(placeholder=FILTER_PLACEHOLDER, id=FILTER_INPUT_ID)
        with Horizontal(id="spy-main"):
            with Vertical(id="spy-table-pane"):
                yield CustomDataTable(
                    [(label, key, None) for key, label, _ in SPY_TABLE_COLUMNS],
                    id=SPY_TABLE_ID,
                    zebra_stripes=True,
                    max_rows=self._presenter.max_rows,
                )
            yield PayloadInspector(id=INSPECTOR_ID)
        yield Footer()

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    async def load_data(self) -> None:
        self.controller.add_listener(self._on_state_change)
        session = self.controller.mount(self)
        self._table_dirty = True
        self._refresh_table()
        self._on_state_change(session)
        self._refresh_timer = self.set_interval(
            TABLE_REFRESH_INTERVAL_SECONDS,
            self._refresh_table,
        )
        self._start_source_polling()
        self.action_focus_table()

    def on_unmount(self) -> None:
        """Stop timers, unmount the controller and close the source."""
        self._stop_source_polling()
        if self._refresh_timer is not None:
            self._refresh_timer.stop()
            self._refresh_timer = None
        self.controller.remove_listener(self._on_state_change)
        self.controller.unmount()
        if self.source is not None:
            self.source.close()

    def on_resize(self, event: Resize) -> None:
        self._apply_column_widths(event.size.width)

    # =========================================================================
    # SOURCE POLLING
    # =========================================================================

    def _start_source_polling(self) -> None:
        if self.source is None or self._poll_timer is not None:
            return
        if not self.source.check_connection():
            logger.warning("Event source %s is not available yet", self.source.name)
        self._poll_timer = self.set_interval(
            self.controller.settings.source_poll_interval_seconds,
            self._on_poll_timer_tick,
        )
        self._on_poll_timer_tick()

    def _stop_source_polling(self) -> None:
        if self._poll_timer is not None:
            self._poll_timer.stop()
            self._poll_timer = None

    def _on_poll_timer_tick(self) -> None:
        if self.source is None or self._paused or self._poll_in_flight:
            return
        self._poll_in_flight = True
        self.run_worker(
            self._poll_source_worker,
            name="spy-source-poll",
            exclusive=True,
            thread=True,
        )

    def _poll_source_worker(self) -> None:
        source = self.source
        if source is None:
            self._poll_in_flight = False
            return
        try:
            result = source.poll_result(final=not self.controller.settings.follow)
            with suppress(RuntimeError):
                self.app.call_from_thread(self._ingest, result)
        finally:
            self._poll_in_flight = False

    def _ingest(self, result: WorkerResult) -> None:
        """Feed polled events to the controller on the UI thread."""
        if not self.is_mounted:
            return
        if not result.success:
            self._set_source_status(f"error: {result.error}", "error")
            return
        added = 0
        for event in result.data or []:
            added += self.controller.on_event(event.name, event.payload)
        if added:
            self._table_dirty = True
        if not self.controller.settings.follow:
            self._stop_source_polling()
            self._set_source_status("loaded", "info")
        elif not self._paused:
            self._set_source_status(self._source_label(), "success")

    def _source_label(self) -> str:
        if self.source is None:
            return "none"
        if self._paused:
            return "paused"
        return "following" if self.controller.settings.follow else "reading"

    def _set_source_status(self, text: str, status: str) -> None:
        with suppress(NoMatches):
            kpi = self.query_one(f"#{KPI_FOLLOW_ID}", CustomKPI)
            kpi.set_value(text)
            kpi.set_status(status)

    # =========================================================================
    # RENDERING
    # =========================================================================

    def _table(self) -> CustomDataTable:
        return self.query_one(f"#{SPY_TABLE_ID}", CustomDataTable)

    def _on_state_change(self, session: SessionState) -> None:
        """Refresh the KPI bar and the inspector from the session."""
        if not self.is_mounted:
            return
        with suppress(NoMatches):
            self.query_one(f"#{KPI_RATE_ID}", CustomKPI).set_value(
                self._presenter.format_rate(session.messages_per_second)
            )
            self.query_one(f"#{KPI_BANDWIDTH_ID}", CustomKPI).set_value(
                self._presenter.format_bytes(session.bytes_per_second)
            )
            self.query_one(f"#{KPI_RETAINED_ID}", CustomKPI).set_value(
                self._presenter.format_retained(len(self.controller.buffer))
            )
            inspector = self.query_one(f"#{INSPECTOR_ID}", PayloadInspector)
            if self.controller.selected_row() is None:
                inspector.show_placeholder()
            else:
                inspector.show_payload(self.controller.selected_payload())

    def _refresh_table(self) -> None:
        """Rebuild the table from the visible rows when they changed."""
        if not self._table_dirty or not self.controller.is_mounted:
            return
        self._table_dirty = False
        try:
            table = self._table()
        except NoMatches:
            return
        table_rows = self._presenter.table_rows(self.controller.visible_rows())
        session = self.controller.session
        selected = session.selected_row_key if session is not None else None
        previous_cursor = table.cursor_row
        with self.prevent(DataTable.RowHighlighted):
            with table.batch_update():
                table.clear()
                table.add_rows(table_rows)
            # Keep the selected row under the cursor, else the nearest position
            position = self._presenter.position_of(selected)
            if position is None:
                position = previous_cursor
            if position is not None:
                table.cursor_row = position
                if table.sticky_bottom:
                    table.scroll_to_bottom()

    def _apply_column_widths(self, total_width: int) -> None:
        with suppress(NoMatches):
            table = self._table()
            widths = self._presenter.column_widths(total_width * 3 // 5)
            table.set_columns(
                [
                    (label, key, width)
                    for (key, label, _), width in zip(SPY_TABLE_COLUMNS, widths)
                ]
            )
            self._table_dirty = True
            self._refresh_table()

    # =========================================================================
    # EVENT HANDLERS
    # =========================================================================

    @on(DataTable.RowHighlighted)
    def _on_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        if not self.controller.is_mounted:
            return
        row_key = self._presenter.row_key_for(event.row_key.value)
        if row_key is None:
            return
        self.controller.highlight([row_key])

    @on(Input.Submitted, f"#{FILTER_INPUT_ID}")
    def _on_filter_submitted(self, event: Input.Submitted) -> None:
        parsed = self._presenter.parse_filters(event.value)
        if parsed.rejected:
            self.notify(
                f"Ignored: {' '.join(parsed.rejected)} (use column:value)",
                severity="warning",
            )
        self.controller.set_filters(parsed.filters)
        event.input.value = self._presenter.format_filters(parsed.filters)
        self._table_dirty = True
        self._refresh_table()
        self.action_focus_table()

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def action_clear_table(self) -> None:
        self.controller.clear()
        self._table_dirty = True
        self._refresh_table()
        self.notify("Cleared retained rows")

    def action_focus_filter(self) -> None:
        with suppress(NoMatches):
            self.query_one(f"#{FILTER_INPUT_ID}", Input).focus()

    def action_reset_filters(self) -> None:
        with suppress(NoMatches):
            self.query_one(f"#{FILTER_INPUT_ID}", Input).value = ""
        self.controller.set_filters([])
        self._table_dirty = True
        self._refresh_table()

    def action_toggle_follow(self) -> None:
        """Pause or resume reading from the event source."""
        self._paused = not self._paused
        self._set_source_status(self._source_label(), "warning" if self._paused else "success")
        if not self._paused:
            self._on_poll_timer_tick()

    def action_focus_table(self) -> None:
        with suppress(NoMatches):
            table = self._table()
            if table.data_table is not None:
                table.data_table.focus()
