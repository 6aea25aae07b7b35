"""CustomKPI widget for displaying live throughput figures.

Standard Reactive Pattern:
- Inherits from StatefulWidget
- Has is_loading, data, error reactives
- Implements watch_* methods

CSS Classes: widget-custom-kpi
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Static

from bridgespy.widgets._base import StatefulWidget

_PENDING_VALUE = "--"


class CustomKPI(StatefulWidget):
    """Inline title/value pair used in the spy screen's metrics bar.

    CSS Classes: widget-custom-kpi
    """

    DEFAULT_CSS = """
    CustomKPI {
        height: auto;
        width: auto;
        min-width: 14;
        padding: 0 1;
        layout: horizontal;
    }
    CustomKPI > .kpi-title {
        color: $text-muted;
        text-style: italic;
        width: auto;
        margin-right: 1;
    }
    CustomKPI > .kpi-value {
        text-style: bold;
        color: $text;
        width: auto;
    }
    CustomKPI.success > .kpi-value { color: $success; }
    CustomKPI.warning > .kpi-value { color: $warning; }
    CustomKPI.error > .kpi-value { color: $error; }
    CustomKPI.info > .kpi-value { color: $text; }
    """
    _default_classes = "widget-custom-kpi"

    value = reactive("", init=False)

    def __init__(
        self,
        title: str,
        value: str = "",
        status: str = "info",
        *,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        """Initialize the custom KPI widget.

        Args:
            title: The KPI title.
            value: The initial value to display.
            status: Status indicator (success, warning, error, info).
            id: Optional widget ID.
            classes: Optional CSS classes.
        """
        super().__init__(id=id, classes=classes)
        self._title = title
        self._value = value
        self._status = status
        self._value_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Static(self._title, classes="kpi-title")
        yield Static(self._value, classes="kpi-value")

    def on_mount(self) -> None:
        """Apply initial status class and cache the value widget."""
        if self._status:
            self.add_css_class(self._status)
        try:
            self._value_widget = self.query_one(".kpi-value", Static)
        except NoMatches:
            self._value_widget = None

    def on_unmount(self) -> None:
        self._value_widget = None

    def _render_value(self, text: str) -> None:
        if self._value_widget is not None:
            self._value_widget.update(text)

    def watch_is_loading(self, loading: bool) -> None:
        """Show a pending marker until the first value arrives."""
        self._render_value(_PENDING_VALUE if loading else self._value)

    def watch_error(self, error: str | None) -> None:
        if error:
            self.set_status("error")
            self._render_value(error)

    def watch_value(self, value: str) -> None:
        self._render_value(value)

    def set_value(self, value: str) -> None:
        """Set the KPI value and leave the loading state.

        Args:
            value: The new value to display.
        """
        self._value = value
        self.is_loading = False
        self.error = None
        self.value = value

    def set_status(self, status: str) -> None:
        """Set the KPI status (success, warning, error, info)."""
        if self._status == status:
            return
        if self._status:
            self.remove_css_class(self._status)
        self._status = status
        self.add_css_class(status)

    @property
    def title(self) -> str:
        return self._title

    @property
    def status(self) -> str:
        return self._status

    @property
    def current_value(self) -> str:
        return self._value
