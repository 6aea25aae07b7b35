"""Unit tests for CustomKPI widget.

Marked with:
- @pytest.mark.unit
- @pytest.mark.fast
"""

from __future__ import annotations

import pytest
from textual.app import App, ComposeResult
from textual.widgets import Static

from bridgespy.widgets import CustomKPI, StatefulWidget


class KPIApp(App[None]):
    def compose(self) -> ComposeResult:
        yield CustomKPI("Rate", "0 msg/s", id="kpi")


@pytest.mark.unit
@pytest.mark.fast
class TestCustomKPIInit:
    """Tests for construction without an event loop."""

    def test_is_stateful_widget(self) -> None:
        """Test the widget base class."""
        assert isinstance(CustomKPI("Rate"), StatefulWidget)

    def test_default_css_class(self) -> None:
        """Test that the standard CSS class is applied."""
        assert CustomKPI("Rate").has_css_class("widget-custom-kpi")

    def test_title_and_value(self) -> None:
        """Test the stored title and initial value."""
        kpi = CustomKPI("Bandwidth", "0 B/s")
        assert kpi.title == "Bandwidth"
        assert kpi.current_value == "0 B/s"
        assert kpi.status == "info"

    def test_set_status(self) -> None:
        """Test that status changes swap the CSS class."""
        kpi = CustomKPI("Rate")
        kpi.add_css_class("info")
        kpi.set_status("warning")
        assert kpi.has_css_class("warning")
        assert not kpi.has_css_class("info")


@pytest.mark.unit
class TestCustomKPIRuntime:
    """Tests for the mounted widget."""

    @pytest.mark.asyncio
    async def test_set_value_updates_display(self) -> None:
        """Test that set_value renders the new value."""
        app = KPIApp()
        async with app.run_test() as pilot:
            kpi = app.query_one("#kpi", CustomKPI)
            kpi.set_value("7 msg/s")
            await pilot.pause()
            assert kpi.current_value == "7 msg/s"
            assert kpi.value == "7 msg/s"
            assert kpi.query_one(".kpi-value", Static) is not None

    @pytest.mark.asyncio
    async def test_error_sets_status(self) -> None:
        """Test that an error switches to the error status."""
        app = KPIApp()
        async with app.run_test() as pilot:
            kpi = app.query_one("#kpi", CustomKPI)
            kpi.error = "source lost"
            await pilot.pause()
            assert kpi.status == "error"
            assert kpi.has_css_class("error")
