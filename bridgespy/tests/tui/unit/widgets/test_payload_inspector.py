"""Unit tests for PayloadInspector widget."""

from __future__ import annotations

import pytest
from rich.panel import Panel
from textual.app import App, ComposeResult

from bridgespy.constants.values import PAYLOAD_PANEL_TITLE
from bridgespy.widgets import PayloadInspector


class InspectorApp(App[None]):
    def compose(self) -> ComposeResult:
        yield PayloadInspector(id="inspector")


@pytest.mark.unit
@pytest.mark.fast
class TestPayloadInspector:
    """Tests for the payload sidebar."""

    def test_starts_empty(self) -> None:
        """Test the initial placeholder state."""
        inspector = PayloadInspector()
        assert not inspector.has_payload
        assert inspector.payload is None
        assert inspector.has_class("empty")

    def test_render_payload_is_titled_panel(self) -> None:
        """Test that payloads render inside a titled panel."""
        panel = PayloadInspector.render_payload({"id": "1"})
        assert isinstance(panel, Panel)
        assert panel.title == PAYLOAD_PANEL_TITLE

    @pytest.mark.asyncio
    async def test_show_and_clear(self) -> None:
        """Test switching between a payload and the placeholder."""
        app = InspectorApp()
        async with app.run_test() as pilot:
            inspector = app.query_one("#inspector", PayloadInspector)
            payload = {"id": "1", "args": [1, 2]}
            inspector.show_payload(payload)
            await pilot.pause()
            assert inspector.payload is payload
            assert not inspector.has_class("empty")
            inspector.show_placeholder()
            await pilot.pause()
            assert not inspector.has_payload
            assert inspector.has_class("empty")
