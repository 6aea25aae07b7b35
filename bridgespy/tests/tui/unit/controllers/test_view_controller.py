"""Unit tests for the selection/view controller.

Marked with:
- @pytest.mark.unit
- @pytest.mark.fast
"""

from __future__ import annotations

import pytest

from bridgespy.controllers.metrics import RateSampler
from bridgespy.controllers.retention import RetentionBuffer
from bridgespy.controllers.view import ViewController
from bridgespy.models.core.filter import Filter
from bridgespy.models.state.session_state import SessionState

NOW = 1_700_000_000_000


@pytest.fixture
def buffer() -> RetentionBuffer:
    buffer = RetentionBuffer(clock=lambda: NOW)
    buffer.append(
        [
            {"id": "1", "time": NOW, "module": "UIManager", "args": [1]},
            {"id": "2", "time": NOW, "module": "Timing", "args": [2]},
            {"id": "3", "time": NOW, "module": "UIManager", "args": [3]},
        ]
    )
    return buffer


@pytest.fixture
def session() -> SessionState:
    return SessionState()


@pytest.fixture
def sampler(buffer: RetentionBuffer) -> RateSampler:
    return RateSampler(buffer, clock=lambda: NOW)


@pytest.fixture
def view(buffer: RetentionBuffer, session: SessionState, sampler: RateSampler) -> ViewController:
    return ViewController(buffer, session, sampler)


@pytest.mark.unit
@pytest.mark.fast
class TestSelection:
    """Tests for highlight handling and payload lookup."""

    def test_no_selection_initially(self, view: ViewController) -> None:
        """Test that nothing is selected before any highlight."""
        assert view.selected_row() is None
        assert view.lookup() is None

    def test_highlight_selects_first_key(self, view: ViewController, session: SessionState) -> None:
        """Test that only the first highlighted key is used."""
        view.on_highlight(["2", "3"])
        assert session.selected_row_key == "2"

    def test_empty_highlight_keeps_selection(
        self, view: ViewController, session: SessionState
    ) -> None:
        """Test that an empty highlight leaves the selection as it was."""
        view.on_highlight(["1"])
        view.on_highlight([])
        assert session.selected_row_key == "1"

    def test_lookup_returns_original_payload(
        self, view: ViewController, buffer: RetentionBuffer
    ) -> None:
        """Test that the inspector gets the raw event, not the row."""
        view.on_highlight(["3"])
        assert view.lookup() is buffer.rows[2].payload
        assert view.lookup()["args"] == [3]

    def test_lookup_of_evicted_row(self, view: ViewController, buffer: RetentionBuffer) -> None:
        """Test that a selection no longer in the buffer resolves to nothing."""
        view.on_highlight(["1"])
        buffer.clear()
        assert view.lookup() is None

    def test_non_string_keys_are_stringified(
        self, view: ViewController, session: SessionState
    ) -> None:
        """Test that numeric keys from the table resolve like string ids."""
        view.on_highlight([2])
        assert session.selected_row_key == "2"
        assert view.lookup()["module"] == "Timing"


@pytest.mark.unit
@pytest.mark.fast
class TestFiltersAndClear:
    """Tests for filter changes, visible rows and clearing."""

    def test_visible_rows_unfiltered(self, view: ViewController) -> None:
        """Test that every row is visible without filters."""
        assert [row.key for row in view.visible_rows()] == ["1", "2", "3"]

    def test_filter_change_limits_visible_rows(self, view: ViewController) -> None:
        """Test that filters narrow the visible rows."""
        view.on_filter_change([Filter("module", "UIManager")])
        assert [row.key for row in view.visible_rows()] == ["1", "3"]

    def test_filter_change_resets_metrics(
        self, view: ViewController, session: SessionState, sampler: RateSampler
    ) -> None:
        """Test that metrics read zero right after a filter change."""
        session.messages_per_second = 9
        session.bytes_per_second = 120.0
        view.on_filter_change([Filter("module", "Timing")])
        assert session.messages_per_second == 0
        assert session.bytes_per_second == 0
        assert sampler.filters == (Filter("module", "Timing"),)

    def test_clear_drops_rows_and_selection(
        self, view: ViewController, session: SessionState, buffer: RetentionBuffer
    ) -> None:
        """Test that clear empties the buffer and the selection."""
        view.on_highlight(["1"])
        view.on_clear()
        assert len(buffer) == 0
        assert session.selected_row_key is None
        assert view.lookup() is None
