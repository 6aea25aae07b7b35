"""Unit tests for the retention buffer and the persisted state reducer.

Marked with:
- @pytest.mark.unit
- @pytest.mark.fast
"""

from __future__ import annotations

import logging

import pytest

from bridgespy.controllers.retention import (
    RETENTION_WINDOW_MS,
    RetentionBuffer,
    persisted_state_reducer,
    prune_expired,
)
from bridgespy.controllers.rows import to_view_rows
from bridgespy.models.state.persisted_state import PersistedState

NOW = 1_700_000_000_000


class FakeClock:
    """Settable epoch-millisecond clock."""

    def __init__(self, now: int = NOW) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int) -> None:
        self.now += millis


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def buffer(clock: FakeClock) -> RetentionBuffer:
    return RetentionBuffer(RETENTION_WINDOW_MS, clock=clock)


def event(event_id: str, time_ms: int, module: str = "UIManager") -> dict:
    return {"id": event_id, "time": time_ms, "type": "JS->N", "module": module}


@pytest.mark.unit
@pytest.mark.fast
class TestRetentionBufferAppend:
    """Tests for RetentionBuffer.append and eviction."""

    def test_default_window_is_five_minutes(self) -> None:
        """Test the default retention window."""
        assert RETENTION_WINDOW_MS == 300_000

    def test_append_single_event(self, buffer: RetentionBuffer) -> None:
        """Test that one event adds one row."""
        added = buffer.append(event("1", NOW))
        assert len(added) == 1
        assert len(buffer) == 1

    def test_append_batch_keeps_order(self, buffer: RetentionBuffer) -> None:
        """Test that batches append after existing rows in batch order."""
        buffer.append(event("1", NOW))
        buffer.append([event("2", NOW), event("3", NOW)])
        assert [row.key for row in buffer.rows] == ["1", "2", "3"]

    def test_old_rows_evicted_on_append(self, buffer: RetentionBuffer) -> None:
        """Test that rows older than the window are dropped when appending."""
        buffer.append(
            [
                event("stale", NOW - 400_000),
                event("fresh", NOW - 1_000),
            ]
        )
        assert [row.key for row in buffer.rows] == ["fresh"]

    def test_window_boundary_is_exclusive(self, buffer: RetentionBuffer) -> None:
        """Test that a row exactly one window old is evicted."""
        buffer.append([event("edge", NOW - 300_000), event("inside", NOW - 299_999)])
        assert [row.key for row in buffer.rows] == ["inside"]

    def test_no_eviction_without_append(
        self, buffer: RetentionBuffer, clock: FakeClock
    ) -> None:
        """Test that stale rows stay until the next append."""
        buffer.append(event("1", NOW))
        clock.advance(600_000)
        assert len(buffer) == 1
        buffer.append(event("2", clock.now))
        assert [row.key for row in buffer.rows] == ["2"]

    def test_all_old_log_is_evicted(self, buffer: RetentionBuffer) -> None:
        """Test that a replayed old log never survives ingestion."""
        buffer.append([event(str(i), NOW - 3_600_000 + i) for i in range(10)])
        assert len(buffer) == 0

    def test_eviction_logged(
        self,
        buffer: RetentionBuffer,
        clock: FakeClock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test that evictions are logged at debug level."""
        buffer.append(event("old", NOW))
        clock.advance(400_000)
        with caplog.at_level(logging.DEBUG, logger="bridgespy.controllers.retention.buffer"):
            buffer.append(event("new", clock.now))
        assert "Evicted 1 rows" in caplog.text

    def test_none_payload_adds_nothing(self, buffer: RetentionBuffer) -> None:
        """Test that a null payload is an empty batch."""
        assert buffer.append(None) == []
        assert len(buffer) == 0

    def test_apply_matches_reducer(self, buffer: RetentionBuffer) -> None:
        """Test that ingestion produces exactly the reducer's state."""
        buffer.append(event("1", NOW - 200_000))
        previous = buffer.snapshot()
        payload = [event("2", NOW), event("3", NOW)]
        added = buffer.apply("newRow", payload)
        expected = persisted_state_reducer(previous, "newRow", payload, now_ms=NOW)
        assert [row.key for row in buffer.rows] == [row.key for row in expected.rows]
        assert [row.key for row in buffer.rows] == ["1", "2", "3"]
        assert [row.key for row in added] == ["2", "3"]

    def test_apply_unknown_event_keeps_state(self, buffer: RetentionBuffer) -> None:
        """Test that other host events leave the state object in place."""
        buffer.append(event("1", NOW))
        previous = buffer.snapshot()
        assert buffer.apply("reload", [event("2", NOW)]) == []
        assert buffer.snapshot() is previous


@pytest.mark.unit
@pytest.mark.fast
class TestRetentionBufferAccess:
    """Tests for lookups, snapshots and trailing windows."""

    def test_find_returns_first_duplicate(self, buffer: RetentionBuffer) -> None:
        """Test that duplicate keys resolve to the earliest row."""
        buffer.append([event("1", NOW, "First"), event("1", NOW, "Second")])
        found = buffer.find("1")
        assert found is not None
        assert found.cell("module").value == "First"

    def test_find_missing(self, buffer: RetentionBuffer) -> None:
        """Test that an unknown key is not found."""
        assert buffer.find("nope") is None

    def test_recent_boundary_is_inclusive(self, buffer: RetentionBuffer) -> None:
        """Test that recent() keeps rows exactly window_ms old."""
        buffer.append(
            [
                event("a", NOW - 5_001),
                event("b", NOW - 5_000),
                event("c", NOW),
            ]
        )
        assert [row.key for row in buffer.recent(5_000)] == ["b", "c"]

    def test_recent_with_explicit_now(self, buffer: RetentionBuffer) -> None:
        """Test that recent() accepts an explicit reference time."""
        buffer.append(event("a", NOW))
        assert buffer.recent(1_000, now=NOW + 2_000) == []

    def test_clear(self, buffer: RetentionBuffer) -> None:
        """Test that clear drops every row."""
        buffer.append([event("1", NOW), event("2", NOW)])
        buffer.clear()
        assert len(buffer) == 0
        assert buffer.rows == ()

    def test_snapshot_and_restore(self, buffer: RetentionBuffer, clock: FakeClock) -> None:
        """Test that a snapshot restores verbatim into another buffer."""
        buffer.append(event("1", NOW))
        snapshot = buffer.snapshot()
        other = RetentionBuffer(clock=clock)
        other.restore(snapshot)
        assert other.rows == buffer.rows


@pytest.mark.unit
@pytest.mark.fast
class TestPersistedStateReducer:
    """Tests for the pure reducer."""

    def test_new_row_appends(self) -> None:
        """Test that newRow events append rows."""
        state = persisted_state_reducer(
            PersistedState(), "newRow", event("1", NOW), now_ms=NOW
        )
        assert len(state) == 1

    def test_unknown_event_returns_same_state(self) -> None:
        """Test that other event names leave the state object untouched."""
        state = PersistedState(rows=tuple(to_view_rows(event("1", NOW))))
        result = persisted_state_reducer(state, "somethingElse", event("2", NOW), now_ms=NOW)
        assert result is state

    def test_reducer_does_not_mutate_input(self) -> None:
        """Test that the previous state is left as it was."""
        state = PersistedState()
        persisted_state_reducer(state, "newRow", event("1", NOW), now_ms=NOW)
        assert len(state) == 0

    def test_reducer_evicts(self) -> None:
        """Test that existing rows outside the window are pruned."""
        state = PersistedState(rows=tuple(to_view_rows(event("old", NOW - 301_000))))
        result = persisted_state_reducer(state, "newRow", event("new", NOW), now_ms=NOW)
        assert [row.key for row in result.rows] == ["new"]

    def test_prune_expired_keeps_order(self) -> None:
        """Test that pruning preserves insertion order."""
        rows = to_view_rows([event("b", NOW - 10), event("a", NOW - 20)])
        assert [row.key for row in prune_expired(rows, now_ms=NOW)] == ["b", "a"]
