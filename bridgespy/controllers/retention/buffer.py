"""Time-bounded, append-only log of view rows."""

from __future__ import annotations

import logging
import threading
from typing import Any

from bridgespy.constants.values import NEW_ROW_EVENT
from bridgespy.controllers.retention.reducer import (
    RETENTION_WINDOW_MS,
    persisted_state_reducer,
)
from bridgespy.models.core.view_row import ViewRow
from bridgespy.models.state.persisted_state import PersistedState
from bridgespy.utils.clock import Clock, now_ms

logger = logging.getLogger(__name__)


class RetentionBuffer:
    """Append-only row log bounded by a trailing time window.

    Eviction runs once per ingested event against the clock at that moment;
    there is no background timer, so stale rows stay resident until the
    next append. Count is unbounded.

    The state is replaced, never mutated in place, and every access goes
    through a re-entrant lock so a source thread appending and the sampler
    reading never observe a half-built sequence.
    """

    def __init__(
        self,
        retention_window_ms: int = RETENTION_WINDOW_MS,
        *,
        clock: Clock | None = None,
        state: PersistedState | None = None,
    ) -> None:
        self._window_ms = retention_window_ms
        self._clock = clock or now_ms
        self._state = state or PersistedState()
        self._lock = threading.RLock()

    @property
    def retention_window_ms(self) -> int:
        return self._window_ms

    @property
    def rows(self) -> tuple[ViewRow, ...]:
        """Retained rows in insertion order."""
        with self._lock:
            return self._state.rows

    def __len__(self) -> int:
        with self._lock:
            return len(self._state.rows)

    def apply(self, event_name: str, payload: Any) -> list[ViewRow]:
        """Run one host event through :func:`persisted_state_reducer`.

        The reducer's result replaces the state; eviction is measured
        against the clock at this call. Other event names leave the state
        object as it was.

        Returns:
            The rows this event added that survived eviction, in batch order.
        """
        with self._lock:
            previous = self._state
            self._state = persisted_state_reducer(
                previous,
                event_name,
                payload,
                now_ms=self._clock(),
                window_ms=self._window_ms,
            )
            current = self._state
        if current is previous:
            return []
        kept = {id(row) for row in previous.rows}
        added = [row for row in current.rows if id(row) not in kept]
        evicted = len(previous.rows) - (len(current.rows) - len(added))
        if evicted:
            logger.debug("Evicted %d rows older than %d ms", evicted, self._window_ms)
        return added

    def append(self, event_or_batch: Any) -> list[ViewRow]:
        """Append a raw event or batch as a ``newRow`` host event."""
        return self.apply(NEW_ROW_EVENT, event_or_batch)

    def clear(self) -> None:
        """Drop every retained row."""
        with self._lock:
            self._state = PersistedState()

    def snapshot(self) -> PersistedState:
        """Return the current state for the host persistence store."""
        with self._lock:
            return self._state

    def restore(self, snapshot: PersistedState) -> None:
        """Replace the current state with a snapshot, verbatim."""
        with self._lock:
            self._state = snapshot

    def find(self, key: str) -> ViewRow | None:
        """Return the first retained row with ``key``, or None."""
        with self._lock:
            rows = self._state.rows
        return next((row for row in rows if row.key == key), None)

    def recent(self, window_ms: int, *, now: int | None = None) -> list[ViewRow]:
        """Return rows with ``now - timestamp <= window_ms``, in insertion order."""
        current = self._clock() if now is None else now
        with self._lock:
            rows = self._state.rows
        return [row for row in rows if current - row.timestamp <= window_ms]
