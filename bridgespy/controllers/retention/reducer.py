"""Pure reducer combining host events with the persisted row state."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from bridgespy.constants.defaults import RETENTION_WINDOW_SECONDS_DEFAULT
from bridgespy.constants.values import NEW_ROW_EVENT
from bridgespy.controllers.rows.row_builder import to_view_rows
from bridgespy.models.core.view_row import ViewRow
from bridgespy.models.state.persisted_state import PersistedState

logger = logging.getLogger(__name__)

RETENTION_WINDOW_MS = RETENTION_WINDOW_SECONDS_DEFAULT * 1000


def prune_expired(
    rows: Iterable[ViewRow], *, now_ms: int, window_ms: int = RETENTION_WINDOW_MS
) -> tuple[ViewRow, ...]:
    """Keep rows younger than ``window_ms`` relative to ``now_ms``, in order."""
    return tuple(row for row in rows if now_ms - row.timestamp < window_ms)


def append_rows(
    state: PersistedState,
    new_rows: Iterable[ViewRow],
    *,
    now_ms: int,
    window_ms: int = RETENTION_WINDOW_MS,
) -> PersistedState:
    """Append rows after the existing ones, then evict everything out of the window."""
    combined = (*state.rows, *new_rows)
    return PersistedState(rows=prune_expired(combined, now_ms=now_ms, window_ms=window_ms))


def persisted_state_reducer(
    state: PersistedState,
    event_name: str,
    payload: Any,
    *,
    now_ms: int,
    window_ms: int = RETENTION_WINDOW_MS,
) -> PersistedState:
    """Return the state after ``event_name`` with ``payload``.

    Only ``newRow`` changes anything; every other event name returns the
    state object unchanged.
    """
    if event_name != NEW_ROW_EVENT:
        logger.debug("Ignoring host event %r", event_name)
        return state
    return append_rows(state, to_view_rows(payload), now_ms=now_ms, window_ms=window_ms)
