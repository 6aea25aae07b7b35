"""Retention buffer and its reducer."""

from bridgespy.controllers.retention.buffer import RetentionBuffer
from bridgespy.controllers.retention.reducer import (
    RETENTION_WINDOW_MS,
    append_rows,
    persisted_state_reducer,
    prune_expired,
)

__all__ = [
    "RETENTION_WINDOW_MS",
    "RetentionBuffer",
    "append_rows",
    "persisted_state_reducer",
    "prune_expired",
]
