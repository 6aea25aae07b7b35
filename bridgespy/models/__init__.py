"""Data models for Bridge Spy."""

from bridgespy.models.core import (
    COLUMN_KEYS,
    ColumnCell,
    EventArgs,
    Filter,
    RawEvent,
    ViewRow,
)
from bridgespy.models.state import (
    AppSettings,
    PersistedState,
    SessionState,
)

__all__ = [
    "COLUMN_KEYS",
    "AppSettings",
    "ColumnCell",
    "EventArgs",
    "Filter",
    "PersistedState",
    "RawEvent",
    "SessionState",
    "ViewRow",
]
