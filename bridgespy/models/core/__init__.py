"""Core domain models: raw events, view rows and filters."""

from bridgespy.models.core.filter import Filter
from bridgespy.models.core.raw_event import EventArgs, RawEvent
from bridgespy.models.core.view_row import (
    COLUMN_KEYS,
    FILTERABLE_COLUMNS,
    ColumnCell,
    ViewRow,
)

__all__ = [
    "COLUMN_KEYS",
    "FILTERABLE_COLUMNS",
    "ColumnCell",
    "EventArgs",
    "Filter",
    "RawEvent",
    "ViewRow",
]
