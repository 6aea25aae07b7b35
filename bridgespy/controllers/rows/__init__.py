"""Row model for Bridge Spy."""

from bridgespy.controllers.rows.row_builder import (
    build_view_row,
    format_event_time,
    to_view_rows,
)

__all__ = [
    "build_view_row",
    "format_event_time",
    "to_view_rows",
]
