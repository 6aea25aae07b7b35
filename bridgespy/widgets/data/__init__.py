"""Data display widgets for the TUI application."""

from bridgespy.widgets.data.kpi import CustomKPI
from bridgespy.widgets.data.tables import CustomDataTable

__all__ = [
    "CustomDataTable",
    "CustomKPI",
]
