"""KPI widgets for the TUI application."""

from bridgespy.widgets.data.kpi.custom_kpi import CustomKPI

__all__ = ["CustomKPI"]
