"""Display widgets for the TUI application."""

from bridgespy.widgets.display.custom_static import CustomStatic
from bridgespy.widgets.display.payload_inspector import PayloadInspector

__all__ = [
    "CustomStatic",
    "PayloadInspector",
]
