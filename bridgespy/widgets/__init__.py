"""Widgets for the Bridge Spy TUI application.

- data: CustomKPI, CustomDataTable
- display: CustomStatic, PayloadInspector
"""

from bridgespy.widgets._base import BaseWidget, StatefulWidget
from bridgespy.widgets.data import CustomDataTable, CustomKPI
from bridgespy.widgets.display import CustomStatic, PayloadInspector

__all__ = [
    "BaseWidget",
    "CustomDataTable",
    "CustomKPI",
    "CustomStatic",
    "PayloadInspector",
    "StatefulWidget",
]
