"""Keyboard bindings module.

This module provides all keyboard bindings for the Bridge Spy TUI.
Bindings are organized into three categories:

- app: App-level bindings (APP_BINDINGS)
- screens: Screen-specific bindings (*_SCREEN_BINDINGS)
- tables: DataTable bindings (DATA_TABLE_BINDINGS)
"""

from bridgespy.keyboard.app import APP_BINDINGS
from bridgespy.keyboard.screens import SPY_SCREEN_BINDINGS
from bridgespy.keyboard.tables import DATA_TABLE_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "DATA_TABLE_BINDINGS",
    "SPY_SCREEN_BINDINGS",
]
