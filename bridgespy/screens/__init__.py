"""Screens for the Bridge Spy TUI application."""

from bridgespy.screens.base_screen import BaseScreen
from bridgespy.screens.spy import SpyScreen

__all__ = [
    "BaseScreen",
    "SpyScreen",
]
