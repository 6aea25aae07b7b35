"""Spy screen package."""

from bridgespy.screens.spy.presenter import ParsedFilters, SpyPresenter
from bridgespy.screens.spy.spy_screen import SpyScreen

__all__ = [
    "ParsedFilters",
    "SpyPresenter",
    "SpyScreen",
]
