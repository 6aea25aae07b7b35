"""Base screen class for Bridge Spy TUI.

Subclasses provide ``screen_title`` and ``load_data``; the base class sets
the window title on mount, schedules ``load_data`` and cancels running
workers when the screen goes away.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from contextlib import suppress
from typing import TYPE_CHECKING, cast

from textual.screen import Screen

from bridgespy.constants.values import APP_TITLE

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from bridgespy.app import BridgeSpyApp


class BaseScreen(Screen):
    """Abstract base class for TUI screens with common patterns.

    Example:
        class MyScreen(BaseScreen):
            @property
            def screen_title(self) -> str:
                return "My Screen Title"

            async def load_data(self) -> None:
                ...
    """

    @property
    def screen_title(self) -> str:
        """Title displayed in the application window."""
        return APP_TITLE

    @property
    def app(self) -> BridgeSpyApp:
        """Get the application instance."""
        return cast("BridgeSpyApp", super().app)

    def set_title(self, title: str) -> None:
        """Set the application window title."""
        self.app.title = title if title == APP_TITLE else f"{APP_TITLE} - {title}"

    def on_mount(self) -> None:
        """Set the window title and schedule data loading."""
        self.set_title(self.screen_title)
        self.call_later(self.load_data)

    def on_unmount(self) -> None:
        """Cancel any running workers when the screen is unmounted."""
        with suppress(Exception):
            self.workers.cancel_all()

    @abstractmethod
    async def load_data(self) -> None:
        """Load data for the screen once it is mounted."""
        ...
