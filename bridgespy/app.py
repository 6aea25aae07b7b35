"""Main application class for Bridge Spy TUI."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from bridgespy.constants import APP_TITLE
from bridgespy.constants.enums import FilterMode
from bridgespy.controllers.base.base_controller import BaseEventSource
from bridgespy.controllers.sources import JsonlEventSource, SimulatedEventSource
from bridgespy.controllers.spy import SpyController
from bridgespy.keyboard.app import APP_BINDINGS
from bridgespy.models.state.app_settings import AppSettings
from bridgespy.models.state.config_manager import ConfigLoadError, ConfigManager
from bridgespy.screens import SpyScreen

logger = logging.getLogger(__name__)


class BridgeSpyApp(App[None]):
    """Main TUI application for Bridge Spy."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings

    def __init__(
        self,
        source_path: Path | None = None,
        demo: bool = False,
        follow: bool | None = None,
        start_at_end: bool | None = None,
        filter_mode: FilterMode | str | None = None,
        *args,
        settings: AppSettings | None = None,
        source: BaseEventSource | None = None,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.source_path = source_path
        self.demo = demo
        self.follow = follow
        self.start_at_end = start_at_end
        self.filter_mode = filter_mode

        self._load_settings(settings)
        self.controller = SpyController(self.settings)
        self.source = source if source is not None else self._build_source()

    def _load_settings(self, settings: AppSettings | None) -> None:
        """Load settings from disk (or take the given ones) and apply CLI overrides."""
        if settings is None:
            try:
                settings = ConfigManager.load()
            except ConfigLoadError as exc:
                logger.warning("Using default settings: %s", exc)
                settings = AppSettings()

        overrides: dict[str, object] = {}
        if self.source_path is not None:
            overrides["source_path"] = str(Path(self.source_path).expanduser())
        if self.follow is not None:
            overrides["follow"] = self.follow
        if self.start_at_end is not None:
            overrides["start_at_end"] = self.start_at_end
        if self.filter_mode is not None:
            overrides["filter_mode"] = FilterMode(str(self.filter_mode).lower())
        self.settings = settings.model_copy(update=overrides) if overrides else settings

    def _build_source(self) -> BaseEventSource | None:
        if self.demo:
            return SimulatedEventSource()
        if self.settings.source_path:
            return JsonlEventSource(
                self.settings.source_path,
                start_at_end=self.settings.start_at_end,
            )
        logger.info("No event source configured")
        return None

    def on_mount(self) -> None:
        self.push_screen(SpyScreen(self.controller, self.source))
