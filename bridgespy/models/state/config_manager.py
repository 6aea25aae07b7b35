"""Settings persistence in a YAML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from bridgespy.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "BRIDGESPY_CONFIG"


class ConfigManager:
    """Loads and saves :class:`AppSettings` as YAML.

    The file lives at ``~/.config/bridgespy/settings.yaml`` unless the
    ``BRIDGESPY_CONFIG`` environment variable points elsewhere.
    """

    DEFAULT_PATH = Path("~/.config/bridgespy/settings.yaml")

    @classmethod
    def config_path(cls) -> Path:
        override = os.environ.get(CONFIG_ENV_VAR, "").strip()
        return Path(override or cls.DEFAULT_PATH).expanduser()

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings, returning defaults when no file exists.

        Raises:
            ConfigLoadError: The file exists but is unreadable or invalid.
        """
        config_path = path or cls.config_path()
        if not config_path.exists():
            logger.debug("No settings file at %s, using defaults", config_path)
            return AppSettings()

        try:
            with config_path.open(encoding="utf-8") as handle:
                raw = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read {config_path}: {exc}") from exc

        if not isinstance(raw, dict):
            raise ConfigLoadError(f"{config_path} must contain a mapping")

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {config_path}: {exc}") from exc

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings to disk and return the path written.

        Raises:
            ConfigSaveError: The file could not be written.
        """
        config_path = path or cls.config_path()
        payload = settings.model_dump(mode="json")
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with config_path.open("w", encoding="utf-8") as handle:
                yaml.safe_dump(payload, handle, sort_keys=True)
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write {config_path}: {exc}") from exc
        logger.info("Saved settings to %s", config_path)
        return config_path


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
