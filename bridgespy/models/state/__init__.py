"""State models: settings, persisted rows and session state."""

from bridgespy.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from bridgespy.models.state.config_manager import ConfigManager
from bridgespy.models.state.persisted_state import PersistedState
from bridgespy.models.state.session_state import SessionState

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "PersistedState",
    "SessionState",
]
