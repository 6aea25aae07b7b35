"""Constants module for Bridge Spy.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in bridgespy.keyboard module.
"""

from bridgespy.constants.defaults import (
    FILTER_MODE_DEFAULT,
    RETENTION_WINDOW_SECONDS_DEFAULT,
    SAMPLE_INTERVAL_SECONDS_DEFAULT,
    SAMPLE_WINDOW_SECONDS_DEFAULT,
    SOURCE_POLL_INTERVAL_SECONDS_DEFAULT,
)
from bridgespy.constants.enums import (
    Direction,
    FilterMode,
    PluginState,
)
from bridgespy.constants.limits import (
    MAX_ROWS_DISPLAY,
)
from bridgespy.constants.values import (
    APP_TITLE,
    APP_VERSION,
    NEW_ROW_EVENT,
    NO_SELECTION_PLACEHOLDER,
    UNSERIALIZABLE_ARGS,
)

__all__ = [
    # Application
    "APP_TITLE",
    "APP_VERSION",
    # Defaults
    "FILTER_MODE_DEFAULT",
    # Limits
    "MAX_ROWS_DISPLAY",
    # Ingestion
    "NEW_ROW_EVENT",
    "NO_SELECTION_PLACEHOLDER",
    "RETENTION_WINDOW_SECONDS_DEFAULT",
    "SAMPLE_INTERVAL_SECONDS_DEFAULT",
    "SAMPLE_WINDOW_SECONDS_DEFAULT",
    "SOURCE_POLL_INTERVAL_SECONDS_DEFAULT",
    "UNSERIALIZABLE_ARGS",
    # Enums
    "Direction",
    "FilterMode",
    "PluginState",
]
