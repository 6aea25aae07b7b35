"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Filter Enums
# =============================================================================


class FilterMode(Enum):
    """How a set of active column filters is combined.

    FIRST evaluates only the first filter of the set, which is how the
    table filter has always behaved. ALL and ANY are the conjunction and
    disjunction over every filter.
    """

    FIRST = "first"
    ALL = "all"
    ANY = "any"


# =============================================================================
# Lifecycle Enums
# =============================================================================


class PluginState(Enum):
    """Lifecycle states of the spy controller."""

    IDLE = "idle"
    MOUNTED = "mounted"
    UNMOUNTED = "unmounted"


# =============================================================================
# Event Direction Enums
# =============================================================================


class Direction(Enum):
    """Bridge call directions as reported in the ``type`` field."""

    NATIVE_TO_JS = "N->JS"
    JS_TO_NATIVE = "JS->N"


__all__ = [
    "Direction",
    "FilterMode",
    "PluginState",
]
