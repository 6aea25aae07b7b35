"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Window defaults
# ============================================================================

RETENTION_WINDOW_SECONDS_DEFAULT: Final = 300
SAMPLE_WINDOW_SECONDS_DEFAULT: Final = 5
SAMPLE_INTERVAL_SECONDS_DEFAULT: Final = 5.0

# ============================================================================
# Source defaults
# ============================================================================

SOURCE_POLL_INTERVAL_SECONDS_DEFAULT: Final = 0.25
FOLLOW_DEFAULT: Final = True
START_AT_END_DEFAULT: Final = False

# ============================================================================
# Filter defaults
# ============================================================================

FILTER_MODE_DEFAULT: Final = "first"

__all__ = [
    "FILTER_MODE_DEFAULT",
    "FOLLOW_DEFAULT",
    "RETENTION_WINDOW_SECONDS_DEFAULT",
    "SAMPLE_INTERVAL_SECONDS_DEFAULT",
    "SAMPLE_WINDOW_SECONDS_DEFAULT",
    "SOURCE_POLL_INTERVAL_SECONDS_DEFAULT",
    "START_AT_END_DEFAULT",
]
