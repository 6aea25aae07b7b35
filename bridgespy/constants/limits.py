"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Display limits
# ============================================================================

MAX_ROWS_DISPLAY: Final = 1000

# ============================================================================
# Validation limits
# ============================================================================

RETENTION_WINDOW_SECONDS_MIN: Final = 10
RETENTION_WINDOW_SECONDS_MAX: Final = 3600
SAMPLE_WINDOW_SECONDS_MIN: Final = 1
SAMPLE_INTERVAL_SECONDS_MIN: Final = 0.5
SOURCE_POLL_INTERVAL_SECONDS_MIN: Final = 0.05

__all__ = [
    "MAX_ROWS_DISPLAY",
    "RETENTION_WINDOW_SECONDS_MAX",
    "RETENTION_WINDOW_SECONDS_MIN",
    "SAMPLE_INTERVAL_SECONDS_MIN",
    "SAMPLE_WINDOW_SECONDS_MIN",
    "SOURCE_POLL_INTERVAL_SECONDS_MIN",
]
