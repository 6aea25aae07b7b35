"""Spy screen configuration - column definitions, widget IDs and refresh timing."""

from __future__ import annotations

from typing import Final

# =============================================================================
# Table columns: (key, label, width share in percent; None takes the rest)
# =============================================================================

SPY_TABLE_COLUMNS: Final[tuple[tuple[str, str, int | None], ...]] = (
    ("index", "Id", 5),
    ("time", "Timestamp", 10),
    ("type", "Direction", 5),
    ("module", "Module", 10),
    ("method", "Method", 10),
    ("args", "Data", None),
)

# Filter input accepts either the column key or its label.
COLUMN_ALIASES: Final[dict[str, str]] = {
    label.lower(): key for key, label, _ in SPY_TABLE_COLUMNS
}

MIN_COLUMN_WIDTH: Final = 4
MIN_DATA_COLUMN_WIDTH: Final = 16
CELL_PADDING: Final = 2

# =============================================================================
# Widget IDs
# =============================================================================

SPY_TABLE_ID: Final = "spy-table"
FILTER_INPUT_ID: Final = "filter-input"
INSPECTOR_ID: Final = "payload-inspector"
KPI_RATE_ID: Final = "kpi-rate"
KPI_BANDWIDTH_ID: Final = "kpi-bandwidth"
KPI_RETAINED_ID: Final = "kpi-retained"
KPI_FOLLOW_ID: Final = "kpi-follow"

FILTER_PLACEHOLDER: Final = "Filter: module:UIManager direction=JS->N (Enter to apply)"

# =============================================================================
# Timing
# =============================================================================

# Table rebuilds are coalesced onto this interval while events stream in.
TABLE_REFRESH_INTERVAL_SECONDS: Final = 0.5

# 1000-based units for the bandwidth KPI.
BYTE_UNITS: Final = ("B", "KB", "MB", "GB")
