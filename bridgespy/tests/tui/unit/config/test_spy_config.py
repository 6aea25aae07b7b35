"""Unit tests for spy screen configuration constants."""

from __future__ import annotations

import pytest

from bridgespy.models.core.view_row import COLUMN_KEYS
from bridgespy.screens.spy.config import (
    COLUMN_ALIASES,
    SPY_TABLE_COLUMNS,
    TABLE_REFRESH_INTERVAL_SECONDS,
)


@pytest.mark.unit
@pytest.mark.fast
class TestSpyScreenConfig:
    """Tests for the spy table column definitions."""

    def test_columns_match_row_model(self) -> None:
        """Test that table columns follow the row model's column order."""
        assert tuple(key for key, _, _ in SPY_TABLE_COLUMNS) == COLUMN_KEYS

    def test_labels(self) -> None:
        """Test the column header labels."""
        assert [label for _, label, _ in SPY_TABLE_COLUMNS] == [
            "Id",
            "Timestamp",
            "Direction",
            "Module",
            "Method",
            "Data",
        ]

    def test_only_data_column_is_flexible(self) -> None:
        """Test that Data takes the remaining width."""
        shares = [share for _, _, share in SPY_TABLE_COLUMNS]
        assert shares[-1] is None
        assert all(isinstance(share, int) for share in shares[:-1])

    def test_aliases_map_labels_to_keys(self) -> None:
        """Test that lowercase labels resolve to column keys."""
        assert COLUMN_ALIASES["direction"] == "type"
        assert COLUMN_ALIASES["data"] == "args"
        assert COLUMN_ALIASES["id"] == "index"

    def test_refresh_interval_positive(self) -> None:
        """Test that the table refresh interval is sane."""
        assert 0 < TABLE_REFRESH_INTERVAL_SECONDS <= 1
