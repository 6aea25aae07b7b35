"""Spy screen presenter - table rows, KPI strings and filter parsing."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple

from bridgespy.constants.limits import MAX_ROWS_DISPLAY
from bridgespy.models.core.filter import Filter
from bridgespy.models.core.view_row import ViewRow
from bridgespy.screens.spy.config import (
    BYTE_UNITS,
    CELL_PADDING,
    COLUMN_ALIASES,
    MIN_COLUMN_WIDTH,
    MIN_DATA_COLUMN_WIDTH,
    SPY_TABLE_COLUMNS,
)

logger = logging.getLogger(__name__)

_SEPARATORS = (":", "=")


class ParsedFilters(NamedTuple):
    """Filters read from the filter input plus the tokens that were not understood."""

    filters: list[Filter]
    rejected: list[str]


def _split_token(token: str) -> tuple[str, str] | None:
    positions = [token.find(sep) for sep in _SEPARATORS if sep in token]
    if not positions:
        return None
    cut = min(positions)
    key, value = token[:cut], token[cut + 1 :]
    if not key or not value:
        return None
    return key, value


class SpyPresenter:
    """Turns controller state into what the spy screen displays.

    Table row keys are positional (``row-<n>``) because event ids are not
    guaranteed unique; :meth:`row_key_for` maps them back to the event id.
    """

    def __init__(self, max_rows: int = MAX_ROWS_DISPLAY) -> None:
        self.max_rows = max_rows
        self._row_keys: dict[str, str] = {}
        self._positions: dict[str, int] = {}

    # =========================================================================
    # TABLE
    # =========================================================================

    def table_rows(self, rows: Sequence[ViewRow]) -> list[tuple[str, tuple[str, ...]]]:
        """Return ``(table_key, values)`` pairs for the newest ``max_rows`` rows."""
        shown = list(rows)[-self.max_rows :] if self.max_rows > 0 else []
        self._row_keys = {}
        self._positions = {}
        result: list[tuple[str, tuple[str, ...]]] = []
        for position, row in enumerate(shown):
            table_key = f"row-{position}"
            self._row_keys[table_key] = row.key
            self._positions.setdefault(row.key, position)
            result.append((table_key, row.values()))
        return result

    def row_key_for(self, table_key: str | None) -> str | None:
        """Event id behind a table row key from the last :meth:`table_rows` call."""
        if table_key is None:
            return None
        return self._row_keys.get(table_key)

    def position_of(self, row_key: str | None) -> int | None:
        """Table position of the first row with ``row_key``, if it is displayed."""
        if row_key is None:
            return None
        return self._positions.get(row_key)

    @staticmethod
    def column_widths(total_width: int) -> list[int]:
        """Column widths for a table ``total_width`` cells wide.

        Fixed columns take their percentage share; Data takes what is left.
        """
        usable = max(total_width - CELL_PADDING * len(SPY_TABLE_COLUMNS), 0)
        widths: list[int] = []
        for _, _, share in SPY_TABLE_COLUMNS:
            if share is None:
                widths.append(0)
                continue
            widths.append(max(MIN_COLUMN_WIDTH, usable * share // 100))
        fixed = sum(widths)
        for index, (_, _, share) in enumerate(SPY_TABLE_COLUMNS):
            if share is None:
                widths[index] = max(MIN_DATA_COLUMN_WIDTH, usable - fixed)
        return widths

    # =========================================================================
    # KPIs
    # =========================================================================

    @staticmethod
    def format_rate(messages_per_second: int) -> str:
        return f"{messages_per_second} msg/s"

    @staticmethod
    def format_bytes(bytes_per_second: float, fraction_digits: int = 2) -> str:
        """Human readable bandwidth, e.g. ``"1.5 KB/s"``; zero is ``"0 B/s"``.

        Values are rounded to ``fraction_digits`` with trailing zeros dropped.
        """
        if bytes_per_second <= 0:
            return "0 B/s"
        digits = max(fraction_digits, 0)
        value = float(bytes_per_second)
        unit = BYTE_UNITS[0]
        for unit in BYTE_UNITS:
            if value < 1000 or unit == BYTE_UNITS[-1]:
                break
            value /= 1000
        text = f"{value:.{digits}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return f"{text} {unit}/s"

    @staticmethod
    def format_retained(count: int) -> str:
        return f"{count} rows"

    # =========================================================================
    # FILTERS
    # =========================================================================

    @staticmethod
    def parse_filters(text: str) -> ParsedFilters:
        """Parse whitespace separated ``column:value`` / ``column=value`` tokens.

        Column names are case-insensitive and may be given as labels
        (``Direction``) or keys (``type``). Unknown columns are kept; they
        simply match nothing.
        """
        filters: list[Filter] = []
        rejected: list[str] = []
        for token in text.split():
            parts = _split_token(token)
            if parts is None:
                rejected.append(token)
                continue
            key, value = parts
            key = key.lower()
            filters.append(Filter(key=COLUMN_ALIASES.get(key, key), value=value))
        if rejected:
            logger.debug("Ignoring filter tokens %s", rejected)
        return ParsedFilters(filters, rejected)

    @staticmethod
    def format_filters(filters: Sequence[Filter]) -> str:
        return " ".join(str(row_filter) for row_filter in filters)
