"""Display-ready projection of a raw event."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final

# Fixed table columns, in display order.
COLUMN_KEYS: Final = ("index", "time", "type", "module", "method", "args")

FILTERABLE_COLUMNS: Final = frozenset({"type", "module", "method", "args"})


@dataclass(frozen=True)
class ColumnCell:
    """A single table cell: its display string and whether it can be filtered on."""

    value: str
    filterable: bool = False


@dataclass(frozen=True)
class ViewRow:
    """Normalized table row plus the original event payload.

    Attributes:
        key: Unique row identifier (the raw event id).
        timestamp: Event time in epoch milliseconds.
        columns: Ordered mapping of column name to cell, always keyed by
            ``COLUMN_KEYS``.
        payload: The raw event exactly as it was received.
    """

    key: str
    timestamp: int
    columns: Mapping[str, ColumnCell]
    payload: Any = field(default=None, compare=False)

    def cell(self, column: str) -> ColumnCell | None:
        """Return the cell for ``column`` or None when the row has no such column."""
        return self.columns.get(column)

    def values(self) -> tuple[str, ...]:
        """Return the display values in column order."""
        return tuple(
            cell.value if (cell := self.columns.get(key)) is not None else ""
            for key in COLUMN_KEYS
        )
