"""Column-equality filter evaluation shared by the table and the sampler."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from bridgespy.constants.enums import FilterMode
from bridgespy.models.core.filter import Filter
from bridgespy.models.core.view_row import ViewRow


def _matches_one(row: ViewRow, row_filter: Filter) -> bool:
    cell = row.cell(row_filter.key)
    return cell is not None and cell.value == row_filter.value


def matches(
    row: ViewRow,
    filters: Sequence[Filter],
    mode: FilterMode = FilterMode.FIRST,
) -> bool:
    """Return True when ``row`` passes ``filters`` under ``mode``.

    An empty filter set matches every row. In ``FIRST`` mode only the first
    filter is evaluated and the rest are ignored. A filter naming a column
    the row does not have never matches.
    """
    if not filters:
        return True
    if mode is FilterMode.FIRST:
        return _matches_one(row, filters[0])
    if mode is FilterMode.ALL:
        return all(_matches_one(row, row_filter) for row_filter in filters)
    return any(_matches_one(row, row_filter) for row_filter in filters)


class FilterEngine:
    """Evaluates filters with a fixed combination mode."""

    def __init__(self, mode: FilterMode = FilterMode.FIRST) -> None:
        self.mode = mode

    def matches(self, row: ViewRow, filters: Sequence[Filter]) -> bool:
        return matches(row, filters, self.mode)

    def filter_rows(
        self, rows: Iterable[ViewRow], filters: Sequence[Filter]
    ) -> list[ViewRow]:
        """Return the rows passing ``filters``, preserving order."""
        filters = tuple(filters)
        if not filters:
            return list(rows)
        return [row for row in rows if matches(row, filters, self.mode)]
