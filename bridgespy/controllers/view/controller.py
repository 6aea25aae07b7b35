"""Selection and filter state behind the table and the detail sidebar."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from bridgespy.controllers.filters.filter_engine import FilterEngine
from bridgespy.controllers.metrics.rate_sampler import RateSampler
from bridgespy.controllers.retention.buffer import RetentionBuffer
from bridgespy.models.core.filter import Filter
from bridgespy.models.core.view_row import ViewRow
from bridgespy.models.state.session_state import SessionState

logger = logging.getLogger(__name__)


class ViewController:
    """Tracks the selected row and the active filters for one mounted session."""

    def __init__(
        self,
        buffer: RetentionBuffer,
        session: SessionState,
        sampler: RateSampler,
        engine: FilterEngine | None = None,
    ) -> None:
        self._buffer = buffer
        self._session = session
        self._sampler = sampler
        self._engine = engine or FilterEngine()

    @property
    def session(self) -> SessionState:
        return self._session

    def on_highlight(self, keys: Sequence[Any]) -> None:
        """Select the first highlighted key; an empty highlight keeps the selection."""
        if len(keys) > 0:
            self._session.selected_row_key = str(keys[0])

    def selected_row(self) -> ViewRow | None:
        """Resolve the selected key against the buffer; None means no selection."""
        key = self._session.selected_row_key
        if key is None:
            return None
        return self._buffer.find(key)

    def lookup(self) -> Any | None:
        """Return the selected row's original payload, or None for no selection."""
        row = self.selected_row()
        return row.payload if row is not None else None

    def on_filter_change(self, filters: Sequence[Filter]) -> None:
        """Replace the active filters and zero the metrics until the next sample."""
        self._session.active_filters = tuple(filters)
        self._session.reset_metrics()
        self._sampler.set_filters(self._session.active_filters)
        logger.debug("Active filters: %s", ", ".join(map(str, filters)) or "none")

    def on_clear(self) -> None:
        """Empty the buffer and drop the selection."""
        self._buffer.clear()
        self._session.selected_row_key = None

    def visible_rows(self) -> list[ViewRow]:
        """Buffer rows passing the active filters, in insertion order."""
        return self._engine.filter_rows(self._buffer.rows, self._session.active_filters)
