"""Row model: raw events to display-ready table rows.

Pure transformation with no state and no wall-clock access. Every raw
record yields exactly one row; malformed records get safe defaults rather
than failing the batch they arrived in.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from bridgespy.models.core.raw_event import RawEvent
from bridgespy.models.core.view_row import (
    COLUMN_KEYS,
    FILTERABLE_COLUMNS,
    ColumnCell,
    ViewRow,
)

logger = logging.getLogger(__name__)


def format_event_time(epoch_millis: int) -> str:
    """Format epoch millis as local date and 24h time with milliseconds.

    The date part follows the current locale (``%x``, two-digit year, month
    and day), e.g. ``10/16/26, 14:03:22.123`` in the C locale. Out-of-range
    timestamps yield an empty string.
    """
    seconds, millis = divmod(int(epoch_millis), 1000)
    try:
        moment = datetime.fromtimestamp(seconds)
    except (OverflowError, OSError, ValueError):
        return ""
    return f"{moment.strftime('%x')}, {moment.strftime('%H:%M:%S')}.{millis:03d}"


def _as_batch(event_or_batch: Any) -> Sequence[Any]:
    if event_or_batch is None:
        return ()
    if isinstance(event_or_batch, (list, tuple)):
        return event_or_batch
    return (event_or_batch,)


def build_view_row(payload: Any) -> ViewRow:
    """Build one row from a single raw record."""
    event = RawEvent.from_payload(payload)
    values = {
        "index": event.id,
        "time": format_event_time(event.time),
        "type": event.type,
        "module": event.module,
        "method": event.method,
        "args": event.args.text,
    }
    columns = {
        key: ColumnCell(value=values[key], filterable=key in FILTERABLE_COLUMNS)
        for key in COLUMN_KEYS
    }
    return ViewRow(
        key=event.id,
        timestamp=event.time,
        columns=columns,
        payload=payload,
    )


def to_view_rows(event_or_batch: Any) -> list[ViewRow]:
    """Transform a raw event or a batch of raw events into rows, keeping batch order."""
    rows = [build_view_row(payload) for payload in _as_batch(event_or_batch)]
    logger.debug("Built %d view rows", len(rows))
    return rows
