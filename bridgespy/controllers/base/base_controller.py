"""Base event source with worker-friendly patterns for Bridge Spy.

Sources are polled from Textual thread workers so file reads never block
the UI; the screen hands the polled events back to the event loop.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, NamedTuple

logger = logging.getLogger(__name__)


class SourceEvent(NamedTuple):
    """A named host event with its payload, e.g. ``("newRow", {...})``."""

    name: str
    payload: Any


@dataclass
class WorkerResult:
    """Result wrapper for worker operations."""

    success: bool
    data: Any | None = None
    error: str | None = None
    duration_ms: float = 0.0


class AsyncControllerMixin:
    """Mixin tracking poll timing for sources driven by Textual Workers."""

    def __init__(self) -> None:
        """Initialize the async controller mixin."""
        self._poll_start_time: float | None = None

    def _start_timer(self) -> None:
        self._poll_start_time = time.monotonic()

    def _elapsed_ms(self) -> float:
        if self._poll_start_time is None:
            return 0.0
        return (time.monotonic() - self._poll_start_time) * 1000


class BaseEventSource(AsyncControllerMixin, ABC):
    """Base class for producers of raw bridge events.

    Subclasses implement :meth:`check_connection` and :meth:`poll`.
    """

    name: str = "source"

    @abstractmethod
    def check_connection(self) -> bool:
        """Check if the event source is available.

        Returns:
            True if the source can be polled, False otherwise
        """
        ...

    @abstractmethod
    def poll(self) -> list[SourceEvent]:
        """Return the events produced since the previous poll.

        Raises:
            OSError: The underlying stream could not be read.
        """
        ...

    def flush(self) -> list[SourceEvent]:
        """Return events held back waiting for more input; none by default."""
        return []

    def close(self) -> None:
        """Release any resources held by the source."""

    def poll_result(self, *, final: bool = False) -> WorkerResult:
        """Poll once and wrap the outcome for a worker.

        With ``final`` the source is also flushed, for one-shot reads that
        will not poll again.

        I/O failures are reported in the result instead of raised so one
        bad read does not stop the polling loop.
        """
        self._start_timer()
        try:
            events = self.poll()
            if final:
                events = [*events, *self.flush()]
        except OSError as exc:
            logger.warning("Polling %s failed: %s", self.name, exc)
            return WorkerResult(success=False, error=str(exc), duration_ms=self._elapsed_ms())
        return WorkerResult(success=True, data=events, duration_ms=self._elapsed_ms())
