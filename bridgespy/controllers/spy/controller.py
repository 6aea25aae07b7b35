"""Spy controller - lifecycle and wiring of the ingestion pipeline.

The host (the Textual screen, or a test) drives this object through plain
method calls:

- ``mount(scheduler)``: restore the persisted rows, open a session and start
  the rate sampler on the host's timer
- ``on_event(name, payload)``: ingest host events
- ``on_tick()``: one sampler tick (normally fired by the scheduler)
- ``unmount()``: stop the timer and drop the session

A single :class:`RetentionBuffer` is owned here and shared by reference
with the sampler and the view controller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from bridgespy.constants.enums import PluginState
from bridgespy.controllers.base.scheduling import Scheduler
from bridgespy.controllers.filters.filter_engine import FilterEngine
from bridgespy.controllers.metrics.rate_sampler import RateSample, RateSampler
from bridgespy.controllers.retention.buffer import RetentionBuffer
from bridgespy.controllers.spy.persistence import (
    MemoryPersistenceStore,
    PersistenceStore,
)
from bridgespy.controllers.view.controller import ViewController
from bridgespy.models.core.filter import Filter
from bridgespy.models.core.view_row import ViewRow
from bridgespy.models.state.app_settings import AppSettings
from bridgespy.models.state.session_state import SessionState
from bridgespy.utils.clock import Clock, now_ms

logger = logging.getLogger(__name__)

StateListener = Callable[[SessionState], None]


class SpyController:
    """State machine owning the buffer, the sampler and the session."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        clock: Clock | None = None,
        store: PersistenceStore | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self._clock = clock or now_ms
        self._store: PersistenceStore = store or MemoryPersistenceStore()
        self.engine = FilterEngine(self.settings.filter_mode)
        self.buffer = RetentionBuffer(
            self.settings.retention_window_ms,
            clock=self._clock,
        )
        self.sampler = RateSampler(
            self.buffer,
            engine=self.engine,
            sample_window_ms=self.settings.sample_window_ms,
            interval_seconds=self.settings.sample_interval_seconds,
            clock=self._clock,
            on_sample=self._on_sample,
        )
        self.state = PluginState.IDLE
        self._session: SessionState | None = None
        self._view: ViewController | None = None
        self._listeners: list[StateListener] = []

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    @property
    def is_mounted(self) -> bool:
        return self.state is PluginState.MOUNTED

    def mount(self, scheduler: Scheduler | None = None) -> SessionState:
        """Restore persisted rows, open a fresh session and start sampling.

        Without a scheduler the sampler only runs when :meth:`on_tick` is
        called explicitly. Mounting twice returns the live session.
        """
        if self._session is not None:
            return self._session

        snapshot = self._store.load()
        if snapshot is not None:
            self.buffer.restore(snapshot)
            logger.debug("Restored %d rows from snapshot", len(snapshot))

        self._session = SessionState()
        self._view = ViewController(self.buffer, self._session, self.sampler, self.engine)
        self.sampler.set_filters(())
        if scheduler is not None:
            self.sampler.start(scheduler)
        self.state = PluginState.MOUNTED
        logger.info("Mounted with %d retained rows", len(self.buffer))
        return self._session

    def unmount(self) -> None:
        """Cancel the sampler timer and discard the session."""
        self.sampler.stop()
        self._session = None
        self._view = None
        if self.state is PluginState.MOUNTED:
            self.state = PluginState.UNMOUNTED
            logger.info("Unmounted")

    def add_listener(self, listener: StateListener) -> None:
        """Call ``listener`` with the session after every state change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # =========================================================================
    # HOST EVENTS
    # =========================================================================

    def on_event(self, event_name: str, payload: Any) -> int:
        """Ingest one host event and persist the result.

        Events are accepted whether or not a session is mounted. Unknown
        event names leave the rows untouched.

        Returns:
            Number of rows appended.
        """
        before = self.buffer.snapshot()
        added = self.buffer.apply(event_name, payload)
        if self.buffer.snapshot() is before:
            return 0
        self._store.save(self.buffer.snapshot())
        self._notify()
        return len(added)

    def on_tick(self) -> RateSample | None:
        """Run one sampler tick."""
        return self.sampler.tick()

    def _on_sample(self, sample: RateSample) -> None:
        if self._session is None:
            return
        self._session.messages_per_second = sample.messages_per_second
        self._session.bytes_per_second = sample.bytes_per_second
        self._notify()

    # =========================================================================
    # USER INTERACTION
    # =========================================================================

    @property
    def session(self) -> SessionState | None:
        return self._session

    def _require_view(self) -> ViewController:
        if self._view is None:
            raise RuntimeError("SpyController is not mounted")
        return self._view

    def highlight(self, keys: Sequence[Any]) -> None:
        self._require_view().on_highlight(keys)
        self._notify()

    def set_filters(self, filters: Sequence[Filter]) -> None:
        self._require_view().on_filter_change(filters)
        self._notify()

    def clear(self) -> None:
        """Clear the retained rows and the selection, then persist the empty state."""
        self._require_view().on_clear()
        self._store.save(self.buffer.snapshot())
        logger.info("Cleared retained rows")
        self._notify()

    def selected_row(self) -> ViewRow | None:
        return self._require_view().selected_row()

    def selected_payload(self) -> Any | None:
        return self._require_view().lookup()

    def visible_rows(self) -> list[ViewRow]:
        return self._require_view().visible_rows()

    def _notify(self) -> None:
        if self._session is None:
            return
        for listener in list(self._listeners):
            listener(self._session)
