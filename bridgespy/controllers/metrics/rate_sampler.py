"""Periodic throughput sampling over a trailing window of the buffer."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from bridgespy.constants.defaults import (
    SAMPLE_INTERVAL_SECONDS_DEFAULT,
    SAMPLE_WINDOW_SECONDS_DEFAULT,
)
from bridgespy.controllers.base.scheduling import Scheduler, TimerHandle
from bridgespy.controllers.filters.filter_engine import FilterEngine
from bridgespy.controllers.retention.buffer import RetentionBuffer
from bridgespy.models.core.filter import Filter
from bridgespy.models.core.view_row import ViewRow
from bridgespy.utils.clock import Clock, now_ms
from bridgespy.utils.serialization import utf8_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateSample:
    """One throughput measurement."""

    messages_per_second: int
    bytes_per_second: float
    matched: int = 0
    sampled_at_ms: int = 0

    @classmethod
    def zero(cls) -> RateSample:
        return cls(messages_per_second=0, bytes_per_second=0.0)


def payload_bytes(rows: Sequence[ViewRow]) -> int:
    """Total UTF-8 size of the rows' original payloads."""
    return sum(utf8_size(row.payload) for row in rows)


class RateSampler:
    """Derives msg/s and bytes/s from the last ``sample_window_ms`` of the buffer.

    ``messages_per_second`` is ``ceil(matched / window_seconds)``;
    ``bytes_per_second`` is the payload byte total over the same divisor.
    Only rows passing the current filters are counted.
    """

    def __init__(
        self,
        buffer: RetentionBuffer,
        *,
        engine: FilterEngine | None = None,
        sample_window_ms: int = SAMPLE_WINDOW_SECONDS_DEFAULT * 1000,
        interval_seconds: float = SAMPLE_INTERVAL_SECONDS_DEFAULT,
        clock: Clock | None = None,
        on_sample: Callable[[RateSample], None] | None = None,
    ) -> None:
        self._buffer = buffer
        self._engine = engine or FilterEngine()
        self._window_ms = sample_window_ms
        self._interval_seconds = interval_seconds
        self._clock = clock or now_ms
        self._on_sample = on_sample
        self._filters: tuple[Filter, ...] = ()
        self._timer: TimerHandle | None = None
        self.last_sample: RateSample = RateSample.zero()

    @property
    def filters(self) -> tuple[Filter, ...]:
        return self._filters

    def set_filters(self, filters: Sequence[Filter]) -> None:
        """Use ``filters`` from the next sample on and forget the last sample."""
        self._filters = tuple(filters)
        self.last_sample = RateSample.zero()

    @property
    def running(self) -> bool:
        return self._timer is not None

    def sample(self) -> RateSample:
        """Compute a sample from the current buffer contents."""
        now = self._clock()
        window_rows = self._buffer.recent(self._window_ms, now=now)
        matched = self._engine.filter_rows(window_rows, self._filters)
        window_seconds = self._window_ms / 1000
        result = RateSample(
            messages_per_second=math.ceil(len(matched) / window_seconds),
            bytes_per_second=payload_bytes(matched) / window_seconds,
            matched=len(matched),
            sampled_at_ms=now,
        )
        self.last_sample = result
        return result

    def tick(self) -> RateSample | None:
        """Sample and publish; a failing tick is logged and skipped."""
        try:
            result = self.sample()
            if self._on_sample is not None:
                self._on_sample(result)
        except Exception:
            logger.exception("Rate sampling failed; waiting for next tick")
            return None
        return result

    def start(self, scheduler: Scheduler) -> None:
        """Start ticking every ``interval_seconds`` on ``scheduler``."""
        if self._timer is not None:
            return
        self._timer = scheduler.set_interval(self._interval_seconds, self.tick)
        logger.debug("Rate sampler started (every %.1fs)", self._interval_seconds)

    def stop(self) -> None:
        """Cancel the periodic timer, if any."""
        if self._timer is None:
            return
        self._timer.stop()
        self._timer = None
        logger.debug("Rate sampler stopped")
