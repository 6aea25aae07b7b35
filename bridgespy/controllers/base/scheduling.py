"""Timer abstractions the host supplies for periodic work.

Textual's ``MessagePump.set_interval`` already satisfies :class:`Scheduler`,
so screens pass themselves. Tests pass a fake that fires on demand.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    """A running periodic timer."""

    def stop(self) -> None: ...


class Scheduler(Protocol):
    """Something that can call ``callback`` every ``interval`` seconds."""

    def set_interval(
        self, interval: float, callback: Callable[[], object]
    ) -> TimerHandle: ...
