"""Base classes shared by sources and controllers."""

from bridgespy.controllers.base.base_controller import (
    AsyncControllerMixin,
    BaseEventSource,
    SourceEvent,
    WorkerResult,
)
from bridgespy.controllers.base.scheduling import Scheduler, TimerHandle

__all__ = [
    "AsyncControllerMixin",
    "BaseEventSource",
    "Scheduler",
    "SourceEvent",
    "TimerHandle",
    "WorkerResult",
]
