"""Controllers module for Bridge Spy.

This module provides the ingestion pipeline (row model, retention buffer,
filter engine, rate sampler, view controller), the spy controller that
wires it to the host, and the event sources feeding it.
"""

from __future__ import annotations

# Base classes
from bridgespy.controllers.base import (
    AsyncControllerMixin,
    BaseEventSource,
    Scheduler,
    SourceEvent,
    TimerHandle,
    WorkerResult,
)

# Pipeline
from bridgespy.controllers.filters import FilterEngine, matches
from bridgespy.controllers.metrics import RateSample, RateSampler
from bridgespy.controllers.retention import (
    RetentionBuffer,
    persisted_state_reducer,
)
from bridgespy.controllers.rows import to_view_rows

# Sources
from bridgespy.controllers.sources import (
    JsonlEventSource,
    SimulatedEventSource,
)

# Orchestration
from bridgespy.controllers.spy import (
    MemoryPersistenceStore,
    PersistenceStore,
    SpyController,
)
from bridgespy.controllers.view import ViewController

__all__ = [
    # Base
    "AsyncControllerMixin",
    "BaseEventSource",
    # Pipeline
    "FilterEngine",
    # Sources
    "JsonlEventSource",
    # Orchestration
    "MemoryPersistenceStore",
    "PersistenceStore",
    "RateSample",
    "RateSampler",
    "RetentionBuffer",
    "Scheduler",
    "SimulatedEventSource",
    "SourceEvent",
    "SpyController",
    "TimerHandle",
    "ViewController",
    "WorkerResult",
    "matches",
    "persisted_state_reducer",
    "to_view_rows",
]
