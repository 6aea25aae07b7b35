"""Spy controller domain."""

from bridgespy.controllers.spy.controller import SpyController
from bridgespy.controllers.spy.persistence import (
    MemoryPersistenceStore,
    PersistenceStore,
)

__all__ = [
    "MemoryPersistenceStore",
    "PersistenceStore",
    "SpyController",
]
