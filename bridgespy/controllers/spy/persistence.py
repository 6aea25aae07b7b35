"""Host persistence collaborator for the retained rows."""

from __future__ import annotations

from typing import Protocol

from bridgespy.models.state.persisted_state import PersistedState


class PersistenceStore(Protocol):
    """Holds the persisted row state across mounts."""

    def load(self) -> PersistedState | None: ...

    def save(self, state: PersistedState) -> None: ...


class MemoryPersistenceStore:
    """In-process snapshot store; nothing survives a restart."""

    def __init__(self, state: PersistedState | None = None) -> None:
        self._state = state
        self.saves = 0

    def load(self) -> PersistedState | None:
        return self._state

    def save(self, state: PersistedState) -> None:
        self._state = state
        self.saves += 1
