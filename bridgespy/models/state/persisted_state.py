"""State handed to the host persistence store."""

from __future__ import annotations

from dataclasses import dataclass, field

from bridgespy.models.core.view_row import ViewRow


@dataclass(frozen=True)
class PersistedState:
    """Retained rows in insertion order. Duplicate keys are permitted."""

    rows: tuple[ViewRow, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.rows)
