"""Ephemeral per-mount UI state."""

from __future__ import annotations

from dataclasses import dataclass, field

from bridgespy.models.core.filter import Filter


@dataclass
class SessionState:
    """Selection, active filters and the last published throughput sample.

    Created on mount, mutated by user interaction and the sampler, and
    discarded on unmount. Never persisted.
    """

    selected_row_key: str | None = None
    active_filters: tuple[Filter, ...] = field(default_factory=tuple)
    messages_per_second: int = 0
    bytes_per_second: float = 0.0

    def reset_metrics(self) -> None:
        """Zero both throughput values."""
        self.messages_per_second = 0
        self.bytes_per_second = 0.0
