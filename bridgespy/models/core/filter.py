"""Column filter predicates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Filter:
    """Column-equality predicate selected by the user."""

    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}:{self.value}"
