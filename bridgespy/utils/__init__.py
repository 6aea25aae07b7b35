"""Utility helpers for Bridge Spy."""

from bridgespy.utils.clock import Clock, now_ms
from bridgespy.utils.serialization import (
    compact_json,
    safe_compact_json,
    utf8_size,
)

__all__ = [
    "Clock",
    "compact_json",
    "now_ms",
    "safe_compact_json",
    "utf8_size",
]
