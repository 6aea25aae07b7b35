"""JSON serialization helpers shared by the row model and the rate sampler."""

from __future__ import annotations

import json
from typing import Any

from bridgespy.constants.values import UNSERIALIZABLE_ARGS

_SERIALIZATION_ERRORS = (TypeError, ValueError, RecursionError)


def compact_json(value: Any) -> str:
    """Serialize ``value`` to compact JSON without whitespace between tokens.

    Raises:
        TypeError: value holds objects JSON cannot represent.
        ValueError: value contains a circular reference.
        RecursionError: value is nested too deeply.
    """
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def safe_compact_json(value: Any, fallback: str = UNSERIALIZABLE_ARGS) -> str:
    """Serialize ``value`` like :func:`compact_json`, returning ``fallback`` on failure."""
    try:
        return compact_json(value)
    except _SERIALIZATION_ERRORS:
        return fallback


def utf8_size(value: Any) -> int:
    """Return the UTF-8 encoded length of a string, or of its JSON form otherwise."""
    text = value if isinstance(value, str) else safe_compact_json(value)
    return len(text.encode("utf-8", errors="replace"))


__all__ = [
    "compact_json",
    "safe_compact_json",
    "utf8_size",
]
