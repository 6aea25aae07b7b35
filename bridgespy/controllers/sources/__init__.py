"""Event sources feeding the spy controller."""

from bridgespy.controllers.sources.jsonl_source import JsonlEventSource, parse_line
from bridgespy.controllers.sources.simulated_source import SimulatedEventSource

__all__ = [
    "JsonlEventSource",
    "SimulatedEventSource",
    "parse_line",
]
