"""Filter engine for Bridge Spy."""

from bridgespy.controllers.filters.filter_engine import FilterEngine, matches

__all__ = [
    "FilterEngine",
    "matches",
]
