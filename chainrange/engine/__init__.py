"""
Operations layered over ChainRange: cursor algorithms and bounded traversal.
"""

from chainrange.engine.algorithms import count_if, distance, find_if, next_cursor
from chainrange.engine.bounded import (
    DEFAULT_MAX_NODES,
    configured_max_nodes,
    has_cycle,
    iter_bounded,
    size_bounded,
)

__all__ = [
    "count_if",
    "distance",
    "find_if",
    "next_cursor",
    "DEFAULT_MAX_NODES",
    "configured_max_nodes",
    "has_cycle",
    "iter_bounded",
    "size_bounded",
]
