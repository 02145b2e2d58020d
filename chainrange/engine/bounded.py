"""
Bounded traversal for chains that may be cyclic or corrupt.

ChainRange assumes an acyclic chain and never checks. Callers holding a
chain from an untrusted source use these instead; the default traversal
semantics stay unchanged.
"""

import logging
import os
from collections.abc import Iterator
from typing import Any

from chainrange.interfaces.forward_range import ForwardRange
from chainrange.models.exceptions import ChainTooLongError

logger = logging.getLogger(__name__)

DEFAULT_MAX_NODES = 65536


def configured_max_nodes() -> int:
    """
    Read the node limit from CHAINRANGE_MAX_NODES, falling back to DEFAULT_MAX_NODES.

    Parsed on every call so a bad value fails the bounded traversal that
    uses it, not the package import.

    Raises:
        ValueError: If the variable is set but is not an integer.
    """
    raw = os.environ.get("CHAINRANGE_MAX_NODES")
    if raw is None:
        return DEFAULT_MAX_NODES

    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"CHAINRANGE_MAX_NODES must be an integer, got {raw!r}") from None


def iter_bounded(chain: ForwardRange, max_nodes: int | None = None) -> Iterator[Any]:
    """
    Iterate a chain, refusing to yield more than max_nodes records.

    Args:
        chain: The range to walk.
        max_nodes: Limit on yielded records. Defaults to configured_max_nodes().

    Yields:
        Record references in link order.

    Raises:
        ChainTooLongError: When a record beyond the limit is reached.
    """
    limit = configured_max_nodes() if max_nodes is None else max_nodes
    if limit < 0:
        raise ValueError(f"max_nodes must be non-negative, got {limit}")

    count = 0
    for node in chain:
        if count == limit:
            logger.warning(f"Chain traversal stopped after {limit} nodes")
            raise ChainTooLongError(limit)
        count += 1
        yield node


def size_bounded(chain: ForwardRange, max_nodes: int | None = None) -> int:
    """
    Count the records of a chain, failing once the count passes max_nodes.

    Raises:
        ChainTooLongError: When the chain is longer than the limit.
    """
    count = 0
    for _ in iter_bounded(chain, max_nodes):
        count += 1
    return count


def has_cycle(chain: ForwardRange) -> bool:
    """
    Detect a cycle with two cursors moving at different speeds.

    Uses O(1) extra space and terminates on any chain, cyclic or not.

    Returns:
        True if following successors from the head never reaches the end.
    """
    slow = chain.begin()
    fast = chain.begin()

    while not fast.at_end():
        fast.advance()
        if fast.at_end():
            return False
        fast.advance()
        slow.advance()
        if slow == fast:
            return True

    return False
