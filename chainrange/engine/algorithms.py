"""
Cursor-returning algorithms over chain ranges.

Built-ins (filter, map, sum, any, list) already work on a ChainRange
through __iter__. These helpers cover the cases where the caller needs a
position back rather than a value.
"""

from collections.abc import Callable
from typing import Any

from chainrange.interfaces.forward_range import ForwardRange
from chainrange.models.cursor import ChainCursor


def find_if(chain: ForwardRange, predicate: Callable[[Any], bool]) -> ChainCursor:
    """
    Locate the first record satisfying a predicate.

    Args:
        chain: The range to search.
        predicate: Called with each record reference in link order.

    Returns:
        Cursor at the first match, or a cursor equal to chain.end().
    """
    cursor = chain.begin()
    end = chain.end()

    while cursor != end:
        if predicate(cursor.deref()):
            return cursor
        cursor.advance()

    return cursor


def count_if(chain: ForwardRange, predicate: Callable[[Any], bool]) -> int:
    """
    Count records satisfying a predicate.

    Args:
        chain: The range to scan.
        predicate: Called with each record reference in link order.

    Returns:
        Number of matching records.
    """
    count = 0
    for node in chain:
        if predicate(node):
            count += 1
    return count


def distance(first: ChainCursor, last: ChainCursor) -> int:
    """
    Count the advances needed to move from first to last.

    Neither cursor is modified. last must be reachable from first;
    otherwise the walk stops at the end sentinel and this counts the
    steps to it.
    """
    cursor = first.copy()
    steps = 0

    while cursor != last and not cursor.at_end():
        cursor.advance()
        steps += 1

    return steps


def next_cursor(cursor: ChainCursor, n: int = 1) -> ChainCursor:
    """
    Return a copy of cursor advanced n times.

    Args:
        cursor: Starting position. Left untouched.
        n: Number of steps, must be non-negative.

    Returns:
        The advanced copy. Steps past the end leave it at the end.

    Raises:
        ValueError: If n is negative; the cursor is forward-only.
    """
    if n < 0:
        raise ValueError(f"Cannot move a forward cursor by {n} steps")

    result = cursor.copy()
    for _ in range(n):
        if result.at_end():
            break
        result.advance()
    return result
