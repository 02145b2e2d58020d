"""
ForwardRange protocol for data structures that support forward-only traversal.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class ForwardRange(ABC):
    """
    Protocol for read-only sequences walked front to back through cursors.

    Implementations must support:
    - Cursor access via begin()/end()
    - Emptiness and size queries
    - Full iteration via __iter__
    - Async iteration via __aiter__
    """

    @abstractmethod
    def begin(self) -> Any:
        """Return a cursor positioned at the first element."""
        pass

    @abstractmethod
    def end(self) -> Any:
        """Return the past-the-end cursor."""
        pass

    @abstractmethod
    def empty(self) -> bool:
        """
        Check whether the range has no elements.

        Returns:
            True if there is nothing to traverse.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of elements.

        Returns:
            The count of reachable elements.

        Time complexity: O(N), not cached
        """
        pass

    @abstractmethod
    def front(self) -> Any:
        """Return the first element, or None for an empty range."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all elements in traversal order."""
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over all elements in traversal order."""
        pass
