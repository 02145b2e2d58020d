"""
ChainRange - lazy read-only view over a pNext-linked record chain.
"""

import ctypes
from collections.abc import AsyncIterator, Iterator
from typing import Any

from chainrange.interfaces.forward_range import ForwardRange
from chainrange.interfaces.successor import SuccessorExtractor
from chainrange.models.cursor import ChainCursor
from chainrange.models.traits import traits_for

_CTYPES_HEADS = (ctypes._Pointer, ctypes.Structure, ctypes.Union)


class ChainRange(ForwardRange):
    """
    Range over the records reachable from a head record.

    Borrows the head; never allocates, copies or frees records. The chain
    must be acyclic and stay alive while the range or its cursors are used.
    Traits are resolved once here, not on every step.
    """

    def __init__(
        self,
        head: Any | None = None,
        record_type: type | None = None,
        traits: SuccessorExtractor | None = None,
    ) -> None:
        """
        Initialize range from a typed, possibly-None head.

        Args:
            head: First record of the chain, a typed ctypes POINTER to it,
                or None for an empty chain.
            record_type: Type successors are cast to. Defaults to type(head),
                or the pointee type for a ctypes POINTER.
            traits: Successor traits. Defaults to traits_for(record_type).
        """
        if record_type is None:
            if isinstance(head, ctypes._Pointer):
                record_type = type(head)._type_
            else:
                record_type = object if head is None else type(head)

        if traits is None:
            traits = traits_for(record_type)

        # ctypes heads are viewed as record_type so every element shares one type
        if isinstance(head, _CTYPES_HEADS) and type(head) is not record_type:
            head = traits.cast(head, record_type)

        self._head = head
        self._record_type = record_type
        self._traits = traits

    @classmethod
    def from_void(
        cls,
        untyped: Any | None,
        record_type: type,
        traits: SuccessorExtractor | None = None,
    ) -> "ChainRange":
        """
        Build a range from an untyped pointer to the first record.

        The pointer is reinterpreted as record_type without any check.

        Args:
            untyped: None, an address, a c_void_p, or a record reference.
            record_type: Type the pointer is believed to address.
            traits: Successor traits. Defaults to traits_for(record_type).

        Returns:
            ChainRange whose head is the reinterpreted record.
        """
        if traits is None:
            traits = traits_for(record_type)
        return cls(traits.cast(untyped, record_type), record_type, traits)

    @property
    def record_type(self) -> type:
        return self._record_type

    @property
    def traits(self) -> SuccessorExtractor:
        return self._traits

    def empty(self) -> bool:
        return self._head is None

    def size(self) -> int:
        """Count reachable records by walking the chain. O(N) on every call."""
        count = 0
        for _ in self:
            count += 1
        return count

    def front(self) -> Any | None:
        return self._head

    def begin(self) -> ChainCursor:
        return ChainCursor(self._head, self._record_type, self._traits)

    def end(self) -> ChainCursor:
        return ChainCursor(None, self._record_type, self._traits)

    def cbegin(self) -> ChainCursor:
        return self.begin()

    def cend(self) -> ChainCursor:
        return self.end()

    def __bool__(self) -> bool:
        return self._head is not None

    def __iter__(self) -> Iterator[Any]:
        return _ChainIterator(self.begin())

    def __aiter__(self) -> AsyncIterator[Any]:
        return _AsyncChainIterator(self.begin())

    def __repr__(self) -> str:
        state = "empty" if self._head is None else f"head={self._head!r}"
        return f"ChainRange({self._record_type.__qualname__}, {state})"


class _ChainIterator(Iterator[Any]):
    """Iterator yielding each record of a chain in link order."""

    def __init__(self, cursor: ChainCursor) -> None:
        self._cursor = cursor

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._cursor.at_end():
            raise StopIteration

        node = self._cursor.deref()
        self._cursor.advance()
        return node


class _AsyncChainIterator(AsyncIterator[Any]):
    """Async iterator over a chain (in-memory, no I/O)."""

    def __init__(self, cursor: ChainCursor) -> None:
        self._cursor = cursor

    def __aiter__(self) -> "_AsyncChainIterator":
        return self

    async def __anext__(self) -> Any:
        if self._cursor.at_end():
            raise StopAsyncIteration

        node = self._cursor.deref()
        self._cursor.advance()
        return node
