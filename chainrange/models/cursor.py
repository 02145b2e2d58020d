"""
ChainCursor - forward-only position within a record chain.
"""

from typing import Any

from chainrange.interfaces.successor import SuccessorExtractor


class ChainCursor:
    """
    Positional marker over a chain, advanced one successor at a time.

    Supports:
    - deref() returning the current record reference (None at the end)
    - In-place advance, with pre- and post-advance variants
    - Identity-based equality; ordering and hashing are not defined
    - Cheap independent copies

    Dereferencing at the end returns None instead of raising; callers check
    at_end() or compare against ChainRange.end() first.
    """

    def __init__(
        self, current: Any | None, record_type: type, traits: SuccessorExtractor
    ) -> None:
        """
        Initialize cursor.

        Args:
            current: The record to start at, or None for the end sentinel.
            record_type: Type every successor is cast to.
            traits: Successor traits resolved for record_type.
        """
        self._current = current
        self._record_type = record_type
        self._traits = traits

    @property
    def current(self) -> Any | None:
        return self._current

    def deref(self) -> Any | None:
        """Return the record the cursor points at, not a copy of it."""
        return self._current

    def at_end(self) -> bool:
        return self._current is None

    def advance(self) -> "ChainCursor":
        """
        Move to the successor record. No-op at the end.

        Returns:
            This cursor, after advancing.
        """
        if self._current is not None:
            self._current = self._traits.cast(
                self._traits.get_next(self._current), self._record_type
            )
        return self

    def post_advance(self) -> "ChainCursor":
        """
        Move to the successor record, returning the position held before.

        Returns:
            A copy of this cursor taken before advancing.
        """
        previous = self.copy()
        self.advance()
        return previous

    def copy(self) -> "ChainCursor":
        return ChainCursor(self._current, self._record_type, self._traits)

    def __copy__(self) -> "ChainCursor":
        return self.copy()

    def assign(self, other: "ChainCursor") -> "ChainCursor":
        """
        Move this cursor to other's position.

        Args:
            other: Cursor whose position to take.

        Returns:
            This cursor.
        """
        self._current = other._current
        self._record_type = other._record_type
        self._traits = other._traits
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChainCursor):
            return NotImplemented
        return self._traits.identity(self._current) == other._traits.identity(
            other._current
        )

    # Position changes on advance(), so cursors are unhashable
    __hash__ = None

    def __repr__(self) -> str:
        if self._current is None:
            return f"ChainCursor(end, {self._record_type.__qualname__})"
        return f"ChainCursor({self._current!r})"
