"""
SuccessorExtractor abstract base class for per-record-type chain traits.
"""

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Any


class SuccessorExtractor(ABC):
    """
    Customization point describing how to walk one record type.

    Every step of a traversal is cast(get_next(node), record_type). The cast
    is the only place an untyped successor is reinterpreted as a record, and
    it is unchecked: the caller guarantees the pointer really addresses a
    record of that type.

    Implementations:
    - ChainTraits: plain Python objects with a pNext attribute
    - CStructTraits: ctypes structures with a c_void_p pNext field
    """

    @abstractmethod
    def get_next(self, node: Any | None) -> Any | None:
        """
        Read the type-erased successor of a record.

        Args:
            node: The record, or None.

        Returns:
            The untyped successor, or None at the end of the chain
            (and for a None node).
        """
        pass

    @abstractmethod
    def cast(self, untyped: Any | None, record_type: type) -> Any | None:
        """
        Reinterpret an untyped pointer as a record of record_type.

        Args:
            untyped: Possibly-null untyped pointer.
            record_type: The record type to view it as.

        Returns:
            The typed record reference, or None for a null pointer.
        """
        pass

    @abstractmethod
    def identity(self, node: Any | None) -> Hashable:
        """
        Return the key cursors use to decide whether they point at the same record.

        Args:
            node: The record, or None.

        Returns:
            None for a None node, otherwise a value unique to the record's storage.
        """
        pass
