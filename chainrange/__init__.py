"""
Read-only traversal over pNext-style record chains.

This package provides a lazy range/cursor pair for chains of records linked
through a type-erased "next" field:
- ChainRange(head) - O(1) construction, never dereferences head
- empty() - O(1)
- size() - O(N), recomputed on every call
- begin()/end() - forward cursors, end is the None sentinel
- register_traits(record_type) - per-type successor extraction
"""

from chainrange.interfaces import ForwardRange, SuccessorExtractor
from chainrange.models import (
    ChainCursor,
    ChainRange,
    ChainTooLongError,
    ChainTraits,
    CStructTraits,
    TraitsAlreadyRegisteredError,
    register_traits,
    traits_for,
    unregister_traits,
)

__all__ = [
    "ChainCursor",
    "ChainRange",
    "ChainTooLongError",
    "ChainTraits",
    "CStructTraits",
    "ForwardRange",
    "SuccessorExtractor",
    "TraitsAlreadyRegisteredError",
    "register_traits",
    "traits_for",
    "unregister_traits",
]
