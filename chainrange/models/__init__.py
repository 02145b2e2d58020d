"""
Data models for chain traversal.
"""

from chainrange.models.exceptions import ChainTooLongError, TraitsAlreadyRegisteredError
from chainrange.models.traits import (
    ChainTraits,
    CStructTraits,
    register_traits,
    traits_for,
    unregister_traits,
)
from chainrange.models.cursor import ChainCursor
from chainrange.models.chain_range import ChainRange

__all__ = [
    "ChainTooLongError",
    "TraitsAlreadyRegisteredError",
    "ChainTraits",
    "CStructTraits",
    "register_traits",
    "traits_for",
    "unregister_traits",
    "ChainCursor",
    "ChainRange",
]
