"""
Abstract base classes and protocols for chain traversal.
"""

from chainrange.interfaces.forward_range import ForwardRange
from chainrange.interfaces.successor import SuccessorExtractor

__all__ = ["ForwardRange", "SuccessorExtractor"]
