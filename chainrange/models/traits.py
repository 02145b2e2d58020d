"""
Successor traits and the per-record-type registry.
"""

import ctypes
import logging
from collections.abc import Callable, Hashable
from typing import Any

from chainrange.interfaces.successor import SuccessorExtractor
from chainrange.models.exceptions import TraitsAlreadyRegisteredError

logger = logging.getLogger(__name__)


class ChainTraits(SuccessorExtractor):
    """
    Default traits: read the well-known successor attribute directly.

    Subclasses for records whose successor lives elsewhere either set
    `field` or override get_next().
    """

    field = "pNext"

    def get_next(self, node: Any | None) -> Any | None:
        if node is None:
            return None
        return getattr(node, self.field)

    def cast(self, untyped: Any | None, record_type: type) -> Any | None:
        # Plain objects carry no separate untyped representation
        return untyped

    def identity(self, node: Any | None) -> Hashable:
        return None if node is None else id(node)


class CStructTraits(ChainTraits):
    """
    Traits for ctypes.Structure records linked by a c_void_p field.

    Reading a c_void_p field yields an int address or None. cast() views
    that address as record_type with from_address(), which neither copies
    nor keeps the target alive.
    """

    def cast(self, untyped: Any | None, record_type: type) -> Any | None:
        if untyped is None:
            return None
        if isinstance(untyped, ctypes.c_void_p):
            untyped = untyped.value
        elif isinstance(untyped, (ctypes.Structure, ctypes.Union)):
            untyped = ctypes.addressof(untyped)
        elif isinstance(untyped, ctypes._Pointer):
            untyped = ctypes.cast(untyped, ctypes.c_void_p).value
        if not untyped:
            return None
        return record_type.from_address(untyped)

    def identity(self, node: Any | None) -> Hashable:
        return None if node is None else ctypes.addressof(node)


_DEFAULT_TRAITS = ChainTraits()
_CSTRUCT_TRAITS = CStructTraits()
_registry: dict[type, SuccessorExtractor] = {}


def register_traits(
    record_type: type,
) -> Callable[[type[SuccessorExtractor]], type[SuccessorExtractor]]:
    """
    Class decorator registering successor traits for a record type.

    Args:
        record_type: The record type the decorated traits apply to.

    Returns:
        Decorator that instantiates the traits class and records it.

    Raises:
        TraitsAlreadyRegisteredError: If record_type already has traits.
    """

    def decorator(traits_cls: type[SuccessorExtractor]) -> type[SuccessorExtractor]:
        existing = _registry.get(record_type)
        if existing is not None:
            raise TraitsAlreadyRegisteredError(record_type, existing)

        _registry[record_type] = traits_cls()
        logger.debug(
            f"Registered {traits_cls.__qualname__} for {record_type.__qualname__}"
        )
        return traits_cls

    return decorator


def unregister_traits(record_type: type) -> bool:
    """
    Remove the traits registered for a record type.

    Args:
        record_type: The record type to clear.

    Returns:
        True if a registration was removed, False otherwise.
    """
    if _registry.pop(record_type, None) is None:
        return False

    logger.debug(f"Unregistered traits for {record_type.__qualname__}")
    return True


def traits_for(record_type: type) -> SuccessorExtractor:
    """
    Resolve the traits in effect for a record type.

    Registrations are looked up along the MRO so subclasses inherit their
    base's traits. Unregistered ctypes structures get CStructTraits,
    everything else gets ChainTraits.
    """
    for klass in record_type.__mro__:
        traits = _registry.get(klass)
        if traits is not None:
            return traits

    if issubclass(record_type, (ctypes.Structure, ctypes.Union)):
        return _CSTRUCT_TRAITS
    return _DEFAULT_TRAITS
