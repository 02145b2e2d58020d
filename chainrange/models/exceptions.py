"""
Custom exceptions for chain traversal.
"""


class ChainTooLongError(Exception):
    """
    Raised by bounded traversal when a chain exceeds the node limit.

    The plain ChainRange never raises this; it treats acyclic chains as a
    precondition.
    """

    def __init__(self, limit: int):
        """
        Initialize limit error.

        Args:
            limit: The maximum number of nodes that was allowed.
        """
        self.limit = limit
        super().__init__(
            f"Chain exceeds {limit} nodes; it is cyclic or longer than the configured limit"
        )


class TraitsAlreadyRegisteredError(Exception):
    """Raised when a record type already has successor traits registered."""

    def __init__(self, record_type: type, existing: object):
        self.record_type = record_type
        self.existing = existing
        super().__init__(
            f"Traits for {record_type.__qualname__} already registered: "
            f"{type(existing).__qualname__}"
        )
