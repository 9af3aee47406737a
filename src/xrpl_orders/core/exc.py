"""
Core exception types for xrpl_orders.

These are dependency-free and may be imported by all modules.

Two domain errors are recoverable from the caller's point of view:
`FieldError` (an order request failed validation) and `OrderNotFound` (a
transaction has no effect on the queried order). Everything deriving from
`InvariantViolation` signals a broken caller contract instead.
"""

__all__ = [
    "FieldError",
    "OrderNotFound",
    "InvariantViolation",
    "AmountDomainError",
    "MalformedAmount",
]


class FieldError(ValueError):
    """Raised when an order request field is missing or has the wrong shape.

    Attributes
    ----------
    field : str
        Name of the offending request field (dotted for nested values).
    message : str
        Human-readable expectation, suitable for returning to the client.
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class OrderNotFound(LookupError):
    """Raised when a transaction carries no effect for the queried account/sequence.

    The answer is definitive for that transaction; retrying will not help.
    """

    def __init__(self, account, sequence=None, tx_hash=None):
        super().__init__("Transaction does not contain order matching supplied parameters")
        self.account = account
        self.sequence = sequence
        self.tx_hash = tx_hash


class InvariantViolation(Exception):
    """Raised when inputs break an internal-consistency guarantee."""
    pass


class AmountDomainError(InvariantViolation):
    """Raised when amounts violate the non-negative domain."""
    pass


class MalformedAmount(InvariantViolation):
    """Raised when an amount is neither a drops string nor an issued-currency object."""
    pass
