"""Errors raised by the stock ledger and its collaborators.

Every one derives from DomainException; the CLI turns any of them into a
click error message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class NotFoundError(DomainException):
    """A referenced item, user or supplier does not exist."""


class DuplicateCodeError(ValidationError):
    """An item with the same code (case-insensitive) is already registered."""


class InsufficientStockError(ValidationError):
    """An exit asked for more than the item currently holds."""


class SnapshotError(DomainException):
    """A backup snapshot is malformed and cannot be restored."""
