"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStock(ValidationError):
    """A variant does not have enough stock to cover a requested quantity."""

    def __init__(self, variant_id: int, requested: int, available: int | None = None) -> None:
        self.variant_id = variant_id
        self.requested = requested
        self.available = available
        if available is None:
            detail = f"need {requested}"
        else:
            detail = f"need {requested}, have {available} in stock"
        super().__init__(f"Insufficient stock for variant #{variant_id} ({detail})")


class InvalidStatusTransition(ValidationError):
    """An order was asked to move between two statuses that are not linked."""

    def __init__(self, current: str, target: str) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Cannot move order from {current} to {target}")


class TransactionFailure(DomainException):
    """A unit of work failed for a non-business reason and was rolled back."""
