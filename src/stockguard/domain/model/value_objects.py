"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from stockguard.domain.exceptions import ValidationError

_CENTS = Decimal("0.01")

# Unit counts are stored in INTEGER columns.
MAX_UNITS = 2**31 - 1


@dataclass(frozen=True)
class Money:
    """A non-negative price or total, stored as a Decimal with two places.

    Matches the DECIMAL(10,2) columns used for prices and order totals.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")
        object.__setattr__(self, "amount", self.amount.quantize(_CENTS, ROUND_HALF_UP))

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0"), currency)

    @staticmethod
    def of(amount: str | int | Decimal, currency: str = "USD") -> Money:
        """Coerce user input (usually a CLI string) into Money."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    def __add__(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise ValidationError(f"Cannot combine {self.currency} with {other.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"


@dataclass(frozen=True)
class Quantity:
    """A positive number of units on an order line."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; "True units" is never meant
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")
        if self.value > MAX_UNITS:
            raise ValidationError(f"Quantity cannot exceed {MAX_UNITS}")

    def __str__(self) -> str:
        return str(self.value)
