"""Small immutable values used across the catalog: money, moved quantities
and the parsing of numbers typed by operators.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from almox.domain.exceptions import ValidationError


def to_decimal(raw: str | float | int | Decimal, label: str = "value") -> Decimal:
    """Coerce user input to a finite Decimal or raise ValidationError."""
    if isinstance(raw, bool):
        raise ValidationError(f"Invalid {label}: {raw!r}")
    try:
        value = raw if isinstance(raw, Decimal) else Decimal(str(raw).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {label}: {raw!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid {label}: {raw!r}")
    return value


@dataclass(frozen=True)
class Money:
    """Stock valuation in reais.  Never negative; arithmetic stays in Decimal."""

    amount: Decimal
    currency: str = "BRL"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    @classmethod
    def of(cls, amount: str | float | int | Decimal) -> Money:
        return cls(to_decimal(amount, "money amount"))

    @classmethod
    def zero(cls) -> Money:
        return cls(Decimal("0"))

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + self._amount_of(other), self.currency)

    def __mul__(self, factor: int | Decimal) -> Money:
        """Scale by a quantity, e.g. unit value × units in stock."""
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        return self.amount < self._amount_of(other)

    def __le__(self, other: Money) -> bool:
        return self.amount <= self._amount_of(other)

    def __str__(self) -> str:
        return f"R$ {self.amount:.2f}"

    def _amount_of(self, other: Money) -> Decimal:
        if other.currency != self.currency:
            raise ValidationError(f"Cannot combine {self.currency} with {other.currency}")
        return other.amount


@dataclass(frozen=True)
class Quantity:
    """A strictly positive amount moved in or out of stock.

    Decimal rather than int: items measured in KG or M take fractions.
    """

    value: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, Decimal)):
            raise ValidationError(
                f"Quantity must be a number, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be greater than zero")

    def __str__(self) -> str:
        return format_quantity(self.value)

    @staticmethod
    def of(raw: str | float | int | Decimal) -> Quantity:
        return Quantity(to_decimal(raw, "quantity"))


def format_quantity(value: Decimal | int) -> str:
    """Render a quantity without a trailing ``.0`` for whole numbers."""
    value = Decimal(value)
    if value == value.to_integral_value():
        return str(value.quantize(Decimal("1")))
    return str(value.normalize())
