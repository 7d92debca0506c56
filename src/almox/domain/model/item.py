"""Item aggregate — a stock-keeping unit in the warehouse catalog.

The item owns its current quantity and valuation.  ``total_value`` is never
stored: it is derived from quantity and average unit value every time it is
read, so no mutation can leave the two out of step.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal

from almox.domain.exceptions import ValidationError
from almox.domain.model.value_objects import Money, to_decimal


@dataclass
class Item:
    """Aggregate root for a stocked item.

    Invariants:
    - ``stock_quantity`` is never negative once written by the ledger
    - ``total_value == stock_quantity × avg_unit_value``
    - ``code`` does not change after creation
    """

    id: str
    code: str
    description: str
    category: str
    location: str
    unit: str
    stock_quantity: Decimal
    min_quantity: Decimal = Decimal("0")
    avg_unit_value: Money = Money(Decimal("0"))
    lead_time_days: int = 0
    preferred_supplier_id: str | None = None

    @property
    def total_value(self) -> Money:
        return self.avg_unit_value * self.stock_quantity

    @property
    def is_low_stock(self) -> bool:
        return self.stock_quantity <= self.min_quantity

    def matches_code(self, code: str) -> bool:
        """Case-insensitive, whitespace-trimmed code comparison."""
        return self.code.strip().lower() == code.strip().lower()

    def set_quantity(self, new_quantity: Decimal) -> None:
        self.stock_quantity = new_quantity


@dataclass
class ItemDraft:
    """An item being filled in by the operator; any field may still be unset.

    ``to_item()`` is the only way a draft becomes an ``Item`` and it checks
    every required field first.
    """

    code: str | None = None
    description: str | None = None
    category: str | None = None
    location: str | None = None
    unit: str | None = None
    stock_quantity: str | int | Decimal | None = None
    min_quantity: str | int | Decimal | None = None
    avg_unit_value: str | int | Decimal | None = None
    lead_time_days: int | None = None
    preferred_supplier_id: str | None = None

    _REQUIRED_TEXT = (
        ("code", "Code"),
        ("description", "Description"),
        ("category", "Category"),
        ("location", "Location"),
        ("unit", "Unit of measure"),
    )

    def to_item(self, item_id: str) -> Item:
        for attr, label in self._REQUIRED_TEXT:
            value = getattr(self, attr)
            if value is None or not str(value).strip():
                raise ValidationError(f"{label} is required")

        if self.stock_quantity is None or str(self.stock_quantity).strip() == "":
            raise ValidationError("Initial quantity is required")

        quantity = _non_negative(self.stock_quantity, "initial quantity")
        min_quantity = _non_negative(
            self.min_quantity if self.min_quantity not in (None, "") else 0,
            "minimum quantity",
        )
        unit_value = Money(
            _non_negative(
                self.avg_unit_value if self.avg_unit_value not in (None, "") else 0,
                "average unit value",
            )
        )
        lead_time = self.lead_time_days or 0
        if lead_time < 0:
            raise ValidationError("Lead time cannot be negative")

        return Item(
            id=item_id,
            code=self.code.strip(),  # type: ignore[union-attr]
            description=self.description.strip(),  # type: ignore[union-attr]
            category=self.category.strip(),  # type: ignore[union-attr]
            location=self.location.strip(),  # type: ignore[union-attr]
            unit=self.unit.strip(),  # type: ignore[union-attr]
            stock_quantity=quantity,
            min_quantity=min_quantity,
            avg_unit_value=unit_value,
            lead_time_days=lead_time,
            preferred_supplier_id=self.preferred_supplier_id or None,
        )


@dataclass
class ItemChanges:
    """Edits to an existing item.  ``None`` means "leave as is".

    Code and quantity are deliberately absent: the code is immutable and the
    quantity only moves through entries, exits and inventory counts.
    """

    description: str | None = None
    category: str | None = None
    location: str | None = None
    unit: str | None = None
    min_quantity: str | int | Decimal | None = None
    avg_unit_value: str | int | Decimal | None = None
    lead_time_days: int | None = None
    preferred_supplier_id: str | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def apply_to(self, item: Item) -> None:
        """Validate every change, then write them all."""
        updates: dict[str, object] = {}
        for attr in ("description", "category", "location", "unit"):
            value = getattr(self, attr)
            if value is not None:
                if not value.strip():
                    raise ValidationError(f"{attr.capitalize()} cannot be blank")
                updates[attr] = value.strip()
        if self.min_quantity is not None:
            updates["min_quantity"] = _non_negative(self.min_quantity, "minimum quantity")
        if self.avg_unit_value is not None:
            updates["avg_unit_value"] = Money(
                _non_negative(self.avg_unit_value, "average unit value")
            )
        if self.lead_time_days is not None:
            if self.lead_time_days < 0:
                raise ValidationError("Lead time cannot be negative")
            updates["lead_time_days"] = self.lead_time_days
        if self.preferred_supplier_id is not None:
            updates["preferred_supplier_id"] = self.preferred_supplier_id or None

        for attr, value in updates.items():
            setattr(item, attr, value)


def _non_negative(raw: str | int | Decimal, label: str) -> Decimal:
    value = to_decimal(raw, label)
    if value < 0:
        raise ValidationError(f"{label.capitalize()} cannot be negative")
    return value
