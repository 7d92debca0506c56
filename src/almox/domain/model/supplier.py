"""Supplier — a vendor that stock entries can be attributed to."""

from __future__ import annotations

from dataclasses import dataclass

from almox.domain.exceptions import ValidationError

_REQUIRED = (
    ("name", "Supplier name"),
    ("contact_person", "Contact person"),
    ("email", "E-mail"),
    ("phone", "Phone"),
)


@dataclass
class Supplier:

    id: str
    name: str
    contact_person: str
    email: str
    phone: str

    @staticmethod
    def create(
        supplier_id: str, name: str, contact_person: str, email: str, phone: str
    ) -> Supplier:
        """Create a new supplier; every field is required."""
        supplier = Supplier(
            id=supplier_id,
            name=(name or "").strip(),
            contact_person=(contact_person or "").strip(),
            email=(email or "").strip(),
            phone=(phone or "").strip(),
        )
        supplier.validate()
        return supplier

    def validate(self) -> None:
        missing = [label for attr, label in _REQUIRED if not getattr(self, attr)]
        if missing:
            raise ValidationError(
                f"The following fields are required: {', '.join(missing)}"
            )
