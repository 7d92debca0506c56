"""Plain-dict codecs for the persisted aggregates.

Shared by the JSON repositories and the backup snapshot so both write the
same shape.  Keys are camelCase to stay compatible with backups exported
by the earlier web front end.  Decimals are written as strings; numbers
are accepted on read.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from almox.domain.exceptions import ValidationError
from almox.domain.model.audit import AuditEntry
from almox.domain.model.item import Item
from almox.domain.model.movement import Direction, MovementRecord
from almox.domain.model.supplier import Supplier
from almox.domain.model.user import Role, User
from almox.domain.model.value_objects import Money, to_decimal


def _dec(raw: object, label: str) -> Decimal:
    return to_decimal(raw, label)  # type: ignore[arg-type]


def _stored_quantity(raw: object, label: str) -> Decimal:
    value = _dec(raw, label)
    if value < 0:
        raise ValidationError(f"{label.capitalize()} cannot be negative: {value}")
    return value


# --- Item ----------------------------------------------------------------------


def item_to_raw(item: Item) -> dict:
    return {
        "id": item.id,
        "code": item.code,
        "description": item.description,
        "category": item.category,
        "location": item.location,
        "unit": item.unit,
        "stockQuantity": str(item.stock_quantity),
        "minQuantity": str(item.min_quantity),
        "leadTimeDays": item.lead_time_days,
        "avgUnitValue": str(item.avg_unit_value.amount),
        # Derived; written for readers of the file, ignored on load.
        "totalValue": str(item.total_value.amount),
        "preferredSupplierId": item.preferred_supplier_id,
    }


def item_from_raw(raw: dict) -> Item:
    return Item(
        id=str(raw["id"]),
        code=raw["code"],
        description=raw["description"],
        category=raw["category"],
        location=raw["location"],
        unit=raw["unit"],
        stock_quantity=_stored_quantity(raw["stockQuantity"], "stock quantity"),
        min_quantity=_stored_quantity(raw.get("minQuantity", 0), "minimum quantity"),
        avg_unit_value=Money(_dec(raw.get("avgUnitValue", 0), "average unit value")),
        lead_time_days=int(raw.get("leadTimeDays") or 0),
        preferred_supplier_id=raw.get("preferredSupplierId"),
    )


# --- MovementRecord --------------------------------------------------------------


def movement_to_raw(record: MovementRecord) -> dict:
    raw = {
        "id": record.id,
        "itemId": record.item_id,
        "type": record.direction.value,
        "quantity": str(record.quantity),
        "date": record.date.isoformat(),
    }
    optional = {
        "supplierId": record.supplier_id,
        "invoice": record.invoice,
        "notes": record.notes,
        "requester": record.requester,
        "responsible": record.responsible,
    }
    raw.update({key: value for key, value in optional.items() if value is not None})
    return raw


def movement_from_raw(raw: dict) -> MovementRecord:
    return MovementRecord(
        id=str(raw["id"]),
        item_id=str(raw["itemId"]),
        direction=Direction(raw["type"]),
        quantity=_dec(raw["quantity"], "quantity"),
        date=date.fromisoformat(str(raw["date"])[:10]),
        supplier_id=raw.get("supplierId"),
        invoice=raw.get("invoice"),
        notes=raw.get("notes"),
        requester=raw.get("requester"),
        responsible=raw.get("responsible"),
    )


# --- Supplier ------------------------------------------------------------------


def supplier_to_raw(supplier: Supplier) -> dict:
    return {
        "id": supplier.id,
        "name": supplier.name,
        "contactPerson": supplier.contact_person,
        "email": supplier.email,
        "phone": supplier.phone,
    }


def supplier_from_raw(raw: dict) -> Supplier:
    return Supplier(
        id=str(raw["id"]),
        name=raw["name"],
        contact_person=raw.get("contactPerson", ""),
        email=raw.get("email", ""),
        phone=raw.get("phone", ""),
    )


# --- User ----------------------------------------------------------------------


def user_to_raw(user: User) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role.value,
    }


def user_from_raw(raw: dict) -> User:
    # Credentials and profile pictures from older backups are dropped.
    return User(
        id=str(raw["id"]),
        name=raw["name"],
        email=raw["email"],
        role=Role(raw.get("role", Role.OPERATOR.value)),
    )


# --- AuditEntry ----------------------------------------------------------------


def audit_to_raw(entry: AuditEntry) -> dict:
    return {
        "id": entry.id,
        "timestamp": entry.timestamp.isoformat(),
        "userId": entry.user_id,
        "userName": entry.user_name,
        "action": entry.action,
    }


def audit_from_raw(raw: dict) -> AuditEntry:
    timestamp = str(raw["timestamp"]).replace("Z", "+00:00")
    return AuditEntry(
        id=str(raw["id"]),
        timestamp=datetime.fromisoformat(timestamp),
        user_id=str(raw["userId"]),
        user_name=raw["userName"],
        action=raw["action"],
    )
