"""Domain service: Movement Recorder.

Records stock entries and exits.  Each operation touches two things, the
item's quantity in the ledger and the movement history, and the caller
must observe either both changes or neither:

  1. Validate: parse the quantity, resolve the item (and supplier),
     check available stock.  Nothing has been written yet.
  2. Write: apply the delta through the ledger, then append the
     record.  If the append fails the delta is reverted before the
     error propagates.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Callable

from almox.domain.exceptions import InsufficientStockError, NotFoundError, ValidationError
from almox.domain.model.item import Item
from almox.domain.model.movement import Direction, MovementRecord
from almox.domain.model.user import User
from almox.domain.model.value_objects import Quantity, format_quantity
from almox.domain.repository.movement_repository import MovementRepository
from almox.domain.repository.supplier_repository import SupplierRepository
from almox.domain.service.audit_trail import AuditTrail
from almox.domain.service.item_ledger import ItemLedger

logger = logging.getLogger(__name__)


class MovementRecorder:

    def __init__(
        self,
        ledger: ItemLedger,
        movement_repo: MovementRepository,
        supplier_repo: SupplierRepository | None = None,
        audit: AuditTrail | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._ledger = ledger
        self._movement_repo = movement_repo
        self._supplier_repo = supplier_repo
        self._audit = audit
        self._today = today

    def record_entry(
        self,
        item_code: str,
        quantity: str | int | Decimal,
        supplier_id: str | None = None,
        invoice: str | None = None,
        notes: str | None = None,
        actor: User | None = None,
    ) -> MovementRecord:
        """Receive *quantity* units of the item with exactly this code."""
        qty = Quantity.of(quantity)

        item = self._ledger.find_by_code(item_code)
        if item is None:
            logger.warning("Entry rejected: unknown item code %s", item_code)
            raise NotFoundError(f"Item code '{item_code}' not found")

        if supplier_id and self._supplier_repo is not None:
            if self._supplier_repo.get_by_id(supplier_id) is None:
                raise NotFoundError(f"Supplier with ID '{supplier_id}' not found")

        record = MovementRecord(
            id=self._movement_repo.next_id(),
            item_id=item.id,
            direction=Direction.ENTRY,
            quantity=qty.value,
            date=self._today(),
            supplier_id=supplier_id or None,
            invoice=_optional(invoice),
            notes=_optional(notes),
        )
        item = self._write(record)

        self._record(
            f"Registered entry of {qty} {item.unit} of item {item.code}.", actor
        )
        return record

    def record_exit(
        self,
        item_id: str,
        quantity: str | int | Decimal,
        requester: str,
        responsible: str,
        actor: User | None = None,
    ) -> MovementRecord:
        """Issue *quantity* units of an item; never drives stock below zero."""
        qty = Quantity.of(quantity)

        if not requester or not requester.strip():
            raise ValidationError("Requester is required")
        if not responsible or not responsible.strip():
            raise ValidationError("Responsible person is required")

        item = self._ledger.get_item(item_id)
        if qty.value > item.stock_quantity:
            logger.warning(
                "Exit rejected for %s: requested %s, in stock %s",
                item.code, qty.value, item.stock_quantity,
            )
            raise InsufficientStockError(
                f"Exit quantity ({qty}) exceeds current stock "
                f"({format_quantity(item.stock_quantity)}) of {item.code}"
            )

        record = MovementRecord(
            id=self._movement_repo.next_id(),
            item_id=item.id,
            direction=Direction.EXIT,
            quantity=qty.value,
            date=self._today(),
            requester=requester.strip(),
            responsible=responsible.strip(),
        )
        item = self._write(record)

        self._record(
            f"Registered exit of {qty} {item.unit} of item {item.code} "
            f"for {record.requester}.",
            actor,
        )
        return record

    def history_for(self, item_id: str) -> list[MovementRecord]:
        """Records of one item, newest first."""
        records = self._movement_repo.list_for_item(item_id)
        return sorted(records, key=lambda r: r.date, reverse=True)

    # --- Internal helpers -----------------------------------------------------

    def _write(self, record: MovementRecord) -> Item:
        item = self._ledger.apply_delta(record.item_id, record.signed_quantity)
        try:
            self._movement_repo.append(record)
        except Exception:
            logger.error("Appending movement %s failed; reverting stock", record.id)
            self._ledger.apply_delta(record.item_id, -record.signed_quantity)
            raise
        logger.info(
            "Recorded %s of %s for item %s",
            record.direction.value, record.quantity, item.code,
        )
        return item

    def _record(self, action: str, actor: User | None) -> None:
        if self._audit is not None:
            self._audit.record(action, actor)


def _optional(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()
