"""Application services: Record Entry / Record Exit use cases.

Thin orchestration around the Movement Recorder domain service; the
recorder owns validation and the ledger/history consistency.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Callable

from almox.application.dto import ItemDTO, MovementDTO
from almox.domain.model.user import User
from almox.domain.repository.audit_repository import AuditRepository
from almox.domain.repository.item_repository import ItemRepository
from almox.domain.repository.movement_repository import MovementRepository
from almox.domain.repository.supplier_repository import SupplierRepository
from almox.domain.service.audit_trail import AuditTrail
from almox.domain.service.item_ledger import ItemLedger
from almox.domain.service.movement_recorder import MovementRecorder


class _MovementHandler:

    def __init__(
        self,
        item_repo: ItemRepository,
        movement_repo: MovementRepository,
        supplier_repo: SupplierRepository | None = None,
        audit_repo: AuditRepository | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        audit = AuditTrail(audit_repo) if audit_repo is not None else None
        self._ledger = ItemLedger(item_repo)
        self._recorder = MovementRecorder(
            self._ledger, movement_repo, supplier_repo, audit, today
        )


class RecordEntryHandler(_MovementHandler):

    def handle(
        self,
        item_code: str,
        quantity: str | int | Decimal,
        supplier_id: str | None = None,
        invoice: str | None = None,
        notes: str | None = None,
        actor: User | None = None,
    ) -> tuple[MovementDTO, ItemDTO]:
        record = self._recorder.record_entry(
            item_code, quantity, supplier_id, invoice, notes, actor
        )
        item = self._ledger.get_item(record.item_id)
        return MovementDTO.from_record(record, item), ItemDTO.from_item(item)


class RecordExitHandler(_MovementHandler):

    def handle(
        self,
        item_ref: str,
        quantity: str | int | Decimal,
        requester: str,
        responsible: str,
        actor: User | None = None,
    ) -> tuple[MovementDTO, ItemDTO]:
        """Issue stock for an item given by ID or exact code."""
        item = self._ledger.get_item(item_ref)
        record = self._recorder.record_exit(item.id, quantity, requester, responsible, actor)
        item = self._ledger.get_item(record.item_id)
        return MovementDTO.from_record(record, item), ItemDTO.from_item(item)
