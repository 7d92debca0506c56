"""Application services: item catalog use cases (add, edit, delete)."""

from __future__ import annotations

from almox.application.dto import ItemDTO
from almox.domain.model.item import ItemChanges, ItemDraft
from almox.domain.model.user import User
from almox.domain.repository.audit_repository import AuditRepository
from almox.domain.repository.item_repository import ItemRepository
from almox.domain.service.audit_trail import AuditTrail
from almox.domain.service.item_ledger import ItemLedger


def _ledger(item_repo: ItemRepository, audit_repo: AuditRepository | None) -> ItemLedger:
    audit = AuditTrail(audit_repo) if audit_repo is not None else None
    return ItemLedger(item_repo, audit)


class AddItemHandler:

    def __init__(
        self, item_repo: ItemRepository, audit_repo: AuditRepository | None = None
    ) -> None:
        self._item_repo = item_repo
        self._audit_repo = audit_repo

    def handle(self, draft: ItemDraft, actor: User | None = None) -> ItemDTO:
        """Register a new item; the code must not be in use yet."""
        item = _ledger(self._item_repo, self._audit_repo).create_item(draft, actor)
        return ItemDTO.from_item(item)


class UpdateItemHandler:

    def __init__(
        self, item_repo: ItemRepository, audit_repo: AuditRepository | None = None
    ) -> None:
        self._item_repo = item_repo
        self._audit_repo = audit_repo

    def handle(
        self, code_or_id: str, changes: ItemChanges, actor: User | None = None
    ) -> ItemDTO:
        ledger = _ledger(self._item_repo, self._audit_repo)
        item = ledger.get_item(code_or_id)
        return ItemDTO.from_item(ledger.update_item(item.id, changes, actor))


class DeleteItemHandler:

    def __init__(
        self, item_repo: ItemRepository, audit_repo: AuditRepository | None = None
    ) -> None:
        self._item_repo = item_repo
        self._audit_repo = audit_repo

    def handle(self, code_or_id: str, actor: User | None = None) -> ItemDTO:
        """Delete an item.  Its movement history is kept."""
        ledger = _ledger(self._item_repo, self._audit_repo)
        item = ledger.get_item(code_or_id)
        return ItemDTO.from_item(ledger.delete_item(item.id, actor))
