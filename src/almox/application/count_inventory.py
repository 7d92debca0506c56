"""Application service: Count Inventory use case.

Drives one reconciliation session: counted quantities are entered by item
code, the preview is shown for confirmation, and only then are system
quantities overwritten.
"""

from __future__ import annotations

from almox.application.dto import CountPreviewDTO, ItemDTO
from almox.domain.exceptions import ValidationError
from almox.domain.model.user import User
from almox.domain.repository.audit_repository import AuditRepository
from almox.domain.repository.item_repository import ItemRepository
from almox.domain.service.audit_trail import AuditTrail
from almox.domain.service.inventory_reconciler import InventoryReconciler, filter_items
from almox.domain.service.item_ledger import ItemLedger


class CountInventoryHandler:

    def __init__(
        self, item_repo: ItemRepository, audit_repo: AuditRepository | None = None
    ) -> None:
        audit = AuditTrail(audit_repo) if audit_repo is not None else None
        self._ledger = ItemLedger(item_repo)
        self._reconciler = InventoryReconciler(self._ledger, audit)

    def prepare(
        self,
        counts: dict[str, str],
        category: str | None = None,
        location: str | None = None,
        search: str | None = None,
    ) -> CountPreviewDTO:
        """Enter *counts* (item code or ID -> raw counted text) and ask to commit.

        Progress is measured against the items matching the filters.
        """
        if not counts:
            raise ValidationError("No counted quantities given")

        for ref, raw in counts.items():
            item = self._ledger.get_item(ref)
            self._reconciler.set_counted(item.id, raw)

        visible = filter_items(self._ledger.list_items(), category, location, search)
        summary = self._reconciler.request_commit(visible)
        return CountPreviewDTO.build(
            summary, len(visible), self._reconciler.compute_divergences()
        )

    def confirm(self, actor: User | None = None) -> list[ItemDTO]:
        """Commit the prepared count.  Irreversible."""
        return [ItemDTO.from_item(item) for item in self._reconciler.commit(actor)]

    def cancel(self) -> None:
        self._reconciler.cancel()
