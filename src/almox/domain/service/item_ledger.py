"""Domain service: Item Ledger.

The ledger is the single owner of each item's quantity and valuation.
Movement recording and inventory reconciliation change quantities only
through ``apply_delta`` and ``set_quantity``; catalog maintenance goes
through ``create_item``, ``update_item`` and ``delete_item``.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from almox.domain.exceptions import DuplicateCodeError, NotFoundError, ValidationError
from almox.domain.model.item import Item, ItemChanges, ItemDraft
from almox.domain.model.user import User
from almox.domain.repository.item_repository import ItemRepository
from almox.domain.service.audit_trail import AuditTrail

logger = logging.getLogger(__name__)


class ItemLedger:

    def __init__(self, item_repo: ItemRepository, audit: AuditTrail | None = None) -> None:
        self._item_repo = item_repo
        self._audit = audit

    # --- Queries --------------------------------------------------------------

    def get_item(self, code_or_id: str) -> Item:
        """Resolve by ID first, then by exact code."""
        item = self._item_repo.get_by_id(code_or_id) or self._item_repo.get_by_code(
            code_or_id
        )
        if item is None:
            raise NotFoundError(f"Item '{code_or_id}' not found")
        return item

    def find_by_code(self, code: str) -> Item | None:
        return self._item_repo.get_by_code(code)

    def list_items(self) -> list[Item]:
        return self._item_repo.list_all()

    # --- Quantity mutations ---------------------------------------------------

    def apply_delta(self, item_id: str, signed_quantity: Decimal) -> Item:
        """Add *signed_quantity* to the item's stock.

        Sign and magnitude are the caller's responsibility.
        """
        item = self._require(item_id)
        item.set_quantity(item.stock_quantity + signed_quantity)
        self._item_repo.save(item)
        logger.info(
            "Applied delta %s to item %s (now %s)",
            signed_quantity, item.code, item.stock_quantity,
        )
        return item

    def set_quantity(self, item_id: str, new_quantity: Decimal) -> Item:
        """Overwrite the item's stock with *new_quantity*."""
        item = self._require(item_id)
        previous = item.stock_quantity
        item.set_quantity(new_quantity)
        self._item_repo.save(item)
        logger.info("Set quantity of item %s: %s -> %s", item.code, previous, new_quantity)
        return item

    # --- Catalog maintenance --------------------------------------------------

    def create_item(self, draft: ItemDraft, actor: User | None = None) -> Item:
        item = draft.to_item("")

        if any(existing.matches_code(item.code) for existing in self._item_repo.list_all()):
            logger.warning("Rejected duplicate item code %s", item.code)
            raise DuplicateCodeError(f"Code '{item.code}' is already registered")

        # Allocated only once the item is accepted; issued IDs are never reused.
        item.id = self._item_repo.next_id()

        self._item_repo.save(item)
        logger.info("Created item %s (id=%s)", item.code, item.id)
        self._record(f"Created item {item.code} - {item.description}.", actor)
        return item

    def update_item(
        self, item_id: str, changes: ItemChanges, actor: User | None = None
    ) -> Item:
        item = self._require(item_id)
        if changes.is_empty():
            raise ValidationError("Nothing to update")
        changes.apply_to(item)
        self._item_repo.save(item)
        logger.info("Updated item %s", item.code)
        self._record(f"Edited item {item.code} - {item.description}.", actor)
        return item

    def delete_item(self, item_id: str, actor: User | None = None) -> Item:
        """Remove the item from the catalog.

        Its movement records stay in the history and are reported as
        belonging to a deleted item.
        """
        item = self._require(item_id)
        self._item_repo.delete(item.id)
        logger.info("Deleted item %s (id=%s)", item.code, item.id)
        self._record(f"Deleted item {item.code} - {item.description}.", actor)
        return item

    # --- Internal helpers -----------------------------------------------------

    def _require(self, item_id: str) -> Item:
        item = self._item_repo.get_by_id(item_id)
        if item is None:
            logger.warning("Item id=%s not found", item_id)
            raise NotFoundError(f"Item with ID '{item_id}' not found")
        return item

    def _record(self, action: str, actor: User | None) -> None:
        if self._audit is not None:
            self._audit.record(action, actor)
