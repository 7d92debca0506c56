"""Domain service: Inventory Reconciler.

Compares what was physically counted against what the system holds and,
once the operator confirms, overwrites system quantities with the counts.

The pure functions ``compute_divergences`` and ``compute_summary`` carry the
arithmetic; ``InventoryReconciler`` drives one ``ReconciliationSession``
through its states and writes through the Item Ledger.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from almox.domain.exceptions import ValidationError
from almox.domain.model.item import Item
from almox.domain.model.reconciliation import (
    Divergence,
    ReconciliationSession,
    ReconciliationSummary,
    SessionState,
    parse_count,
)
from almox.domain.model.user import User
from almox.domain.model.value_objects import format_quantity
from almox.domain.service.audit_trail import AuditTrail
from almox.domain.service.item_ledger import ItemLedger

logger = logging.getLogger(__name__)


def compute_divergences(items: list[Item], counted: dict[str, str]) -> list[Divergence]:
    """Items whose count is usable and differs from the system quantity.

    Blank, non-numeric and negative counts are skipped, as are counts equal
    to the current quantity and counts for items not in *items*.
    """
    by_id = {item.id: item for item in items}
    result: list[Divergence] = []
    for item_id, raw in counted.items():
        item = by_id.get(item_id)
        new_quantity = parse_count(raw)
        if item is None or new_quantity is None:
            continue
        if new_quantity == item.stock_quantity:
            continue
        result.append(
            Divergence(
                item=item,
                new_quantity=new_quantity,
                difference=new_quantity - item.stock_quantity,
            )
        )
    return result


def compute_summary(
    filtered_items: list[Item],
    counted: dict[str, str],
    items: list[Item] | None = None,
) -> ReconciliationSummary:
    """Progress over the visible items plus the divergence totals.

    ``counted_items_count`` and ``progress`` only look at *filtered_items*;
    divergences are computed over *items* (all items) when given, so a
    filter never hides an adjustment that a commit would make.
    """
    counted_items_count = sum(
        1 for item in filtered_items if counted.get(item.id, "").strip() != ""
    )
    if filtered_items:
        progress = Decimal(counted_items_count) / Decimal(len(filtered_items)) * 100
    else:
        progress = Decimal("0")

    divergences = compute_divergences(items if items is not None else filtered_items, counted)
    total = sum((d.financial_impact for d in divergences), Decimal("0"))

    return ReconciliationSummary(
        counted_items_count=counted_items_count,
        progress=progress,
        divergence_count=len(divergences),
        total_adjustment_value=total,
    )


def filter_items(
    items: list[Item],
    category: str | None = None,
    location: str | None = None,
    search: str | None = None,
) -> list[Item]:
    """Counting-sheet filter: exact category/location, free-text search, by code."""
    needle = (search or "").strip().lower()
    result = [
        item
        for item in items
        if (not category or item.category == category)
        and (not location or item.location == location)
        and (
            not needle
            or needle in item.code.lower()
            or needle in item.description.lower()
        )
    ]
    return sorted(result, key=lambda item: item.code)


class InventoryReconciler:

    def __init__(self, ledger: ItemLedger, audit: AuditTrail | None = None) -> None:
        self._ledger = ledger
        self._audit = audit
        self.session = ReconciliationSession()

    # --- Counting -------------------------------------------------------------

    def set_counted(self, item_id: str, raw_value: str) -> None:
        if not self.session.is_open:
            self.session = ReconciliationSession()
        self.session.set_counted(item_id, raw_value)

    def compute_divergences(self) -> list[Divergence]:
        return compute_divergences(self._ledger.list_items(), self.session.counted)

    def compute_summary(self, filtered_items: list[Item] | None = None) -> ReconciliationSummary:
        items = self._ledger.list_items()
        visible = filtered_items if filtered_items is not None else items
        return compute_summary(visible, self.session.counted, items)

    # --- Transitions ----------------------------------------------------------

    def request_commit(self, filtered_items: list[Item] | None = None) -> ReconciliationSummary:
        """Move to CONFIRM_PENDING and return the summary to show the operator."""
        self.session.request_commit()
        return self.compute_summary(filtered_items)

    def commit(self, actor: User | None = None) -> list[Item]:
        """Overwrite system quantities with the counted ones.

        Irreversible: no undo log is kept.  Items without a usable count are
        left untouched.  Returns the items whose quantity changed.
        """
        if self.session.state is not SessionState.CONFIRM_PENDING:
            raise ValidationError(
                f"Cannot commit: session is {self.session.state.value}, "
                f"expected CONFIRM_PENDING"
            )

        # Resolve every adjustment before the first write.
        divergences = self.compute_divergences()

        updated: list[Item] = []
        for divergence in divergences:
            updated.append(
                self._ledger.set_quantity(divergence.item.id, divergence.new_quantity)
            )
        self.session.mark_committed()

        logger.info("Inventory count committed: %d item(s) adjusted", len(updated))
        if self._audit is not None and divergences:
            details = ", ".join(
                f"{d.item.code}: {format_quantity(d.new_quantity - d.difference)} -> "
                f"{format_quantity(d.new_quantity)}"
                for d in divergences
            )
            self._audit.record(
                f"Adjusted inventory of {len(divergences)} item(s) ({details}).", actor
            )
        return updated

    def cancel(self) -> None:
        """Abandon the session; the ledger is not touched."""
        self.session.cancel()
        logger.info("Inventory count cancelled")
