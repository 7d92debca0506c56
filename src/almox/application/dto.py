"""Display-ready views of items, movements and count previews.

The CLI only ever sees these: quantities are rendered without trailing
zeros and money as "R$ x.xx", so no Decimal or Money leaves the
application layer.
"""

from __future__ import annotations

from dataclasses import dataclass

from almox.domain.model.item import Item
from almox.domain.model.movement import MovementRecord
from almox.domain.model.reconciliation import Divergence, ReconciliationSummary
from almox.domain.model.value_objects import format_quantity

DELETED_ITEM = "(deleted item)"


@dataclass(frozen=True)
class ItemDTO:
    id: str
    code: str
    description: str
    category: str
    location: str
    unit: str
    quantity: str
    min_quantity: str
    unit_value: str  # formatted, e.g. "R$ 0.75"
    total_value: str
    is_low_stock: bool

    @staticmethod
    def from_item(item: Item) -> ItemDTO:
        return ItemDTO(
            id=item.id,
            code=item.code,
            description=item.description,
            category=item.category,
            location=item.location,
            unit=item.unit,
            quantity=format_quantity(item.stock_quantity),
            min_quantity=format_quantity(item.min_quantity),
            unit_value=str(item.avg_unit_value),
            total_value=str(item.total_value),
            is_low_stock=item.is_low_stock,
        )


@dataclass(frozen=True)
class MovementDTO:
    id: str
    date: str  # ISO day
    item_code: str
    item_description: str
    type: str  # "Entry" / "Exit"
    quantity: str

    @staticmethod
    def from_record(record: MovementRecord, item: Item | None) -> MovementDTO:
        return MovementDTO(
            id=record.id,
            date=record.date.isoformat(),
            item_code=item.code if item else DELETED_ITEM,
            item_description=item.description if item else DELETED_ITEM,
            type=record.direction.label,
            quantity=format_quantity(record.quantity),
        )


@dataclass(frozen=True)
class DivergenceDTO:
    code: str
    description: str
    system_quantity: str
    counted_quantity: str
    difference: str  # signed, e.g. "-50"
    financial_impact: str

    @staticmethod
    def from_divergence(divergence: Divergence) -> DivergenceDTO:
        diff = divergence.difference
        return DivergenceDTO(
            code=divergence.item.code,
            description=divergence.item.description,
            system_quantity=format_quantity(divergence.new_quantity - diff),
            counted_quantity=format_quantity(divergence.new_quantity),
            difference=("+" if diff > 0 else "-") + format_quantity(abs(diff)),
            financial_impact=f"{divergence.financial_impact:.2f}",
        )


@dataclass(frozen=True)
class CountPreviewDTO:
    """What the operator confirms before an inventory count is committed."""

    counted_items: int
    visible_items: int
    progress: str  # percent, one decimal
    divergences: list[DivergenceDTO]
    total_adjustment_value: str

    @staticmethod
    def build(
        summary: ReconciliationSummary, visible_items: int, divergences: list[Divergence]
    ) -> CountPreviewDTO:
        return CountPreviewDTO(
            counted_items=summary.counted_items_count,
            visible_items=visible_items,
            progress=f"{summary.progress:.1f}",
            divergences=[DivergenceDTO.from_divergence(d) for d in divergences],
            total_adjustment_value=f"{summary.total_adjustment_value:.2f}",
        )
