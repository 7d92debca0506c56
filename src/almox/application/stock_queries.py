"""Application services: stock list and item history (queries)."""

from __future__ import annotations

from dataclasses import dataclass

from almox.application.dto import ItemDTO, MovementDTO
from almox.application.pagination import Page, paginate
from almox.domain.exceptions import ValidationError
from almox.domain.model.item import Item
from almox.domain.model.value_objects import Money
from almox.domain.repository.item_repository import ItemRepository
from almox.domain.repository.movement_repository import MovementRepository
from almox.domain.service.item_ledger import ItemLedger
from almox.domain.service.movement_recorder import MovementRecorder

STATUS_LOW = "low"
STATUS_OK = "ok"


def filter_stock(
    items: list[Item],
    category: str | None = None,
    location: str | None = None,
    status: str | None = None,
    search: str | None = None,
) -> list[Item]:
    """Stock-list filter.  *status* is ``"low"`` (at or below minimum) or ``"ok"``."""
    if status not in (None, "", STATUS_LOW, STATUS_OK):
        raise ValidationError(f"Unknown stock status '{status}'")
    needle = (search or "").strip().lower()

    def matches(item: Item) -> bool:
        if category and item.category != category:
            return False
        if location and item.location != location:
            return False
        if status == STATUS_LOW and not item.is_low_stock:
            return False
        if status == STATUS_OK and item.is_low_stock:
            return False
        if needle and needle not in item.code.lower() and needle not in item.description.lower():
            return False
        return True

    return [item for item in items if matches(item)]


def total_value(items: list[Item]) -> Money:
    result = Money.zero()
    for item in items:
        result = result + item.total_value
    return result


@dataclass(frozen=True)
class StockListDTO:
    page: Page[ItemDTO]
    total_value: str
    low_stock_count: int


class StockListHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(
        self,
        category: str | None = None,
        location: str | None = None,
        status: str | None = None,
        search: str | None = None,
        page: int = 1,
        per_page: int = 10,
    ) -> StockListDTO:
        items = self._item_repo.list_all()
        filtered = filter_stock(items, category, location, status, search)
        dtos = [ItemDTO.from_item(item) for item in filtered]
        return StockListDTO(
            page=paginate(dtos, page, per_page),
            total_value=str(total_value(filtered)),
            low_stock_count=sum(1 for item in items if item.is_low_stock),
        )


class ItemHistoryHandler:

    def __init__(self, item_repo: ItemRepository, movement_repo: MovementRepository) -> None:
        self._item_repo = item_repo
        self._movement_repo = movement_repo

    def handle(self, code_or_id: str) -> tuple[ItemDTO, list[MovementDTO]]:
        """The item and its movements, newest first."""
        ledger = ItemLedger(self._item_repo)
        item = ledger.get_item(code_or_id)
        records = MovementRecorder(ledger, self._movement_repo).history_for(item.id)
        return ItemDTO.from_item(item), [MovementDTO.from_record(r, item) for r in records]
