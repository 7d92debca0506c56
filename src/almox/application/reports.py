"""Application services: read-only reports over items and movement history.

Reports never mutate anything.  The plain functions work on lists so they
can be reused by the CLI and tests; ``ReportsHandler`` loads the data from
the repositories.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Callable, Iterable, Sequence

from almox.application.dto import ItemDTO, MovementDTO
from almox.application.stock_queries import total_value
from almox.domain.exceptions import ValidationError
from almox.domain.model.item import Item
from almox.domain.model.movement import Direction, MovementRecord
from almox.domain.model.value_objects import Money, format_quantity
from almox.domain.repository.item_repository import ItemRepository
from almox.domain.repository.movement_repository import MovementRepository

UTF8_BOM = "\ufeff"


# ---------------------------------------------------------------------------
# Report builders
# ---------------------------------------------------------------------------


def _in_category(items: Iterable[Item], category: str | None) -> list[Item]:
    return [item for item in items if not category or item.category == category]


def low_stock_report(items: list[Item], category: str | None = None) -> list[Item]:
    """Items at or below their minimum quantity."""
    return [item for item in _in_category(items, category) if item.is_low_stock]


def filter_history(
    items: list[Item],
    history: list[MovementRecord],
    start: date,
    end: date,
    category: str | None = None,
) -> list[MovementRecord]:
    """Records dated within [start, end], newest first.

    With a category filter, records of deleted items are left out since
    their category is unknown.
    """
    if start > end:
        raise ValidationError("Start date must not be after end date")
    by_id = {item.id: item for item in items}

    def matches(record: MovementRecord) -> bool:
        if not start <= record.date <= end:
            return False
        if category:
            item = by_id.get(record.item_id)
            return item is not None and item.category == category
        return True

    return sorted(
        (r for r in history if matches(r)), key=lambda r: r.date, reverse=True
    )


def movement_report(
    items: list[Item],
    history: list[MovementRecord],
    start: date,
    end: date,
    category: str | None = None,
) -> list[MovementDTO]:
    by_id = {item.id: item for item in items}
    return [
        MovementDTO.from_record(record, by_id.get(record.item_id))
        for record in filter_history(items, history, start, end, category)
    ]


def value_by_location(items: list[Item], category: str | None = None) -> dict[str, Money]:
    result: dict[str, Money] = {}
    for item in _in_category(items, category):
        result[item.location] = result.get(item.location, Money.zero()) + item.total_value
    return result


@dataclass(frozen=True)
class DashboardDTO:
    total_value: str
    low_stock_count: int
    total_units: str
    entries: str
    exits: str
    units_by_category: dict[str, str] = field(default_factory=dict)


def dashboard_summary(
    items: list[Item],
    history: list[MovementRecord],
    start: date,
    end: date,
    category: str | None = None,
) -> DashboardDTO:
    filtered = _in_category(items, category)
    period = filter_history(items, history, start, end, category)

    by_category: dict[str, Decimal] = {}
    for item in filtered:
        by_category[item.category] = by_category.get(item.category, Decimal("0")) + item.stock_quantity

    def moved(direction: Direction) -> Decimal:
        return sum((r.quantity for r in period if r.direction is direction), Decimal("0"))

    return DashboardDTO(
        total_value=str(total_value(filtered)),
        low_stock_count=sum(1 for item in filtered if item.is_low_stock),
        total_units=format_quantity(sum((i.stock_quantity for i in filtered), Decimal("0"))),
        entries=format_quantity(moved(Direction.ENTRY)),
        exits=format_quantity(moved(Direction.EXIT)),
        units_by_category={k: format_quantity(v) for k, v in by_category.items()},
    )


# ---------------------------------------------------------------------------
# CSV export
# ---------------------------------------------------------------------------


def to_csv(headers: Sequence[str], rows: Iterable[Sequence[object]]) -> str:
    """Comma-separated text with a UTF-8 BOM so spreadsheets pick the encoding.

    Cells holding a comma, quote or newline are quoted; quotes are doubled.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(headers)
    writer.writerows(rows)
    return UTF8_BOM + buf.getvalue().rstrip("\n")


def low_stock_csv(items: list[Item]) -> str:
    return to_csv(
        ["Code", "Description", "Current qty", "Minimum qty", "Category", "Location"],
        (
            [
                item.code,
                item.description,
                format_quantity(item.stock_quantity),
                format_quantity(item.min_quantity),
                item.category,
                item.location,
            ]
            for item in items
        ),
    )


def movement_csv(lines: list[MovementDTO]) -> str:
    return to_csv(
        ["Date", "Item code", "Description", "Type", "Quantity"],
        ([m.date, m.item_code, m.item_description, m.type, m.quantity] for m in lines),
    )


def value_by_location_csv(values: dict[str, Money]) -> str:
    return to_csv(
        ["Location", "Total value"],
        ([location, str(value)] for location, value in values.items()),
    )


def item_history_csv(lines: list[MovementDTO]) -> str:
    return to_csv(
        ["Date", "Type", "Quantity"],
        ([m.date, m.type, m.quantity] for m in lines),
    )


# ---------------------------------------------------------------------------
# Handler
# ---------------------------------------------------------------------------


def start_of_month(today: date) -> date:
    return today.replace(day=1)


class ReportsHandler:

    def __init__(
        self,
        item_repo: ItemRepository,
        movement_repo: MovementRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._item_repo = item_repo
        self._movement_repo = movement_repo
        self._today = today

    def low_stock(self, category: str | None = None) -> list[ItemDTO]:
        return [
            ItemDTO.from_item(item)
            for item in low_stock_report(self._item_repo.list_all(), category)
        ]

    def low_stock_csv(self, category: str | None = None) -> str:
        return low_stock_csv(low_stock_report(self._item_repo.list_all(), category))

    def movements(
        self,
        start: date | None = None,
        end: date | None = None,
        category: str | None = None,
    ) -> list[MovementDTO]:
        """Movements in the period; defaults to the current month up to today."""
        start, end = self._period(start, end)
        return movement_report(
            self._item_repo.list_all(), self._movement_repo.list_all(), start, end, category
        )

    def value_by_location(self, category: str | None = None) -> dict[str, str]:
        values = value_by_location(self._item_repo.list_all(), category)
        return {location: str(value) for location, value in values.items()}

    def value_by_location_csv(self, category: str | None = None) -> str:
        return value_by_location_csv(value_by_location(self._item_repo.list_all(), category))

    def dashboard(
        self,
        start: date | None = None,
        end: date | None = None,
        category: str | None = None,
    ) -> DashboardDTO:
        start, end = self._period(start, end)
        return dashboard_summary(
            self._item_repo.list_all(), self._movement_repo.list_all(), start, end, category
        )

    def _period(self, start: date | None, end: date | None) -> tuple[date, date]:
        today = self._today()
        return start or start_of_month(today), end or today
