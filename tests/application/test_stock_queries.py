"""Tests for the stock list and item history queries."""

from datetime import date
from decimal import Decimal

import pytest

from almox.application.stock_queries import (
    ItemHistoryHandler,
    StockListHandler,
    filter_stock,
    total_value,
)
from almox.domain.exceptions import NotFoundError, ValidationError
from almox.domain.model.item import Item
from almox.domain.model.movement import Direction, MovementRecord
from almox.domain.model.value_objects import Money
from tests.fakes import FakeItemRepository, FakeMovementRepository


def _items(count: int = 3) -> list[Item]:
    return [
        Item(id=str(n), code=f"ITM-{n:03d}", description=f"Item {n}",
             category="EPI" if n % 2 else "Fixadores", location="A1",
             unit="UN", stock_quantity=Decimal(n * 10), min_quantity=Decimal("20"),
             avg_unit_value=Money.of("2.00"))
        for n in range(1, count + 1)
    ]


class TestFilterStock:

    def test_low(self):
        assert [i.id for i in filter_stock(_items(), status="low")] == ["1", "2"]

    def test_ok(self):
        assert [i.id for i in filter_stock(_items(), status="ok")] == ["3"]

    def test_search_code(self):
        assert [i.id for i in filter_stock(_items(), search="itm-003")] == ["3"]

    def test_category(self):
        assert [i.id for i in filter_stock(_items(), category="EPI")] == ["1", "3"]

    def test_unknown_status(self):
        with pytest.raises(ValidationError, match="Unknown stock status"):
            filter_stock(_items(), status="empty")

    def test_total_value(self):
        assert total_value(_items()) == Money.of("120.00")


class TestStockListHandler:

    def test_paginates(self):
        result = StockListHandler(FakeItemRepository(_items(12))).handle(page=2, per_page=10)
        assert result.page.total_items == 12
        assert result.page.total_pages == 2
        assert [i.code for i in result.page.items] == ["ITM-011", "ITM-012"]
        assert result.low_stock_count == 2
        assert result.total_value == "R$ 1560.00"


class TestItemHistoryHandler:

    def test_history(self):
        records = [
            MovementRecord("h1", "1", Direction.ENTRY, Decimal("5"), date(2024, 1, 2)),
            MovementRecord("h2", "2", Direction.ENTRY, Decimal("5"), date(2024, 1, 3)),
            MovementRecord("h3", "1", Direction.EXIT, Decimal("2"), date(2024, 2, 1)),
        ]
        item, history = ItemHistoryHandler(
            FakeItemRepository(_items()), FakeMovementRepository(records)
        ).handle("ITM-001")
        assert item.code == "ITM-001"
        assert [(m.date, m.type) for m in history] == [("2024-02-01", "Exit"), ("2024-01-02", "Entry")]

    def test_unknown(self):
        with pytest.raises(NotFoundError):
            ItemHistoryHandler(FakeItemRepository(), FakeMovementRepository()).handle("X")
