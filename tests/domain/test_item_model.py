"""Unit tests for Item, ItemDraft and ItemChanges."""

from decimal import Decimal

import pytest

from almox.domain.exceptions import ValidationError
from almox.domain.model.item import Item, ItemChanges, ItemDraft
from almox.domain.model.value_objects import Money


def _item(**overrides) -> Item:
    fields = dict(
        id="1", code="PAR-001", description="Parafuso Sextavado M8",
        category="Fixadores", location="A1-01", unit="UN",
        stock_quantity=Decimal("1500"), min_quantity=Decimal("500"),
        avg_unit_value=Money.of("0.75"),
    )
    fields.update(overrides)
    return Item(**fields)


def _draft(**overrides) -> ItemDraft:
    fields = dict(
        code=" PAR-001 ", description="Parafuso", category="Fixadores",
        location="A1-01", unit="UN", stock_quantity="100",
    )
    fields.update(overrides)
    return ItemDraft(**fields)


class TestItem:

    def test_total_value_is_derived(self):
        item = _item()
        assert item.total_value == Money.of("1125.00")
        item.set_quantity(Decimal("1200"))
        assert item.total_value == Money.of("900.00")

    def test_low_stock_at_minimum(self):
        assert _item(stock_quantity=Decimal("500")).is_low_stock

    def test_not_low_above_minimum(self):
        assert not _item().is_low_stock

    def test_matches_code_ignores_case_and_spaces(self):
        assert _item().matches_code("  par-001 ")
        assert not _item().matches_code("PAR-002")


class TestItemDraft:

    def test_to_item_trims_fields(self):
        item = _draft(description="  Parafuso  ").to_item("7")
        assert item.id == "7"
        assert item.code == "PAR-001"
        assert item.description == "Parafuso"
        assert item.stock_quantity == Decimal("100")

    def test_defaults_for_optional_numbers(self):
        item = _draft().to_item("1")
        assert item.min_quantity == Decimal("0")
        assert item.avg_unit_value == Money.zero()
        assert item.lead_time_days == 0
        assert item.preferred_supplier_id is None

    @pytest.mark.parametrize("field,message", [
        ("code", "Code is required"),
        ("description", "Description is required"),
        ("category", "Category is required"),
        ("location", "Location is required"),
        ("unit", "Unit of measure is required"),
    ])
    def test_required_text(self, field, message):
        with pytest.raises(ValidationError, match=message):
            _draft(**{field: "   "}).to_item("1")

    def test_quantity_required(self):
        with pytest.raises(ValidationError, match="Initial quantity is required"):
            _draft(stock_quantity=None).to_item("1")

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _draft(stock_quantity="-1").to_item("1")

    def test_negative_unit_value_rejected(self):
        with pytest.raises(ValidationError, match="Average unit value cannot be negative"):
            _draft(avg_unit_value="-0.01").to_item("1")

    def test_non_numeric_minimum_rejected(self):
        with pytest.raises(ValidationError, match="Invalid minimum quantity"):
            _draft(min_quantity="lots").to_item("1")


class TestItemChanges:

    def test_empty(self):
        assert ItemChanges().is_empty()
        assert not ItemChanges(location="B1").is_empty()

    def test_apply_updates_given_fields_only(self):
        item = _item()
        ItemChanges(location=" B2-01 ", avg_unit_value="1.10").apply_to(item)
        assert item.location == "B2-01"
        assert item.avg_unit_value == Money.of("1.10")
        assert item.description == "Parafuso Sextavado M8"
        assert item.stock_quantity == Decimal("1500")

    def test_invalid_change_leaves_item_untouched(self):
        item = _item()
        with pytest.raises(ValidationError):
            ItemChanges(location="B2-01", min_quantity="-5").apply_to(item)
        assert item.location == "A1-01"

    def test_blank_text_rejected(self):
        with pytest.raises(ValidationError, match="Description cannot be blank"):
            ItemChanges(description="  ").apply_to(_item())

    def test_empty_supplier_clears_it(self):
        item = _item(preferred_supplier_id="2")
        ItemChanges(preferred_supplier_id="").apply_to(item)
        assert item.preferred_supplier_id is None
