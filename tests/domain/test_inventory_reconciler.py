"""Unit tests for inventory reconciliation: divergences, summary and commit."""

from decimal import Decimal

import pytest

from almox.domain.exceptions import ValidationError
from almox.domain.model.item import Item
from almox.domain.model.reconciliation import SessionState
from almox.domain.model.user import User
from almox.domain.model.value_objects import Money
from almox.domain.service.audit_trail import AuditTrail
from almox.domain.service.inventory_reconciler import (
    InventoryReconciler,
    compute_divergences,
    compute_summary,
    filter_items,
)
from almox.domain.service.item_ledger import ItemLedger
from tests.fakes import FakeAuditRepository, FakeItemRepository

ADMIN = User("1", "Admin", "admin@alumasa.com")


def _items() -> list[Item]:
    return [
        Item(id="1", code="PAR-001", description="Parafuso Sextavado M8",
             category="Fixadores", location="A1-01", unit="UN",
             stock_quantity=Decimal("1500"), min_quantity=Decimal("500"),
             avg_unit_value=Money.of("0.75")),
        Item(id="2", code="CHP-010", description="Chapa de Aço",
             category="Matéria-prima", location="B2-05", unit="KG",
             stock_quantity=Decimal("450"), min_quantity=Decimal("1000"),
             avg_unit_value=Money.of("8.50")),
        Item(id="3", code="EPI-002", description="Luva de Proteção",
             category="EPI", location="C3-12", unit="PAR",
             stock_quantity=Decimal("80"), min_quantity=Decimal("100"),
             avg_unit_value=Money.of("12.00")),
    ]


def _setup():
    item_repo = FakeItemRepository(_items())
    audit_repo = FakeAuditRepository()
    reconciler = InventoryReconciler(ItemLedger(item_repo), AuditTrail(audit_repo))
    return reconciler, item_repo, audit_repo


class TestComputeDivergences:

    def test_shortfall(self):
        divergences = compute_divergences(_items(), {"2": "400"})
        assert len(divergences) == 1
        d = divergences[0]
        assert d.item.code == "CHP-010"
        assert d.new_quantity == Decimal("400")
        assert d.difference == Decimal("-50")
        assert d.financial_impact == Decimal("-425.00")

    def test_equal_count_is_not_a_divergence(self):
        assert compute_divergences(_items(), {"1": "1500"}) == []

    @pytest.mark.parametrize("raw", ["", "   ", "abc", "-3", "NaN"])
    def test_unusable_counts_skipped(self, raw):
        assert compute_divergences(_items(), {"1": raw}) == []

    def test_unknown_item_skipped(self):
        assert compute_divergences(_items(), {"99": "5"}) == []


class TestComputeSummary:

    def test_progress_and_totals(self):
        items = _items()
        summary = compute_summary(items, {"1": "1480", "2": "", "3": "80"})
        assert summary.counted_items_count == 2
        assert summary.progress == Decimal("2") / Decimal("3") * 100
        assert summary.divergence_count == 1
        assert summary.total_adjustment_value == Decimal("-15.00")

    def test_empty_filter(self):
        summary = compute_summary([], {})
        assert summary.progress == Decimal("0")
        assert summary.counted_items_count == 0
        assert summary.total_adjustment_value == Decimal("0")

    def test_divergences_outside_filter_still_counted(self):
        items = _items()
        visible = [items[0]]
        summary = compute_summary(visible, {"2": "400"}, items)
        assert summary.counted_items_count == 0
        assert summary.divergence_count == 1


class TestFilterItems:

    def test_sorted_by_code(self):
        assert [i.code for i in filter_items(_items())] == ["CHP-010", "EPI-002", "PAR-001"]

    def test_search_description_case_insensitive(self):
        assert [i.code for i in filter_items(_items(), search="luva")] == ["EPI-002"]

    def test_category_and_location(self):
        assert filter_items(_items(), category="EPI", location="A1-01") == []


class TestCommit:

    def test_commit_overwrites_counted_item(self):
        reconciler, item_repo, audit_repo = _setup()
        reconciler.set_counted("2", "400")
        reconciler.request_commit()
        updated = reconciler.commit(actor=ADMIN)

        item = item_repo.get_by_id("2")
        assert [i.code for i in updated] == ["CHP-010"]
        assert item.stock_quantity == Decimal("400")
        assert item.total_value == Money.of("3400.00")
        assert reconciler.session.state is SessionState.COMMITTED
        assert reconciler.session.counted == {}
        assert audit_repo.list_all()[0].action == (
            "Adjusted inventory of 1 item(s) (CHP-010: 450 -> 400)."
        )

    def test_blank_count_leaves_item_untouched(self):
        reconciler, item_repo, _ = _setup()
        reconciler.set_counted("1", "1480")
        reconciler.set_counted("2", "")
        reconciler.request_commit()
        reconciler.commit()
        assert item_repo.get_by_id("1").stock_quantity == Decimal("1480")
        assert item_repo.get_by_id("2").stock_quantity == Decimal("450")

    def test_commit_matching_counts_is_noop(self):
        reconciler, item_repo, audit_repo = _setup()
        before = {i.id: i.stock_quantity for i in item_repo.list_all()}
        for item_id, qty in before.items():
            reconciler.set_counted(item_id, str(qty))
        reconciler.request_commit()
        assert reconciler.commit(actor=ADMIN) == []
        assert {i.id: i.stock_quantity for i in item_repo.list_all()} == before
        assert audit_repo.list_all() == []

    def test_divergences_vanish_after_commit(self):
        reconciler, item_repo, _ = _setup()
        counts = {"1": "1490", "3": "95"}
        for item_id, raw in counts.items():
            reconciler.set_counted(item_id, raw)
        divergences = reconciler.compute_divergences()
        reconciler.request_commit()
        reconciler.commit()
        items = item_repo.list_all()
        for d in divergences:
            assert item_repo.get_by_id(d.item.id).stock_quantity == d.new_quantity
        assert compute_divergences(items, counts) == []

    def test_commit_requires_confirmation(self):
        reconciler, item_repo, _ = _setup()
        reconciler.set_counted("2", "400")
        with pytest.raises(ValidationError, match="expected CONFIRM_PENDING"):
            reconciler.commit()
        assert item_repo.get_by_id("2").stock_quantity == Decimal("450")

    def test_cancel_leaves_ledger_untouched(self):
        reconciler, item_repo, _ = _setup()
        reconciler.set_counted("2", "400")
        reconciler.request_commit()
        reconciler.cancel()
        assert reconciler.session.state is SessionState.CANCELLED
        assert item_repo.get_by_id("2").stock_quantity == Decimal("450")

    def test_new_session_after_commit(self):
        reconciler, _, _ = _setup()
        reconciler.set_counted("2", "400")
        reconciler.request_commit()
        reconciler.commit()
        reconciler.set_counted("1", "1")
        assert reconciler.session.state is SessionState.COUNTING
        assert reconciler.session.counted == {"1": "1"}
