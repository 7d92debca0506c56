"""Tests for settings, logging setup and the demo data."""

import logging
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from almox.domain.exceptions import ValidationError
from almox.infrastructure.config import Settings
from almox.infrastructure.logging_config import _resolve_level
from almox.infrastructure.seed import demo_history, seed
from tests.fakes import (
    FakeItemRepository,
    FakeMovementRepository,
    FakeSupplierRepository,
    FakeUserRepository,
)


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ALMOX_DATA_DIR", raising=False)
        s = Settings(_env_file=None)
        assert s.DATA_DIR == Path("data")
        assert s.PAGE_SIZE == 10

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ALMOX_PAGE_SIZE", "25")
        monkeypatch.setenv("ALMOX_DATA_DIR", "/srv/almox")
        s = Settings(_env_file=None)
        assert s.PAGE_SIZE == 25
        assert s.DATA_DIR == Path("/srv/almox")

    def test_environment_source(self):
        config = Settings.model_config
        assert config["env_prefix"] == "ALMOX_"
        assert config["env_file"] == ".env"
        assert config["case_sensitive"] is True


class TestLogLevel:

    @pytest.mark.parametrize("name,expected", [
        ("info", logging.INFO),
        (" DEBUG ", logging.DEBUG),
        ("", logging.WARNING),
        ("chatty", logging.WARNING),
    ])
    def test_resolve(self, name, expected):
        assert _resolve_level(name) == expected


class TestSeed:

    def _repos(self):
        return FakeItemRepository(), FakeMovementRepository(), FakeSupplierRepository(), FakeUserRepository()

    def test_loads_everything(self):
        items, moves, suppliers, users = self._repos()
        seed(items, moves, suppliers, users, today=date(2024, 5, 20))
        assert len(items.list_all()) == 5
        assert len(moves.list_all()) == 12
        assert len(suppliers.list_all()) == 3
        assert users.get_by_id("1").is_admin

    def test_refuses_non_empty_catalog(self):
        items, moves, suppliers, users = self._repos()
        seed(items, moves, suppliers, users)
        with pytest.raises(ValidationError, match="Catalog is not empty"):
            seed(items, moves, suppliers, users)
        seed(items, moves, suppliers, users, force=True)

    def test_history_spans_three_months(self):
        history = demo_history(date(2024, 1, 3))
        assert {r.date.month for r in history} == {11, 12, 1}
        assert all(r.date <= date(2024, 1, 3) for r in history)
        assert sum(r.quantity for r in history if r.item_id == "1") == Decimal("2000")
