"""End-to-end tests for the click CLI against a temporary data directory."""

import json
import logging

import pytest
from click.testing import CliRunner

from almox.application.reports import UTF8_BOM
from almox.infrastructure.cli.main import cli
from almox.infrastructure.config import settings
from almox.infrastructure.logging_config import LOG_FORMAT


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DATA_DIR", tmp_path / "data")
    monkeypatch.setattr(settings, "ACTOR_ID", "1")
    monkeypatch.setattr(settings, "LOG_FILE_PATH", "")
    yield tmp_path / "data"
    # Drop the handlers the CLI installed; they point at the runner's closed streams.
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if getattr(handler.formatter, "_fmt", None) == LOG_FORMAT:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def runner():
    return CliRunner()


def _seed(runner):
    result = runner.invoke(cli, ["seed"])
    assert result.exit_code == 0, result.output


class TestSeed:

    def test_seed_creates_files(self, runner, data_dir):
        _seed(runner)
        items = json.loads((data_dir / "items.json").read_text(encoding="utf-8"))
        assert [i["code"] for i in items][:2] == ["PAR-001", "CHP-010"]
        assert len(json.loads((data_dir / "history.json").read_text(encoding="utf-8"))) == 12

    def test_seed_refuses_to_overwrite(self, runner):
        _seed(runner)
        result = runner.invoke(cli, ["seed"])
        assert result.exit_code == 1
        assert "Catalog is not empty" in result.output


class TestItemCommands:

    def test_list_flags_low_stock(self, runner):
        _seed(runner)
        result = runner.invoke(cli, ["item", "list", "--status", "low"])
        assert result.exit_code == 0
        assert "CHP-010" in result.output
        assert "PAR-001" not in result.output
        assert "LOW" in result.output

    def test_add_and_duplicate(self, runner):
        args = ["item", "add", "--code", "PAR-001", "--description", "Parafuso",
                "--category", "Fixadores", "--location", "A1-01", "--unit", "UN",
                "--quantity", "10", "--unit-value", "0.75"]
        result = runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        assert "Item PAR-001 created" in result.output

        result = runner.invoke(cli, args[:2] + ["--code", "par-001"] + args[4:])
        assert result.exit_code == 1
        assert "already registered" in result.output

    def test_update_and_delete(self, runner):
        _seed(runner)
        result = runner.invoke(cli, ["item", "update", "PAR-001", "--unit-value", "1.00"])
        assert result.exit_code == 0
        assert "R$ 1500.00" in result.output

        result = runner.invoke(cli, ["item", "delete", "PAR-001", "--yes"])
        assert result.exit_code == 0
        result = runner.invoke(cli, ["item", "show", "PAR-001"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_history_csv(self, runner, tmp_path):
        _seed(runner)
        target = tmp_path / "par.csv"
        result = runner.invoke(cli, ["item", "history", "PAR-001", "--csv", str(target)])
        assert result.exit_code == 0, result.output
        text = target.read_text(encoding="utf-8")
        assert text.startswith(UTF8_BOM + "Date,Type,Quantity")


class TestStockCommands:

    def test_exit_then_entry(self, runner):
        _seed(runner)
        result = runner.invoke(cli, ["stock", "exit", "--item", "PAR-001", "--quantity", "300",
                                     "--requester", "Linha 2", "--responsible", "João"])
        assert result.exit_code == 0, result.output
        assert "Stock now 1200 UN (R$ 900.00)" in result.output

        result = runner.invoke(cli, ["stock", "entry", "--code", "PAR-001", "--quantity", "500",
                                     "--supplier", "2"])
        assert result.exit_code == 0, result.output
        assert "Stock now 1700 UN (R$ 1275.00)" in result.output

    def test_exit_exceeding_stock(self, runner):
        _seed(runner)
        result = runner.invoke(cli, ["stock", "exit", "--item", "PAR-001", "--quantity", "2000",
                                     "--requester", "Linha 2", "--responsible", "João"])
        assert result.exit_code == 1
        assert "exceeds current stock" in result.output

    def test_movements_are_audited(self, runner):
        _seed(runner)
        runner.invoke(cli, ["stock", "exit", "--item", "PAR-001", "--quantity", "1",
                            "--requester", "Linha 2", "--responsible", "João"])
        result = runner.invoke(cli, ["audit", "list", "--search", "par-001"])
        assert "Registered exit of 1 UN of item PAR-001" in result.output


class TestInventoryCommands:

    def test_count_and_commit(self, runner):
        _seed(runner)
        result = runner.invoke(cli, ["inventory", "count", "--count", "CHP-010=400", "--yes"])
        assert result.exit_code == 0, result.output
        assert "-425.00" in result.output
        assert "Inventory updated: 1 item(s) adjusted." in result.output

        result = runner.invoke(cli, ["item", "show", "CHP-010"])
        assert "R$ 3400.00 total" in result.output

    def test_declined_confirmation_changes_nothing(self, runner):
        _seed(runner)
        result = runner.invoke(cli, ["inventory", "count", "--count", "CHP-010=400"], input="n\n")
        assert result.exit_code == 0
        assert "cancelled" in result.output
        result = runner.invoke(cli, ["item", "show", "CHP-010"])
        assert "450 (minimum 1000)" in result.output

    def test_bad_count_format(self, runner):
        _seed(runner)
        result = runner.invoke(cli, ["inventory", "count", "--count", "CHP-010"])
        assert result.exit_code == 2


class TestReportAndBackupCommands:

    def test_low_stock_csv(self, runner, tmp_path):
        _seed(runner)
        target = tmp_path / "low.csv"
        result = runner.invoke(cli, ["report", "low-stock", "--csv", str(target)])
        assert result.exit_code == 0
        lines = target.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith(UTF8_BOM + "Code,")
        assert {line.split(",")[0] for line in lines[1:]} == {"CHP-010", "EPI-002"}

    def test_backup_and_restore(self, runner, tmp_path):
        _seed(runner)
        result = runner.invoke(cli, ["backup", "create", "--output", str(tmp_path)])
        assert result.exit_code == 0, result.output
        backups = list(tmp_path.glob("alumasa_backup_*.json"))
        assert len(backups) == 1

        runner.invoke(cli, ["item", "delete", "PAR-001", "--yes"])
        result = runner.invoke(cli, ["backup", "restore", str(backups[0]), "--yes"])
        assert result.exit_code == 0, result.output
        assert "Restored 5 items" in result.output
        assert runner.invoke(cli, ["item", "show", "PAR-001"]).exit_code == 0

    def test_restore_rejects_garbage(self, runner, tmp_path):
        _seed(runner)
        bad = tmp_path / "bad.json"
        bad.write_text('{"items": []}', encoding="utf-8")
        result = runner.invoke(cli, ["backup", "restore", str(bad), "--yes"])
        assert result.exit_code == 1
        assert "Invalid or corrupted backup" in result.output
        assert runner.invoke(cli, ["item", "show", "PAR-001"]).exit_code == 0
