"""Tests for the audit log query."""

from datetime import date, datetime, timezone

from almox.application.audit_log import AuditLogHandler, filter_audit
from almox.domain.model.audit import AuditEntry
from tests.fakes import FakeAuditRepository


def _entries() -> list[AuditEntry]:
    return [
        AuditEntry("log-3", datetime(2024, 5, 20, 23, 59, tzinfo=timezone.utc), "2",
                   "Operador", "Registered exit of 20 UN of item PAR-001 for Linha 2."),
        AuditEntry("log-2", datetime(2024, 5, 19, 8, 0, tzinfo=timezone.utc), "1",
                   "Admin", "Created item CHP-010 - Chapa."),
        AuditEntry("log-1", datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc), "1",
                   "Admin", "Created a system backup."),
    ]


class TestFilterAudit:

    def test_end_day_inclusive(self):
        result = filter_audit(_entries(), start=date(2024, 5, 19), end=date(2024, 5, 20))
        assert [e.id for e in result] == ["log-3", "log-2"]

    def test_by_user(self):
        assert [e.id for e in filter_audit(_entries(), user_id="2")] == ["log-3"]

    def test_search_action_and_name(self):
        assert [e.id for e in filter_audit(_entries(), search="chp-010")] == ["log-2"]
        assert len(filter_audit(_entries(), search="admin")) == 2

    def test_naive_timestamps_treated_as_utc(self):
        entry = AuditEntry("log-1", datetime(2024, 5, 1, 8, 0), "1", "Admin", "x")
        assert filter_audit([entry], start=date(2024, 5, 1), end=date(2024, 5, 1)) == [entry]


class TestAuditLogHandler:

    def test_fifteen_per_page(self):
        repo = FakeAuditRepository()
        for n in range(20):
            repo.append(AuditEntry(f"log-{n}", datetime(2024, 5, 1, tzinfo=timezone.utc),
                                   "1", "Admin", f"action {n}"))
        page = AuditLogHandler(repo).handle(page=2)
        assert len(page.items) == 5
        assert page.total_pages == 2
