"""Application service: Audit Log query."""

from __future__ import annotations

from datetime import date, datetime, time, timezone

from almox.application.pagination import Page, paginate
from almox.domain.model.audit import AuditEntry
from almox.domain.repository.audit_repository import AuditRepository

AUDIT_PAGE_SIZE = 15


def filter_audit(
    entries: list[AuditEntry],
    start: date | None = None,
    end: date | None = None,
    user_id: str | None = None,
    search: str | None = None,
) -> list[AuditEntry]:
    """Filter log entries.  *end* includes the whole day (UTC)."""
    lower = datetime.combine(start, time.min, tzinfo=timezone.utc) if start else None
    upper = datetime.combine(end, time.max, tzinfo=timezone.utc) if end else None
    needle = (search or "").strip().lower()

    def matches(entry: AuditEntry) -> bool:
        stamp = entry.timestamp
        if stamp.tzinfo is None:
            stamp = stamp.replace(tzinfo=timezone.utc)
        if lower and stamp < lower:
            return False
        if upper and stamp > upper:
            return False
        if user_id and entry.user_id != user_id:
            return False
        if needle and needle not in entry.action.lower() and needle not in entry.user_name.lower():
            return False
        return True

    return [entry for entry in entries if matches(entry)]


class AuditLogHandler:

    def __init__(self, audit_repo: AuditRepository) -> None:
        self._audit_repo = audit_repo

    def handle(
        self,
        start: date | None = None,
        end: date | None = None,
        user_id: str | None = None,
        search: str | None = None,
        page: int = 1,
        per_page: int = AUDIT_PAGE_SIZE,
    ) -> Page[AuditEntry]:
        entries = filter_audit(self._audit_repo.list_all(), start, end, user_id, search)
        return paginate(entries, page, per_page)
