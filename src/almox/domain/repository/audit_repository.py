"""Abstract repository for the audit log."""

from __future__ import annotations

from abc import ABC, abstractmethod

from almox.domain.model.audit import AuditEntry


class AuditRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique log entry ID."""

    @abstractmethod
    def append(self, entry: AuditEntry) -> None:
        """Add an entry to the log."""

    @abstractmethod
    def list_all(self) -> list[AuditEntry]:
        """Return every entry, newest first."""
