"""JSON-file-backed implementation of AuditRepository.

New entries are written at the head of the file so the log reads
newest first.
"""

from __future__ import annotations

from pathlib import Path

from almox.application.serialization import audit_from_raw, audit_to_raw
from almox.domain.model.audit import AuditEntry
from almox.domain.repository.audit_repository import AuditRepository
from almox.infrastructure.persistence.json_file import JsonListFile


class JsonAuditRepository(AuditRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonListFile(file_path, id_prefix="log-")

    def next_id(self) -> str:
        return self._file.allocate_id()

    def append(self, entry: AuditEntry) -> None:
        records = self._file.load()
        records.insert(0, audit_to_raw(entry))
        self._file.persist(records)

    def list_all(self) -> list[AuditEntry]:
        return [audit_from_raw(raw) for raw in self._file.load()]
