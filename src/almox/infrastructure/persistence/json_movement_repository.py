"""JSON-file-backed implementation of MovementRepository."""

from __future__ import annotations

from pathlib import Path

from almox.application.serialization import movement_from_raw, movement_to_raw
from almox.domain.model.movement import MovementRecord
from almox.domain.repository.movement_repository import MovementRepository
from almox.infrastructure.persistence.json_file import JsonListFile


class JsonMovementRepository(MovementRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonListFile(file_path, id_prefix="h")

    def next_id(self) -> str:
        return self._file.allocate_id()

    def append(self, record: MovementRecord) -> None:
        records = self._file.load()
        records.append(movement_to_raw(record))
        self._file.persist(records)

    def list_all(self) -> list[MovementRecord]:
        return [movement_from_raw(raw) for raw in self._file.load()]

    def list_for_item(self, item_id: str) -> list[MovementRecord]:
        return [
            movement_from_raw(raw)
            for raw in self._file.load()
            if str(raw["itemId"]) == item_id
        ]

    def replace_all(self, records: list[MovementRecord]) -> None:
        self._file.persist([movement_to_raw(record) for record in records])
