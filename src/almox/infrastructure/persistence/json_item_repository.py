"""JSON-file-backed implementation of ItemRepository."""

from __future__ import annotations

from pathlib import Path

from almox.application.serialization import item_from_raw, item_to_raw
from almox.domain.model.item import Item
from almox.domain.repository.item_repository import ItemRepository
from almox.infrastructure.persistence.json_file import JsonListFile


class JsonItemRepository(ItemRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonListFile(file_path)

    # --- ItemRepository interface ---------------------------------------------

    def next_id(self) -> str:
        return self._file.allocate_id()

    def get_by_id(self, item_id: str) -> Item | None:
        for raw in self._file.load():
            if str(raw["id"]) == item_id:
                return item_from_raw(raw)
        return None

    def get_by_code(self, code: str) -> Item | None:
        for raw in self._file.load():
            if raw["code"] == code:
                return item_from_raw(raw)
        return None

    def list_all(self) -> list[Item]:
        return [item_from_raw(raw) for raw in self._file.load()]

    def save(self, item: Item) -> None:
        records = self._file.load()
        replaced = False
        for i, raw in enumerate(records):
            if str(raw["id"]) == item.id:
                records[i] = item_to_raw(item)
                replaced = True
                break
        if not replaced:
            records.append(item_to_raw(item))
        self._file.persist(records)

    def delete(self, item_id: str) -> None:
        records = [raw for raw in self._file.load() if str(raw["id"]) != item_id]
        self._file.persist(records)

    def replace_all(self, items: list[Item]) -> None:
        self._file.persist([item_to_raw(item) for item in items])
