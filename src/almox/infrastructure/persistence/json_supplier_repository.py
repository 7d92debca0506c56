"""JSON-file-backed implementation of SupplierRepository."""

from __future__ import annotations

from pathlib import Path

from almox.application.serialization import supplier_from_raw, supplier_to_raw
from almox.domain.model.supplier import Supplier
from almox.domain.repository.supplier_repository import SupplierRepository
from almox.infrastructure.persistence.json_file import JsonListFile


class JsonSupplierRepository(SupplierRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonListFile(file_path)

    def next_id(self) -> str:
        return self._file.allocate_id()

    def get_by_id(self, supplier_id: str) -> Supplier | None:
        for raw in self._file.load():
            if str(raw["id"]) == supplier_id:
                return supplier_from_raw(raw)
        return None

    def list_all(self) -> list[Supplier]:
        return [supplier_from_raw(raw) for raw in self._file.load()]

    def save(self, supplier: Supplier) -> None:
        records = self._file.load()
        replaced = False
        for i, raw in enumerate(records):
            if str(raw["id"]) == supplier.id:
                records[i] = supplier_to_raw(supplier)
                replaced = True
                break
        if not replaced:
            records.append(supplier_to_raw(supplier))
        self._file.persist(records)

    def delete(self, supplier_id: str) -> None:
        records = [raw for raw in self._file.load() if str(raw["id"]) != supplier_id]
        self._file.persist(records)
