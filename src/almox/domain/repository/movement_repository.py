"""Abstract repository for movement records (append-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from almox.domain.model.movement import MovementRecord


class MovementRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique movement ID."""

    @abstractmethod
    def append(self, record: MovementRecord) -> None:
        """Add a record to the end of the history."""

    @abstractmethod
    def list_all(self) -> list[MovementRecord]:
        """Return the full history in insertion order."""

    @abstractmethod
    def list_for_item(self, item_id: str) -> list[MovementRecord]:
        """Return every record that references *item_id*."""

    @abstractmethod
    def replace_all(self, records: list[MovementRecord]) -> None:
        """Swap the whole history for *records* (bulk restore)."""
