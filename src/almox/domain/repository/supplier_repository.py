"""Abstract repository for Supplier."""

from __future__ import annotations

from abc import ABC, abstractmethod

from almox.domain.model.supplier import Supplier


class SupplierRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Issue a new supplier ID; IDs of deleted suppliers are never reused."""

    @abstractmethod
    def get_by_id(self, supplier_id: str) -> Supplier | None:
        """Return a supplier by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Supplier]:
        """Return every supplier."""

    @abstractmethod
    def save(self, supplier: Supplier) -> None:
        """Persist a new or updated supplier."""

    @abstractmethod
    def delete(self, supplier_id: str) -> None:
        """Remove a supplier. Unknown IDs are ignored."""
