"""Abstract repository for the Item catalog.

The JSON implementation lives under infrastructure; tests use an
in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from almox.domain.model.item import Item


class ItemRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Issue a new item ID; IDs of deleted items are never reused."""

    @abstractmethod
    def get_by_id(self, item_id: str) -> Item | None:
        """Return an item by its ID, or None if not found."""

    @abstractmethod
    def get_by_code(self, code: str) -> Item | None:
        """Return the item whose code matches exactly, or None."""

    @abstractmethod
    def list_all(self) -> list[Item]:
        """Return every item in the catalog."""

    @abstractmethod
    def save(self, item: Item) -> None:
        """Persist a new or updated item."""

    @abstractmethod
    def delete(self, item_id: str) -> None:
        """Remove an item. Unknown IDs are ignored."""

    @abstractmethod
    def replace_all(self, items: list[Item]) -> None:
        """Swap the whole catalog for *items* (bulk restore)."""
