"""Abstract repository for User."""

from __future__ import annotations

from abc import ABC, abstractmethod

from almox.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Issue a new user ID; IDs of deleted users are never reused."""

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""

    @abstractmethod
    def delete(self, user_id: str) -> None:
        """Remove a user. Unknown IDs are ignored."""

    @abstractmethod
    def replace_all(self, users: list[User]) -> None:
        """Swap every user for *users* (bulk restore)."""
