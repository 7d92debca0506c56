"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from pathlib import Path

from almox.application.serialization import user_from_raw, user_to_raw
from almox.domain.model.user import User
from almox.domain.repository.user_repository import UserRepository
from almox.infrastructure.persistence.json_file import JsonListFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonListFile(file_path)

    def next_id(self) -> str:
        return self._file.allocate_id()

    def get_by_id(self, user_id: str) -> User | None:
        for raw in self._file.load():
            if str(raw["id"]) == user_id:
                return user_from_raw(raw)
        return None

    def list_all(self) -> list[User]:
        return [user_from_raw(raw) for raw in self._file.load()]

    def save(self, user: User) -> None:
        records = self._file.load()
        for i, raw in enumerate(records):
            if str(raw["id"]) == user.id:
                records[i] = user_to_raw(user)
                break
        else:
            records.append(user_to_raw(user))
        self._file.persist(records)

    def delete(self, user_id: str) -> None:
        records = [raw for raw in self._file.load() if str(raw["id"]) != user_id]
        self._file.persist(records)

    def replace_all(self, users: list[User]) -> None:
        self._file.persist([user_to_raw(user) for user in users])
