"""Application service: Backup and Restore.

A snapshot holds the full item list, movement history and user list.
Restoring replaces all three wholesale, but only after the whole snapshot
has been parsed: a malformed file leaves the current state untouched.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from almox.application.serialization import (
    item_from_raw,
    item_to_raw,
    movement_from_raw,
    movement_to_raw,
    user_from_raw,
    user_to_raw,
)
from almox.domain.exceptions import DomainException, SnapshotError
from almox.domain.model.user import User
from almox.domain.repository.audit_repository import AuditRepository
from almox.domain.repository.item_repository import ItemRepository
from almox.domain.repository.movement_repository import MovementRepository
from almox.domain.repository.user_repository import UserRepository
from almox.domain.service.audit_trail import AuditTrail

logger = logging.getLogger(__name__)

SNAPSHOT_SECTIONS = ("items", "users", "history")


@dataclass(frozen=True)
class RestoreResult:
    items: int
    users: int
    history: int
    backup_date: str | None


def parse_snapshot(text: str) -> dict:
    """Decode a backup file's text into a snapshot dict."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Backup file is not valid JSON: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise SnapshotError("Invalid or corrupted backup: expected a JSON object")
    return data


def backup_filename(now: datetime) -> str:
    return f"alumasa_backup_{now.date().isoformat()}.json"


class BackupHandler:

    def __init__(
        self,
        item_repo: ItemRepository,
        movement_repo: MovementRepository,
        user_repo: UserRepository,
        audit_repo: AuditRepository | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._item_repo = item_repo
        self._movement_repo = movement_repo
        self._user_repo = user_repo
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._audit = AuditTrail(audit_repo, self._clock) if audit_repo is not None else None

    def create_snapshot(self, actor: User | None = None) -> dict:
        snapshot = {
            "items": [item_to_raw(item) for item in self._item_repo.list_all()],
            "users": [user_to_raw(user) for user in self._user_repo.list_all()],
            "history": [movement_to_raw(r) for r in self._movement_repo.list_all()],
            "backupDate": self._clock().isoformat(),
        }
        logger.info(
            "Created snapshot: %d items, %d users, %d movements",
            len(snapshot["items"]), len(snapshot["users"]), len(snapshot["history"]),
        )
        self._record("Created a system backup.", actor)
        return snapshot

    def restore_snapshot(self, data: dict, actor: User | None = None) -> RestoreResult:
        """Replace items, history and users with the snapshot's contents.

        Records are loaded as they are (trusted bulk load): no duplicate-code
        or stock checks.  Structure and field types are checked for every
        record before anything is replaced, and stored quantities must not be
        negative.
        """
        for section in SNAPSHOT_SECTIONS:
            if not isinstance(data.get(section), list):
                raise SnapshotError(
                    "Invalid or corrupted backup: expected structure not found "
                    f"(missing '{section}' list)"
                )

        try:
            items = [item_from_raw(raw) for raw in data["items"]]
            users = [user_from_raw(raw) for raw in data["users"]]
            history = [movement_from_raw(raw) for raw in data["history"]]
        except (KeyError, TypeError, ValueError, AttributeError, DomainException) as exc:
            logger.warning("Rejected malformed snapshot: %r", exc)
            raise SnapshotError(f"Invalid or corrupted backup: {exc!r}") from exc

        self._item_repo.replace_all(items)
        self._movement_repo.replace_all(history)
        self._user_repo.replace_all(users)

        backup_date = data.get("backupDate")
        logger.info(
            "Restored snapshot from %s: %d items, %d users, %d movements",
            backup_date, len(items), len(users), len(history),
        )
        self._record(f"Restored the system from a backup of {backup_date}.", actor)
        return RestoreResult(len(items), len(users), len(history), backup_date)

    def _record(self, action: str, actor: User | None) -> None:
        if self._audit is not None:
            self._audit.record(action, actor)
