"""Composition root: builds the JSON repositories under ``settings.DATA_DIR``.

The data directory is read on every call so a changed setting (or a test
pointing it at a temporary folder) takes effect without re-importing.
"""

from __future__ import annotations

from pathlib import Path

from almox.application.manage_users import resolve_actor
from almox.domain.model.user import User
from almox.infrastructure.config import settings
from almox.infrastructure.persistence.json_audit_repository import JsonAuditRepository
from almox.infrastructure.persistence.json_item_repository import JsonItemRepository
from almox.infrastructure.persistence.json_movement_repository import (
    JsonMovementRepository,
)
from almox.infrastructure.persistence.json_supplier_repository import (
    JsonSupplierRepository,
)
from almox.infrastructure.persistence.json_user_repository import JsonUserRepository


def data_dir() -> Path:
    return Path(settings.DATA_DIR)


def item_repository() -> JsonItemRepository:
    return JsonItemRepository(data_dir() / "items.json")


def movement_repository() -> JsonMovementRepository:
    return JsonMovementRepository(data_dir() / "history.json")


def supplier_repository() -> JsonSupplierRepository:
    return JsonSupplierRepository(data_dir() / "suppliers.json")


def user_repository() -> JsonUserRepository:
    return JsonUserRepository(data_dir() / "users.json")


def audit_repository() -> JsonAuditRepository:
    return JsonAuditRepository(data_dir() / "audit.json")


def current_actor() -> User | None:
    return resolve_actor(user_repository(), settings.ACTOR_ID)
