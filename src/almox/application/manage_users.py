"""Application services: user management use cases."""

from __future__ import annotations

import logging

from almox.domain.exceptions import NotFoundError, ValidationError
from almox.domain.model.user import Role, User
from almox.domain.repository.audit_repository import AuditRepository
from almox.domain.repository.user_repository import UserRepository
from almox.domain.service.audit_trail import AuditTrail

logger = logging.getLogger(__name__)


def parse_role(raw: str | None) -> Role:
    if raw is None:
        return Role.OPERATOR
    for role in Role:
        if role.value.lower() == raw.strip().lower():
            return role
    raise ValidationError(f"Unknown role '{raw}' (expected Admin or Operator)")


def resolve_actor(user_repo: UserRepository, actor_id: str | None) -> User | None:
    """The user performing the current command, if known."""
    if not actor_id:
        return None
    actor = user_repo.get_by_id(actor_id)
    if actor is None:
        logger.warning("Acting user id=%s not found; actions will not be audited", actor_id)
    return actor


class _UserHandler:

    def __init__(
        self, user_repo: UserRepository, audit_repo: AuditRepository | None = None
    ) -> None:
        self._user_repo = user_repo
        self._audit = AuditTrail(audit_repo) if audit_repo is not None else None

    def _require(self, user_id: str) -> User:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with ID '{user_id}' not found")
        return user

    def _record(self, action: str, actor: User | None) -> None:
        if self._audit is not None:
            self._audit.record(action, actor)


class AddUserHandler(_UserHandler):

    def handle(
        self, name: str, email: str, role: str | None = None, actor: User | None = None
    ) -> User:
        user = User.create(self._user_repo.next_id(), name, email, parse_role(role))
        self._user_repo.save(user)
        self._record(f"Created user {user.name} ({user.role.value}).", actor)
        return user


class UpdateUserHandler(_UserHandler):

    def handle(
        self,
        user_id: str,
        name: str | None = None,
        email: str | None = None,
        role: str | None = None,
        actor: User | None = None,
    ) -> User:
        current = self._require(user_id)
        user = User.create(
            current.id,
            name if name is not None else current.name,
            email if email is not None else current.email,
            parse_role(role) if role is not None else current.role,
        )
        self._user_repo.save(user)
        self._record(f"Edited user {user.name}.", actor)
        return user


class DeleteUserHandler(_UserHandler):

    def handle(self, user_id: str, actor: User | None = None) -> User:
        user = self._require(user_id)
        self._user_repo.delete(user.id)
        self._record(f"Deleted user {user.name}.", actor)
        return user
