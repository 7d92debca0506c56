"""Domain service: Audit Trail.

Every successful mutation leaves a human-readable line in the audit log,
attributed to the acting user.  Writing the log is best effort: the
mutation has already happened and stays in place even if the log write
fails, so failures are logged and not raised.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from almox.domain.model.audit import AuditEntry
from almox.domain.model.user import User
from almox.domain.repository.audit_repository import AuditRepository

logger = logging.getLogger(__name__)


class AuditTrail:

    def __init__(
        self,
        audit_repo: AuditRepository,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._audit_repo = audit_repo
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def record(self, action: str, actor: User | None) -> AuditEntry | None:
        """Append *action* on behalf of *actor*; anonymous actions are dropped."""
        if actor is None:
            logger.debug("Skipping audit entry without actor: %s", action)
            return None

        try:
            entry = AuditEntry(
                id=self._audit_repo.next_id(),
                timestamp=self._clock(),
                user_id=actor.id,
                user_name=actor.name,
                action=action,
            )
            self._audit_repo.append(entry)
        except Exception:
            logger.exception("Failed to write audit entry for user id=%s", actor.id)
            return None

        logger.info("AUDIT | %s | %s", actor.name, action)
        return entry
