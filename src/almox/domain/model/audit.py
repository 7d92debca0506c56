"""AuditEntry — one line of the append-only activity log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AuditEntry:

    id: str
    timestamp: datetime
    user_id: str
    user_name: str
    action: str
