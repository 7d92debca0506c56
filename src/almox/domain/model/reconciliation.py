"""Reconciliation session — one physical counting pass over the warehouse.

The session only remembers what the operator typed.  Nothing is parsed or
validated until divergences are computed, and nothing reaches the ledger
until the session is committed.

State machine::

    IDLE -> COUNTING -> CONFIRM_PENDING -> COMMITTED
                  \\             |
                   +-----> CANCELLED
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum

from almox.domain.exceptions import ValidationError
from almox.domain.model.item import Item


class SessionState(Enum):
    IDLE = "IDLE"
    COUNTING = "COUNTING"
    CONFIRM_PENDING = "CONFIRM_PENDING"
    COMMITTED = "COMMITTED"
    CANCELLED = "CANCELLED"


def parse_count(raw: str | None) -> Decimal | None:
    """Return the counted quantity, or None when the input is not a usable count.

    Blank, non-numeric, non-finite and negative inputs all mean "not counted".
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite() or value < 0:
        return None
    return value


@dataclass(frozen=True)
class Divergence:
    """A counted item whose physical quantity differs from the system."""

    item: Item
    new_quantity: Decimal
    difference: Decimal

    @property
    def financial_impact(self) -> Decimal:
        return self.difference * self.item.avg_unit_value.amount


@dataclass(frozen=True)
class ReconciliationSummary:
    counted_items_count: int
    progress: Decimal
    divergence_count: int
    total_adjustment_value: Decimal


@dataclass
class ReconciliationSession:
    """Raw counted values keyed by item id, plus the session state."""

    counted: dict[str, str] = field(default_factory=dict)
    state: SessionState = SessionState.IDLE

    # --- Counting -------------------------------------------------------------

    def set_counted(self, item_id: str, raw_value: str) -> None:
        """Store operator input verbatim; a later call for the same item wins."""
        self._assert_open()
        self.counted[item_id] = raw_value
        self.state = SessionState.COUNTING

    # --- Transitions ----------------------------------------------------------

    def request_commit(self) -> None:
        if self.state is not SessionState.COUNTING:
            raise ValidationError(
                f"Cannot request commit: session is {self.state.value}, "
                f"expected COUNTING"
            )
        self.state = SessionState.CONFIRM_PENDING

    def mark_committed(self) -> None:
        if self.state is not SessionState.CONFIRM_PENDING:
            raise ValidationError(
                f"Cannot commit: session is {self.state.value}, "
                f"expected CONFIRM_PENDING"
            )
        self.counted.clear()
        self.state = SessionState.COMMITTED

    def cancel(self) -> None:
        self._assert_open()
        self.counted.clear()
        self.state = SessionState.CANCELLED

    @property
    def is_open(self) -> bool:
        return self.state in (
            SessionState.IDLE,
            SessionState.COUNTING,
            SessionState.CONFIRM_PENDING,
        )

    def _assert_open(self) -> None:
        if not self.is_open:
            raise ValidationError(f"Session already {self.state.value.lower()}")
