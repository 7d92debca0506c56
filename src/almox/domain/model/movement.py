"""MovementRecord — one entry into or exit out of stock.

Records are frozen: the movement history is an append-only ledger and a
record never changes after it has been written.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class Direction(Enum):
    ENTRY = "entry"
    EXIT = "exit"

    @property
    def sign(self) -> int:
        return 1 if self is Direction.ENTRY else -1

    @property
    def label(self) -> str:
        return "Entry" if self is Direction.ENTRY else "Exit"


@dataclass(frozen=True)
class MovementRecord:
    id: str
    item_id: str
    direction: Direction
    quantity: Decimal
    date: date
    supplier_id: str | None = None  # entries only
    invoice: str | None = None
    notes: str | None = None
    requester: str | None = None  # exits only
    responsible: str | None = None

    @property
    def signed_quantity(self) -> Decimal:
        return self.quantity * self.direction.sign
