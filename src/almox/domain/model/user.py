"""User — an operator of the warehouse system.

Only identity and role are modelled; credentials are out of scope.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from almox.domain.exceptions import ValidationError


class Role(Enum):
    ADMIN = "Admin"
    OPERATOR = "Operator"


@dataclass
class User:

    id: str
    name: str
    email: str
    role: Role = Role.OPERATOR

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    @staticmethod
    def create(user_id: str, name: str, email: str, role: Role = Role.OPERATOR) -> User:
        if not name or not name.strip() or not email or not email.strip():
            raise ValidationError("Name and e-mail are required")
        return User(id=user_id, name=name.strip(), email=email.strip(), role=role)
