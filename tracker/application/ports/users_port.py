from __future__ import annotations

from datetime import datetime
from typing import Protocol

from tracker.domain.entities.user import User


class UsersPort(Protocol):
    def get_user_by_id(self, *, user_id: str) -> User | None:
        ...

    def get_user_by_email(self, *, email: str) -> User | None:
        ...

    def create_user(
        self,
        *,
        user_id: str,
        email: str,
        password_hash: str,
        created_at: datetime,
    ) -> User:
        """Raises EmailAlreadyExistsError when the store rejects a duplicate email."""
        ...
