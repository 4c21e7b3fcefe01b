from __future__ import annotations

from typing import Any, Mapping

from tracker.domain.entities.user import User
from tracker.infrastructure.db.mappers.common import as_datetime, as_str


def map_row_to_user(row: Mapping[str, Any]) -> User:
    return User(
        id=as_str(row["id"]),
        email=row["email"],
        password_hash=row["password_hash"],
        created_at=as_datetime(row["created_at"]),
    )
