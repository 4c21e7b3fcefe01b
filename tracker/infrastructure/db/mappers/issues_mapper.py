from __future__ import annotations

from typing import Any, Mapping

from tracker.domain.entities.issue import Issue
from tracker.infrastructure.db.mappers.common import as_datetime, as_str


def map_row_to_issue(row: Mapping[str, Any]) -> Issue:
    return Issue(
        id=int(row["id"]),
        title=row["title"],
        description=row.get("description"),
        status=row["status"],
        priority=row["priority"],
        user_id=as_str(row["user_id"]),
        created_at=as_datetime(row["created_at"]),
        updated_at=as_datetime(row["updated_at"]),
    )
