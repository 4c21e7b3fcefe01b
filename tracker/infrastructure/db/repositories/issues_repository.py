from __future__ import annotations

from datetime import datetime

from sqlalchemy import text

from tracker.application.ports.issues_port import IssuesPort
from tracker.infrastructure.db.mappers.issues_mapper import map_row_to_issue


_ISSUE_COLUMNS = "id, title, description, status, priority, user_id, created_at, updated_at"
_UPDATABLE_COLUMNS = ("title", "description", "status", "priority")


class SqlIssuesRepository(IssuesPort):
    def __init__(self, engine):
        self._engine = engine

    def list_issues_for_user(self, *, user_id: str):
        sql = f"""
            SELECT {_ISSUE_COLUMNS}
            FROM issues
            WHERE user_id = :user_id
            ORDER BY created_at DESC, id DESC
        """
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql), {"user_id": user_id}).mappings().all()
        return [map_row_to_issue(row) for row in rows]

    def get_issue(self, *, issue_id: int):
        sql = f"""
            SELECT {_ISSUE_COLUMNS}
            FROM issues
            WHERE id = :issue_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"issue_id": issue_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_issue(row)

    def create_issue(
        self,
        *,
        title: str,
        description: str | None,
        status: str,
        priority: str,
        user_id: str,
        now: datetime,
    ):
        sql = f"""
            INSERT INTO issues (
                title, description, status, priority, user_id, created_at, updated_at
            ) VALUES (
                :title, :description, :status, :priority, :user_id, :created_at, :updated_at
            )
            RETURNING {_ISSUE_COLUMNS}
        """
        params = {
            "title": title,
            "description": description,
            "status": status,
            "priority": priority,
            "user_id": user_id,
            "created_at": now,
            "updated_at": now,
        }
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().one()
        return map_row_to_issue(row)

    def update_issue(self, *, issue_id: int, changes: dict, now: datetime):
        unknown = set(changes) - set(_UPDATABLE_COLUMNS)
        if unknown:
            raise ValueError(f"Cannot update issue columns: {sorted(unknown)}.")

        assignments = [f"{column} = :{column}" for column in _UPDATABLE_COLUMNS if column in changes]
        assignments.append("updated_at = :updated_at")
        sql = f"""
            UPDATE issues
            SET {", ".join(assignments)}
            WHERE id = :issue_id
            RETURNING {_ISSUE_COLUMNS}
        """
        params = {**changes, "updated_at": now, "issue_id": issue_id}
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().first()
        if row is None:
            return None
        return map_row_to_issue(row)

    def delete_issue(self, *, issue_id: int) -> bool:
        sql = """
            DELETE FROM issues
            WHERE id = :issue_id
        """
        with self._engine.begin() as conn:
            result = conn.execute(text(sql), {"issue_id": issue_id})
        return result.rowcount > 0
