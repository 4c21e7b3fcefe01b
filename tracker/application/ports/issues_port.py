from __future__ import annotations

from datetime import datetime
from typing import Protocol

from tracker.domain.entities.issue import Issue


class IssuesPort(Protocol):
    def list_issues_for_user(self, *, user_id: str) -> list[Issue]:
        ...

    def get_issue(self, *, issue_id: int) -> Issue | None:
        ...

    def create_issue(
        self,
        *,
        title: str,
        description: str | None,
        status: str,
        priority: str,
        user_id: str,
        now: datetime,
    ) -> Issue:
        ...

    def update_issue(self, *, issue_id: int, changes: dict, now: datetime) -> Issue | None:
        ...

    def delete_issue(self, *, issue_id: int) -> bool:
        ...
