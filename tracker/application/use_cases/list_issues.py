from __future__ import annotations

from tracker.application.ports.issues_port import IssuesPort
from tracker.domain.entities.issue import Issue
from tracker.domain.entities.user import User


class ListIssuesUseCase:
    def __init__(self, *, issues_port: IssuesPort):
        self._issues_port = issues_port

    def execute(self, *, user: User) -> list[Issue]:
        issues = self._issues_port.list_issues_for_user(user_id=user.id)
        return sorted(issues, key=lambda issue: issue.created_at, reverse=True)
