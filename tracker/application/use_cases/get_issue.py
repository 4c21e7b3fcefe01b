from __future__ import annotations

from tracker.application.ports.issues_port import IssuesPort
from tracker.domain.entities.issue import Issue
from tracker.domain.entities.user import User

from .issues_common import load_owned_issue


class GetIssueUseCase:
    def __init__(self, *, issues_port: IssuesPort):
        self._issues_port = issues_port

    def execute(self, *, user: User, issue_id: int) -> Issue:
        return load_owned_issue(issues_port=self._issues_port, user=user, issue_id=issue_id)
