from __future__ import annotations

from tracker.application.ports.issues_port import IssuesPort
from tracker.domain.entities.user import User
from tracker.domain.exceptions import IssueNotFoundError

from .issues_common import load_owned_issue


class DeleteIssueUseCase:
    def __init__(self, *, issues_port: IssuesPort):
        self._issues_port = issues_port

    def execute(self, *, user: User, issue_id: int) -> None:
        issue = load_owned_issue(issues_port=self._issues_port, user=user, issue_id=issue_id)
        if not self._issues_port.delete_issue(issue_id=issue.id):
            raise IssueNotFoundError("Issue not found")
