from __future__ import annotations

from tracker.application.ports.issues_port import IssuesPort
from tracker.domain.entities.issue import Issue
from tracker.domain.entities.user import User
from tracker.domain.exceptions import IssueAccessDeniedError, IssueNotFoundError


def load_owned_issue(*, issues_port: IssuesPort, user: User, issue_id: int) -> Issue:
    issue = issues_port.get_issue(issue_id=issue_id)
    if issue is None:
        raise IssueNotFoundError("Issue not found")
    if issue.user_id != user.id:
        raise IssueAccessDeniedError("Unauthorized access")
    return issue


def clean_description(description: str | None) -> str | None:
    if description is None:
        return None
    return description.strip() or None
