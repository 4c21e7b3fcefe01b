from __future__ import annotations

from tracker.application.dto.issues import UpdateIssueInput
from tracker.application.ports.issues_port import IssuesPort
from tracker.domain.entities.issue import Issue
from tracker.domain.entities.user import User
from tracker.domain.exceptions import IssueNotFoundError, IssueValidationError
from tracker.domain.services.issues import validate_issue_fields

from .auth_common import utcnow
from .issues_common import clean_description, load_owned_issue


class UpdateIssueUseCase:
    def __init__(self, *, issues_port: IssuesPort):
        self._issues_port = issues_port

    def execute(self, *, user: User, issue_id: int, command: UpdateIssueInput) -> Issue:
        issue = load_owned_issue(issues_port=self._issues_port, user=user, issue_id=issue_id)

        errors = validate_issue_fields(
            title=command.title,
            status=command.status,
            priority=command.priority,
            partial=True,
        )
        if errors:
            raise IssueValidationError(errors)

        changes: dict = {}
        if command.title is not None:
            changes["title"] = command.title.strip()
        if command.description is not None or command.clear_description:
            changes["description"] = clean_description(command.description)
        if command.status is not None:
            changes["status"] = command.status
        if command.priority is not None:
            changes["priority"] = command.priority
        if not changes:
            return issue

        updated = self._issues_port.update_issue(issue_id=issue.id, changes=changes, now=utcnow())
        if updated is None:
            raise IssueNotFoundError("Issue not found")
        return updated
