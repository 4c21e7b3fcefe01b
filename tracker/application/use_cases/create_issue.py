from __future__ import annotations

from tracker.application.dto.issues import CreateIssueInput
from tracker.application.ports.issues_port import IssuesPort
from tracker.domain.entities.issue import DEFAULT_ISSUE_PRIORITY, DEFAULT_ISSUE_STATUS, Issue
from tracker.domain.entities.user import User
from tracker.domain.exceptions import IssueValidationError
from tracker.domain.services.issues import validate_issue_fields

from .auth_common import utcnow
from .issues_common import clean_description


class CreateIssueUseCase:
    def __init__(self, *, issues_port: IssuesPort):
        self._issues_port = issues_port

    def execute(self, *, user: User, command: CreateIssueInput) -> Issue:
        errors = validate_issue_fields(
            title=command.title,
            status=command.status,
            priority=command.priority,
        )
        if errors:
            raise IssueValidationError(errors)

        return self._issues_port.create_issue(
            title=command.title.strip(),
            description=clean_description(command.description),
            status=command.status or DEFAULT_ISSUE_STATUS,
            priority=command.priority or DEFAULT_ISSUE_PRIORITY,
            user_id=user.id,
            now=utcnow(),
        )
