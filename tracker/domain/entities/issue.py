from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


IssueStatus = Literal["backlog", "todo", "in_progress", "done"]
IssuePriority = Literal["low", "medium", "high"]

ISSUE_STATUSES: tuple[str, ...] = ("backlog", "todo", "in_progress", "done")
ISSUE_PRIORITIES: tuple[str, ...] = ("low", "medium", "high")

DEFAULT_ISSUE_STATUS: IssueStatus = "backlog"
DEFAULT_ISSUE_PRIORITY: IssuePriority = "medium"


@dataclass(frozen=True)
class Issue:
    id: int
    title: str
    description: str | None
    status: IssueStatus
    priority: IssuePriority
    user_id: str
    created_at: datetime
    updated_at: datetime
