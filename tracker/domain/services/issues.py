from __future__ import annotations

from tracker.domain.entities.issue import ISSUE_PRIORITIES, ISSUE_STATUSES


TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100


def validate_issue_fields(
    *,
    title: str | None,
    status: str | None,
    priority: str | None,
    partial: bool = False,
) -> dict[str, list[str]]:
    """Checks issue fields; with ``partial`` only the provided ones are checked."""
    errors: dict[str, list[str]] = {}

    if title is not None or not partial:
        value = (title or "").strip()
        if len(value) < TITLE_MIN_LENGTH:
            errors["title"] = [f"Title must be at least {TITLE_MIN_LENGTH} characters"]
        elif len(value) > TITLE_MAX_LENGTH:
            errors["title"] = [f"Title must be less than {TITLE_MAX_LENGTH} characters"]

    if status is not None and status not in ISSUE_STATUSES:
        errors["status"] = ["Please select a valid status"]

    if priority is not None and priority not in ISSUE_PRIORITIES:
        errors["priority"] = ["Please select a valid priority"]

    return errors
