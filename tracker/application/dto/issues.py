from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateIssueInput:
    title: str
    description: str | None = None
    status: str | None = None
    priority: str | None = None


@dataclass(frozen=True)
class UpdateIssueInput:
    title: str | None = None
    description: str | None = None
    status: str | None = None
    priority: str | None = None
    clear_description: bool = False
