from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class CreateIssueRequest(BaseModel):
    title: str = Field(default="", max_length=1000)
    description: str | None = None
    status: str | None = None
    priority: str | None = None


class UpdateIssueRequest(BaseModel):
    title: str | None = Field(default=None, max_length=1000)
    description: str | None = None
    status: str | None = None
    priority: str | None = None


class IssueResponse(BaseModel):
    id: int
    title: str
    description: str | None
    status: str
    priority: str
    user_id: str
    created_at: datetime
    updated_at: datetime


class CreateIssueResponse(BaseModel):
    message: str
    issue: IssueResponse


class DeleteIssueResponse(BaseModel):
    ok: bool
