from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from tracker.api.deps import (
    get_create_issue_use_case,
    get_current_user,
    get_delete_issue_use_case,
    get_get_issue_use_case,
    get_list_issues_use_case,
    get_update_issue_use_case,
)
from tracker.api.routers.common import validation_detail
from tracker.api.schemas.issues import (
    CreateIssueRequest,
    CreateIssueResponse,
    DeleteIssueResponse,
    IssueResponse,
    UpdateIssueRequest,
)
from tracker.application.dto.issues import CreateIssueInput, UpdateIssueInput
from tracker.application.use_cases.create_issue import CreateIssueUseCase
from tracker.application.use_cases.delete_issue import DeleteIssueUseCase
from tracker.application.use_cases.get_issue import GetIssueUseCase
from tracker.application.use_cases.list_issues import ListIssuesUseCase
from tracker.application.use_cases.update_issue import UpdateIssueUseCase
from tracker.domain.entities.issue import Issue
from tracker.domain.entities.user import User
from tracker.domain.exceptions import (
    IssueAccessDeniedError,
    IssueNotFoundError,
    IssueValidationError,
)


router = APIRouter()


def _to_response(issue: Issue) -> IssueResponse:
    return IssueResponse(
        id=issue.id,
        title=issue.title,
        description=issue.description,
        status=issue.status,
        priority=issue.priority,
        user_id=issue.user_id,
        created_at=issue.created_at,
        updated_at=issue.updated_at,
    )


@router.get("/api/issue", response_model=list[IssueResponse])
def list_issues(
    current_user: User = Depends(get_current_user),
    use_case: ListIssuesUseCase = Depends(get_list_issues_use_case),
):
    return [_to_response(issue) for issue in use_case.execute(user=current_user)]


@router.post("/api/issue", response_model=CreateIssueResponse, status_code=201)
def create_issue(
    req: CreateIssueRequest,
    current_user: User = Depends(get_current_user),
    use_case: CreateIssueUseCase = Depends(get_create_issue_use_case),
):
    try:
        issue = use_case.execute(
            user=current_user,
            command=CreateIssueInput(
                title=req.title,
                description=req.description,
                status=req.status,
                priority=req.priority,
            ),
        )
    except IssueValidationError as exc:
        raise HTTPException(status_code=400, detail=validation_detail(exc)) from exc

    return CreateIssueResponse(message="Issue created successfully", issue=_to_response(issue))


@router.get("/api/issue/{issue_id}", response_model=IssueResponse)
def get_issue(
    issue_id: int,
    current_user: User = Depends(get_current_user),
    use_case: GetIssueUseCase = Depends(get_get_issue_use_case),
):
    try:
        issue = use_case.execute(user=current_user, issue_id=issue_id)
    except IssueNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except IssueAccessDeniedError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc

    return _to_response(issue)


@router.patch("/api/issue/{issue_id}", response_model=IssueResponse)
def update_issue(
    issue_id: int,
    req: UpdateIssueRequest,
    current_user: User = Depends(get_current_user),
    use_case: UpdateIssueUseCase = Depends(get_update_issue_use_case),
):
    try:
        issue = use_case.execute(
            user=current_user,
            issue_id=issue_id,
            command=UpdateIssueInput(
                title=req.title,
                description=req.description,
                status=req.status,
                priority=req.priority,
                clear_description="description" in req.model_fields_set and req.description is None,
            ),
        )
    except IssueNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except IssueAccessDeniedError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except IssueValidationError as exc:
        raise HTTPException(status_code=400, detail=validation_detail(exc)) from exc

    return _to_response(issue)


@router.delete("/api/issue/{issue_id}", response_model=DeleteIssueResponse)
def delete_issue(
    issue_id: int,
    current_user: User = Depends(get_current_user),
    use_case: DeleteIssueUseCase = Depends(get_delete_issue_use_case),
):
    try:
        use_case.execute(user=current_user, issue_id=issue_id)
    except IssueNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except IssueAccessDeniedError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc

    return DeleteIssueResponse(ok=True)
