from __future__ import annotations

from fastapi import APIRouter, Depends

from tracker.api.deps import get_current_user
from tracker.api.schemas.auth import AuthUserResponse
from tracker.domain.entities.user import User


router = APIRouter()


@router.get("/api/me", response_model=AuthUserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    return AuthUserResponse(id=current_user.id, email=current_user.email)
