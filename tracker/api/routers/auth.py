from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse

from tracker.api.deps import (
    get_request_context,
    get_sign_in_use_case,
    get_sign_out_use_case,
    get_sign_up_use_case,
)
from tracker.api.routers.common import validation_detail
from tracker.api.schemas.auth import AuthUserResponse, SignInRequest, SignUpRequest
from tracker.application.dto.auth import SignInInput, SignUpInput
from tracker.application.dto.request_context import RequestContext
from tracker.application.use_cases.sign_in import SignInUseCase
from tracker.application.use_cases.sign_out import SignOutUseCase
from tracker.application.use_cases.sign_up import SignUpUseCase
from tracker.domain.exceptions import (
    CredentialsValidationError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
)


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/auth/signup", response_model=AuthUserResponse)
def sign_up(
    req: SignUpRequest,
    ctx: RequestContext = Depends(get_request_context),
    use_case: SignUpUseCase = Depends(get_sign_up_use_case),
):
    try:
        output = use_case.execute(
            ctx,
            SignUpInput(
                email=req.email,
                password=req.password,
                confirm_password=req.confirm_password,
            ),
        )
    except CredentialsValidationError as exc:
        raise HTTPException(status_code=400, detail=validation_detail(exc)) from exc
    except EmailAlreadyExistsError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("Sign up failed")
        raise HTTPException(
            status_code=500,
            detail="An error occurred while creating your account",
        ) from exc

    return AuthUserResponse(id=output.id, email=output.email)


@router.post("/api/auth/signin", response_model=AuthUserResponse)
def sign_in(
    req: SignInRequest,
    ctx: RequestContext = Depends(get_request_context),
    use_case: SignInUseCase = Depends(get_sign_in_use_case),
):
    try:
        output = use_case.execute(ctx, SignInInput(email=req.email, password=req.password))
    except CredentialsValidationError as exc:
        raise HTTPException(status_code=400, detail=validation_detail(exc)) from exc
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("Sign in failed")
        raise HTTPException(status_code=500, detail="An error occurred while signing in") from exc

    return AuthUserResponse(id=output.id, email=output.email)


@router.api_route("/api/auth/signout", methods=["GET", "POST"])
def sign_out(
    ctx: RequestContext = Depends(get_request_context),
    use_case: SignOutUseCase = Depends(get_sign_out_use_case),
):
    output = use_case.execute(ctx)
    return RedirectResponse(url=output.redirect_to, status_code=303)
