from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, HTTPException, Request

from tracker.api.middleware import REQUEST_CONTEXT_STATE_KEY
from tracker.application.dto.request_context import RequestContext
from tracker.application.ports.issues_port import IssuesPort
from tracker.application.ports.password_hasher_port import PasswordHasherPort
from tracker.application.ports.users_port import UsersPort
from tracker.application.services.access_gate import AccessGate
from tracker.application.services.session_manager import SessionManager, SessionSettings
from tracker.application.use_cases.create_issue import CreateIssueUseCase
from tracker.application.use_cases.delete_issue import DeleteIssueUseCase
from tracker.application.use_cases.get_issue import GetIssueUseCase
from tracker.application.use_cases.list_issues import ListIssuesUseCase
from tracker.application.use_cases.sign_in import SignInUseCase
from tracker.application.use_cases.sign_out import SignOutUseCase
from tracker.application.use_cases.sign_up import SignUpUseCase
from tracker.application.use_cases.update_issue import UpdateIssueUseCase
from tracker.domain.entities.user import User
from tracker.infrastructure.db.engine import get_engine
from tracker.infrastructure.db.repositories.accounts_repository import SqlAccountsRepository
from tracker.infrastructure.db.repositories.issues_repository import SqlIssuesRepository
from tracker.infrastructure.security.password_hasher import PasswordHasher
from tracker.infrastructure.security.token_service import JwtTokenService
from tracker.shared.config import get_settings


UNAUTHORIZED_MESSAGE = "Unauthorized access"
ACCESS_GATE_STATE_KEY = "access_gate"


def _get_db_engine():
    settings = get_settings()
    if not settings.postgres_dsn:
        raise HTTPException(status_code=500, detail="POSTGRES_DSN is required.")
    return get_engine(settings.postgres_dsn)


@lru_cache(maxsize=1)
def _get_password_hasher() -> PasswordHasher:
    return PasswordHasher()


@lru_cache(maxsize=1)
def _get_session_manager() -> SessionManager:
    settings = get_settings()
    if not settings.jwt_secret:
        raise HTTPException(status_code=500, detail="JWT_SECRET is required.")
    try:
        token_service = JwtTokenService(
            jwt_secret=settings.jwt_secret,
            ttl=settings.session_ttl,
            clock_skew=settings.session_clock_skew,
        )
    except ValueError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return SessionManager(
        token_port=token_service,
        settings=SessionSettings(
            secure_cookie=settings.is_production,
            ttl=settings.session_ttl,
            refresh_threshold=settings.session_refresh_threshold,
        ),
    )


def get_request_context(request: Request) -> RequestContext:
    ctx = getattr(request.state, REQUEST_CONTEXT_STATE_KEY, None)
    if ctx is None:
        raise HTTPException(status_code=500, detail="Session middleware is not installed.")
    return ctx


def get_users_port() -> UsersPort:
    return SqlAccountsRepository(_get_db_engine())


def get_issues_port() -> IssuesPort:
    return SqlIssuesRepository(_get_db_engine())


def get_password_hasher() -> PasswordHasherPort:
    return _get_password_hasher()


def get_session_manager() -> SessionManager:
    return _get_session_manager()


def get_sign_up_use_case(
    users_port: UsersPort = Depends(get_users_port),
    password_hasher: PasswordHasherPort = Depends(get_password_hasher),
    session_manager: SessionManager = Depends(get_session_manager),
) -> SignUpUseCase:
    return SignUpUseCase(
        users_port=users_port,
        password_hasher=password_hasher,
        session_manager=session_manager,
    )


def get_sign_in_use_case(
    users_port: UsersPort = Depends(get_users_port),
    password_hasher: PasswordHasherPort = Depends(get_password_hasher),
    session_manager: SessionManager = Depends(get_session_manager),
) -> SignInUseCase:
    return SignInUseCase(
        users_port=users_port,
        password_hasher=password_hasher,
        session_manager=session_manager,
    )


def get_sign_out_use_case(
    session_manager: SessionManager = Depends(get_session_manager),
) -> SignOutUseCase:
    return SignOutUseCase(
        session_manager=session_manager,
        sign_in_url=get_settings().sign_in_url,
    )


def get_list_issues_use_case(issues_port: IssuesPort = Depends(get_issues_port)) -> ListIssuesUseCase:
    return ListIssuesUseCase(issues_port=issues_port)


def get_get_issue_use_case(issues_port: IssuesPort = Depends(get_issues_port)) -> GetIssueUseCase:
    return GetIssueUseCase(issues_port=issues_port)


def get_create_issue_use_case(issues_port: IssuesPort = Depends(get_issues_port)) -> CreateIssueUseCase:
    return CreateIssueUseCase(issues_port=issues_port)


def get_update_issue_use_case(issues_port: IssuesPort = Depends(get_issues_port)) -> UpdateIssueUseCase:
    return UpdateIssueUseCase(issues_port=issues_port)


def get_delete_issue_use_case(issues_port: IssuesPort = Depends(get_issues_port)) -> DeleteIssueUseCase:
    return DeleteIssueUseCase(issues_port=issues_port)


def get_access_gate(
    request: Request,
    ctx: RequestContext = Depends(get_request_context),
    session_manager: SessionManager = Depends(get_session_manager),
    users_port: UsersPort = Depends(get_users_port),
) -> AccessGate:
    gate = getattr(request.state, ACCESS_GATE_STATE_KEY, None)
    if gate is None:
        gate = AccessGate(session_manager=session_manager, users_port=users_port, ctx=ctx)
        setattr(request.state, ACCESS_GATE_STATE_KEY, gate)
    return gate


def get_optional_user(gate: AccessGate = Depends(get_access_gate)) -> User | None:
    return gate.current_user()


def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(status_code=401, detail=UNAUTHORIZED_MESSAGE)
    return user
