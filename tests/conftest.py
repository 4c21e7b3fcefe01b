from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from tracker.api import deps
from tracker.application.dto.request_context import RequestContext
from tracker.application.services.session_manager import SessionManager, SessionSettings
from tracker.domain.entities.issue import Issue
from tracker.domain.entities.user import User
from tracker.domain.exceptions import EmailAlreadyExistsError
from tracker.infrastructure.http.cookie_jar import RequestCookieJar
from tracker.infrastructure.http.deferred_tasks import DeferredTasks
from tracker.infrastructure.security.token_service import JwtTokenService


TEST_SECRET = "test-secret-that-is-at-least-32-characters-long"
T0 = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: datetime = T0):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


class FakeUsersPort:
    def __init__(self):
        self.users: dict[str, User] = {}
        self.lookups_by_id = 0
        self.fail_lookups = False

    def get_user_by_id(self, *, user_id: str) -> User | None:
        self.lookups_by_id += 1
        if self.fail_lookups:
            raise RuntimeError("store unreachable")
        return self.users.get(user_id)

    def get_user_by_email(self, *, email: str) -> User | None:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    def create_user(
        self,
        *,
        user_id: str,
        email: str,
        password_hash: str,
        created_at: datetime,
    ) -> User:
        if self.get_user_by_email(email=email) is not None:
            raise EmailAlreadyExistsError("User with this email already exists")
        user = User(id=user_id, email=email, password_hash=password_hash, created_at=created_at)
        self.users[user.id] = user
        return user


class FakeIssuesPort:
    def __init__(self):
        self.issues: dict[int, Issue] = {}
        self._next_id = 1

    def list_issues_for_user(self, *, user_id: str) -> list[Issue]:
        return [issue for issue in self.issues.values() if issue.user_id == user_id]

    def get_issue(self, *, issue_id: int) -> Issue | None:
        return self.issues.get(issue_id)

    def create_issue(
        self,
        *,
        title: str,
        description: str | None,
        status: str,
        priority: str,
        user_id: str,
        now: datetime,
    ) -> Issue:
        issue = Issue(
            id=self._next_id,
            title=title,
            description=description,
            status=status,
            priority=priority,
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )
        self.issues[issue.id] = issue
        self._next_id += 1
        return issue

    def update_issue(self, *, issue_id: int, changes: dict, now: datetime) -> Issue | None:
        issue = self.issues.get(issue_id)
        if issue is None:
            return None
        updated = replace(issue, updated_at=now, **changes)
        self.issues[issue_id] = updated
        return updated

    def delete_issue(self, *, issue_id: int) -> bool:
        return self.issues.pop(issue_id, None) is not None


class FakePasswordHasher:
    def hash(self, plain_password: str) -> str:
        return f"hashed::{plain_password}"

    def verify(self, plain_password: str, password_hash: str) -> bool:
        return password_hash == f"hashed::{plain_password}"


def make_user(user_id: str = "user-1", email: str = "a@x.com") -> User:
    return User(id=user_id, email=email, password_hash="hashed::secret1", created_at=T0)


def make_ctx(cookies: dict[str, str] | None = None) -> RequestContext:
    return RequestContext(cookies=RequestCookieJar(cookies or {}), tasks=DeferredTasks())


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def token_service() -> JwtTokenService:
    return JwtTokenService(jwt_secret=TEST_SECRET, ttl=timedelta(days=7))


@pytest.fixture
def session_manager(token_service: JwtTokenService, clock: FakeClock) -> SessionManager:
    return SessionManager(
        token_port=token_service,
        settings=SessionSettings(secure_cookie=False),
        clock=clock,
    )


@pytest.fixture
def users_port() -> FakeUsersPort:
    return FakeUsersPort()


@pytest.fixture
def issues_port() -> FakeIssuesPort:
    return FakeIssuesPort()


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def api_client(users_port, issues_port, password_hasher, session_manager):
    from tracker.main import app

    app.dependency_overrides[deps.get_users_port] = lambda: users_port
    app.dependency_overrides[deps.get_issues_port] = lambda: issues_port
    app.dependency_overrides[deps.get_password_hasher] = lambda: password_hasher
    app.dependency_overrides[deps.get_session_manager] = lambda: session_manager
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
