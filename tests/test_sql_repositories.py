from __future__ import annotations

from datetime import timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from conftest import T0
from tracker.domain.exceptions import EmailAlreadyExistsError
from tracker.infrastructure.db.engine import create_schema
from tracker.infrastructure.db.repositories.accounts_repository import SqlAccountsRepository
from tracker.infrastructure.db.repositories.issues_repository import SqlIssuesRepository


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def accounts(engine) -> SqlAccountsRepository:
    return SqlAccountsRepository(engine)


@pytest.fixture
def issues(engine) -> SqlIssuesRepository:
    return SqlIssuesRepository(engine)


def _create_user(accounts, user_id="user-1", email="a@x.com"):
    return accounts.create_user(
        user_id=user_id,
        email=email,
        password_hash="hash",
        created_at=T0,
    )


def test_create_and_fetch_user(accounts):
    created = _create_user(accounts)

    assert created.id == "user-1"
    assert created.created_at == T0
    assert accounts.get_user_by_id(user_id="user-1") == created
    assert accounts.get_user_by_email(email="a@x.com") == created


def test_missing_user_lookups_return_none(accounts):
    assert accounts.get_user_by_id(user_id="nope") is None
    assert accounts.get_user_by_email(email="nobody@x.com") is None


def test_email_lookup_is_case_sensitive(accounts):
    _create_user(accounts)

    assert accounts.get_user_by_email(email="A@X.COM") is None


def test_unique_constraint_maps_to_email_already_exists(accounts):
    _create_user(accounts)

    with pytest.raises(EmailAlreadyExistsError):
        _create_user(accounts, user_id="user-2")

    assert accounts.get_user_by_id(user_id="user-2") is None


def test_issue_crud_round(accounts, issues):
    _create_user(accounts)
    created = issues.create_issue(
        title="Fix login",
        description=None,
        status="backlog",
        priority="high",
        user_id="user-1",
        now=T0,
    )

    assert issues.get_issue(issue_id=created.id) == created

    later = T0 + timedelta(hours=1)
    updated = issues.update_issue(
        issue_id=created.id,
        changes={"status": "done", "description": "Done"},
        now=later,
    )
    assert updated.status == "done"
    assert updated.description == "Done"
    assert updated.title == "Fix login"
    assert updated.updated_at == later

    assert issues.delete_issue(issue_id=created.id) is True
    assert issues.delete_issue(issue_id=created.id) is False
    assert issues.get_issue(issue_id=created.id) is None


def test_update_missing_issue_returns_none(issues):
    assert issues.update_issue(issue_id=42, changes={"title": "Nope"}, now=T0) is None


def test_update_rejects_unknown_columns(issues):
    with pytest.raises(ValueError):
        issues.update_issue(issue_id=1, changes={"user_id": "someone-else"}, now=T0)


def test_list_issues_for_user_newest_first(accounts, issues):
    _create_user(accounts)
    _create_user(accounts, user_id="user-2", email="b@x.com")
    for minutes, (title, user_id) in enumerate(
        [("First", "user-1"), ("Other", "user-2"), ("Second", "user-1")]
    ):
        issues.create_issue(
            title=title,
            description=None,
            status="todo",
            priority="low",
            user_id=user_id,
            now=T0 + timedelta(minutes=minutes),
        )

    titles = [issue.title for issue in issues.list_issues_for_user(user_id="user-1")]

    assert titles == ["Second", "First"]
