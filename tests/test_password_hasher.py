from __future__ import annotations

from tracker.application.use_cases.auth_common import DUMMY_PASSWORD_HASH
from tracker.infrastructure.security.password_hasher import PasswordHasher


def test_hash_is_salted_and_verifies():
    hasher = PasswordHasher()

    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert first != second
    assert first.startswith("$2b$10$")
    assert hasher.verify("secret1", first)
    assert hasher.verify("secret1", second)


def test_wrong_password_does_not_verify():
    hasher = PasswordHasher()

    assert hasher.verify("wrong", hasher.hash("secret1")) is False


def test_malformed_hash_fails_closed():
    hasher = PasswordHasher()

    assert hasher.verify("secret1", "not-a-hash") is False
    assert hasher.verify("secret1", "") is False


def test_dummy_hash_is_checkable_and_never_matches():
    hasher = PasswordHasher()

    assert hasher.verify("secret1", DUMMY_PASSWORD_HASH) is False
    assert hasher.verify("", DUMMY_PASSWORD_HASH) is False
