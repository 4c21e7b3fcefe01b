from __future__ import annotations

from datetime import datetime, timezone

from tracker.application.dto.auth import AuthUserOutput
from tracker.domain.entities.user import User


INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
EMAIL_ALREADY_EXISTS_MESSAGE = "User with this email already exists"

# Well-formed bcrypt hash of no real password; verified against when the
# email is unknown so both sign-in failures cost one hash check.
DUMMY_PASSWORD_HASH = "$2b$10$abcdefghijklmnopqrstu.abcdefghijklmnopqrstuvwxyzABCD."


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def build_auth_user_output(user: User) -> AuthUserOutput:
    return AuthUserOutput(id=user.id, email=user.email)
