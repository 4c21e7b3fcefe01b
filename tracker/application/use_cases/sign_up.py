from __future__ import annotations

from uuid import uuid4

from tracker.application.dto.auth import AuthUserOutput, SignUpInput
from tracker.application.dto.request_context import RequestContext
from tracker.application.ports.password_hasher_port import PasswordHasherPort
from tracker.application.ports.users_port import UsersPort
from tracker.application.services.session_manager import SessionManager
from tracker.domain.exceptions import CredentialsValidationError, EmailAlreadyExistsError
from tracker.domain.services.credentials import validate_sign_up

from .auth_common import EMAIL_ALREADY_EXISTS_MESSAGE, build_auth_user_output, utcnow


class SignUpUseCase:
    def __init__(
        self,
        *,
        users_port: UsersPort,
        password_hasher: PasswordHasherPort,
        session_manager: SessionManager,
    ):
        self._users_port = users_port
        self._password_hasher = password_hasher
        self._session_manager = session_manager

    def execute(self, ctx: RequestContext, command: SignUpInput) -> AuthUserOutput:
        errors = validate_sign_up(
            email=command.email,
            password=command.password,
            confirm_password=command.confirm_password,
        )
        if errors:
            raise CredentialsValidationError(errors)

        # Fast path only; create_user raises the same error when the unique
        # constraint on email rejects a concurrent duplicate.
        if self._users_port.get_user_by_email(email=command.email) is not None:
            raise EmailAlreadyExistsError(EMAIL_ALREADY_EXISTS_MESSAGE)

        password_hash = self._password_hasher.hash(command.password)
        user = self._users_port.create_user(
            user_id=str(uuid4()),
            email=command.email,
            password_hash=password_hash,
            created_at=utcnow(),
        )

        self._session_manager.issue(ctx, user_id=user.id)
        return build_auth_user_output(user)
