from __future__ import annotations

from tracker.application.dto.auth import AuthUserOutput, SignInInput
from tracker.application.dto.request_context import RequestContext
from tracker.application.ports.password_hasher_port import PasswordHasherPort
from tracker.application.ports.users_port import UsersPort
from tracker.application.services.session_manager import SessionManager
from tracker.domain.exceptions import CredentialsValidationError, InvalidCredentialsError
from tracker.domain.services.credentials import validate_sign_in

from .auth_common import DUMMY_PASSWORD_HASH, INVALID_CREDENTIALS_MESSAGE, build_auth_user_output


class SignInUseCase:
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

    def execute(self, ctx: RequestContext, command: SignInInput) -> AuthUserOutput:
        errors = validate_sign_in(email=command.email, password=command.password)
        if errors:
            raise CredentialsValidationError(errors)

        user = self._users_port.get_user_by_email(email=command.email)
        if user is None:
            self._password_hasher.verify(command.password, DUMMY_PASSWORD_HASH)
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        if not self._password_hasher.verify(command.password, user.password_hash):
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        self._session_manager.issue(ctx, user_id=user.id)
        return build_auth_user_output(user)
