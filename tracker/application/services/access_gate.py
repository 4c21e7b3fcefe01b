from __future__ import annotations

import logging

from tracker.application.dto.request_context import RequestContext
from tracker.application.ports.users_port import UsersPort
from tracker.application.services.session_manager import SessionManager
from tracker.domain.entities.user import User


logger = logging.getLogger(__name__)


class AccessGate:
    """Answers "who is the current user?" for one request.

    Create one instance per request; the first lookup is cached on the
    instance so later calls do not reach the store again.
    """

    def __init__(
        self,
        *,
        session_manager: SessionManager,
        users_port: UsersPort,
        ctx: RequestContext,
    ):
        self._session_manager = session_manager
        self._users_port = users_port
        self._ctx = ctx
        self._resolved = False
        self._user: User | None = None

    def current_user(self) -> User | None:
        if not self._resolved:
            self._user = self._load()
            self._resolved = True
        return self._user

    def _load(self) -> User | None:
        claims = self._session_manager.resolve(self._ctx)
        if claims is None:
            return None
        try:
            return self._users_port.get_user_by_id(user_id=claims.user_id)
        except Exception:  # noqa: BLE001
            logger.exception("Failed to load current user user_id=%s", claims.user_id)
            return None
