from __future__ import annotations

import logging

from tracker.application.dto.auth import SignOutOutput
from tracker.application.dto.request_context import RequestContext
from tracker.application.services.session_manager import SessionManager


logger = logging.getLogger(__name__)


class SignOutUseCase:
    def __init__(self, *, session_manager: SessionManager, sign_in_url: str):
        self._session_manager = session_manager
        self._sign_in_url = sign_in_url

    def execute(self, ctx: RequestContext) -> SignOutOutput:
        try:
            self._session_manager.revoke(ctx)
        except Exception:  # noqa: BLE001
            logger.exception("Sign out cleanup failed; redirecting anyway.")
        return SignOutOutput(redirect_to=self._sign_in_url)
