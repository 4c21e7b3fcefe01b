from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

from tracker.application.dto.request_context import RequestContext
from tracker.application.ports.token_port import TokenPort
from tracker.domain.entities.session import SessionClaims


logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class SessionSettings:
    secure_cookie: bool
    cookie_name: str = "auth_token"
    ttl: timedelta = timedelta(days=7)
    refresh_threshold: timedelta = timedelta(hours=24)
    cookie_path: str = "/"
    same_site: str = "lax"

    @property
    def max_age_seconds(self) -> int:
        return int(self.ttl.total_seconds())


class SessionManager:
    """Owns the lifecycle of the signed session token kept in the client cookie.

    Anonymous -> Active on ``issue``; Active -> Active (refreshed) when
    ``refresh_if_needed`` finds less than ``refresh_threshold`` left;
    Active -> Anonymous on ``revoke`` or when the token expires.
    """

    def __init__(
        self,
        *,
        token_port: TokenPort,
        settings: SessionSettings,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._token_port = token_port
        self._settings = settings
        self._clock = clock

    def issue(self, ctx: RequestContext, *, user_id: str) -> str:
        signed = self._token_port.sign(user_id=user_id, now=self._clock())
        self._write_cookie(ctx, signed.token)
        return signed.token

    def resolve(self, ctx: RequestContext) -> SessionClaims | None:
        token = ctx.cookies.get(self._settings.cookie_name)
        if not token:
            return None

        claims = self._token_port.verify(token=token, now=self._clock())
        if claims is None:
            return None

        ctx.tasks.defer(lambda: self.refresh_if_needed(ctx), name="session-refresh")
        return claims

    def refresh_if_needed(self, ctx: RequestContext) -> bool:
        token = ctx.cookies.get(self._settings.cookie_name)
        if not token:
            return False

        now = self._clock()
        claims = self._token_port.verify(token=token, now=now)
        if claims is None:
            return False
        if claims.remaining_lifetime(now) >= self._settings.refresh_threshold:
            return False

        signed = self._token_port.sign(user_id=claims.user_id, now=now)
        self._write_cookie(ctx, signed.token)
        logger.info(
            "Session token refreshed user_id=%s expires_at=%s",
            claims.user_id,
            signed.claims.expires_at.isoformat(),
        )
        return True

    def revoke(self, ctx: RequestContext) -> None:
        ctx.cookies.delete(name=self._settings.cookie_name, path=self._settings.cookie_path)

    def _write_cookie(self, ctx: RequestContext, token: str) -> None:
        ctx.cookies.set(
            name=self._settings.cookie_name,
            value=token,
            max_age=self._settings.max_age_seconds,
            path=self._settings.cookie_path,
            http_only=True,
            secure=self._settings.secure_cookie,
            same_site=self._settings.same_site,
        )
