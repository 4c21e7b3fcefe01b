from __future__ import annotations

import base64
import binascii
import logging
from datetime import datetime, timedelta, timezone

import jwt

from tracker.application.ports.token_port import TokenPort
from tracker.domain.entities.session import SessionClaims, SignedToken


logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
MIN_SECRET_LENGTH = 32


class JwtTokenService(TokenPort):
    def __init__(
        self,
        *,
        jwt_secret: str,
        ttl: timedelta,
        clock_skew: timedelta = timedelta(seconds=15),
    ):
        if len(jwt_secret) < MIN_SECRET_LENGTH:
            raise ValueError(f"JWT_SECRET must have at least {MIN_SECRET_LENGTH} characters.")
        self._jwt_secret = jwt_secret
        self._ttl = ttl
        self._clock_skew = clock_skew

    def sign(self, *, user_id: str, now: datetime) -> SignedToken:
        issued_at = now.astimezone(timezone.utc).replace(microsecond=0)
        expires_at = issued_at + self._ttl
        payload = {
            "sub": user_id,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._jwt_secret, algorithm=JWT_ALGORITHM)
        return SignedToken(
            token=token,
            claims=SessionClaims(user_id=user_id, issued_at=issued_at, expires_at=expires_at),
        )

    def verify(self, *, token: str, now: datetime) -> SessionClaims | None:
        if not _has_canonical_signature(token):
            logger.debug("Session token rejected: non-canonical signature")
            return None

        # Time windows are checked below against the injected clock.
        try:
            payload = jwt.decode(
                token,
                self._jwt_secret,
                algorithms=[JWT_ALGORITHM],
                options={
                    "require": ["sub", "iat", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.PyJWTError as exc:
            logger.debug("Session token rejected: %s", exc)
            return None

        user_id = payload.get("sub")
        iat = payload.get("iat")
        exp = payload.get("exp")
        if not user_id or not isinstance(user_id, str):
            return None
        if not _is_timestamp(iat) or not _is_timestamp(exp):
            return None

        issued_at = datetime.fromtimestamp(iat, tz=timezone.utc)
        expires_at = datetime.fromtimestamp(exp, tz=timezone.utc)
        if now >= expires_at + self._clock_skew:
            logger.debug("Session token expired user_id=%s", user_id)
            return None
        if issued_at > now + self._clock_skew:
            logger.debug("Session token issued in the future user_id=%s", user_id)
            return None

        return SessionClaims(user_id=user_id, issued_at=issued_at, expires_at=expires_at)


def _is_timestamp(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _has_canonical_signature(token: str) -> bool:
    # Only the exact base64url encoding of the signature bytes is accepted.
    parts = token.split(".")
    if len(parts) != 3:
        return False
    segment = parts[2]
    try:
        raw = base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))
    except (binascii.Error, ValueError):
        return False
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii") == segment
