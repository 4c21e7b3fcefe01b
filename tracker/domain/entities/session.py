from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class SessionClaims:
    user_id: str
    issued_at: datetime
    expires_at: datetime

    def remaining_lifetime(self, now: datetime) -> timedelta:
        return self.expires_at - now


@dataclass(frozen=True)
class SignedToken:
    token: str
    claims: SessionClaims
