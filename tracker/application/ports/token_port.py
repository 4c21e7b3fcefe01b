from __future__ import annotations

from datetime import datetime
from typing import Protocol

from tracker.domain.entities.session import SessionClaims, SignedToken


class TokenPort(Protocol):
    def sign(self, *, user_id: str, now: datetime) -> SignedToken:
        ...

    def verify(self, *, token: str, now: datetime) -> SessionClaims | None:
        ...
