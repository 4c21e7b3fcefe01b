from __future__ import annotations

from passlib.context import CryptContext

from tracker.application.ports.password_hasher_port import PasswordHasherPort


BCRYPT_ROUNDS = 10


class PasswordHasher(PasswordHasherPort):
    """Salted bcrypt hashes; the salt and work factor live inside the hash."""

    def __init__(self, *, rounds: int = BCRYPT_ROUNDS):
        self._ctx = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plain_password: str) -> str:
        return self._ctx.hash(plain_password)

    def verify(self, plain_password: str, password_hash: str) -> bool:
        # Unknown or malformed hashes count as a mismatch.
        if not password_hash:
            return False
        try:
            return bool(self._ctx.verify(plain_password, password_hash))
        except (ValueError, TypeError):
            return False
