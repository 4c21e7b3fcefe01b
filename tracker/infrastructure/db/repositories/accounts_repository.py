from __future__ import annotations

from datetime import datetime

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from tracker.application.ports.users_port import UsersPort
from tracker.domain.exceptions import EmailAlreadyExistsError
from tracker.infrastructure.db.mappers.accounts_mapper import map_row_to_user


class SqlAccountsRepository(UsersPort):
    def __init__(self, engine):
        self._engine = engine

    def get_user_by_id(self, *, user_id: str):
        sql = """
            SELECT id, email, password_hash, created_at
            FROM users
            WHERE id = :user_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"user_id": user_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def get_user_by_email(self, *, email: str):
        sql = """
            SELECT id, email, password_hash, created_at
            FROM users
            WHERE email = :email
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"email": email}).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def create_user(
        self,
        *,
        user_id: str,
        email: str,
        password_hash: str,
        created_at: datetime,
    ):
        sql = """
            INSERT INTO users (id, email, password_hash, created_at)
            VALUES (:id, :email, :password_hash, :created_at)
            RETURNING id, email, password_hash, created_at
        """
        params = {
            "id": user_id,
            "email": email,
            "password_hash": password_hash,
            "created_at": created_at,
        }
        try:
            with self._engine.begin() as conn:
                row = conn.execute(text(sql), params).mappings().one()
        except IntegrityError as exc:
            raise EmailAlreadyExistsError("User with this email already exists") from exc
        return map_row_to_user(row)
