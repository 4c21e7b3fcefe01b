from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import text

from tracker.application.ports.password_hasher_port import PasswordHasherPort


logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

_DEMO_ISSUES = (
    (
        "admin",
        "Implement user authentication",
        "Set up cookie sessions and create signin/signup endpoints.",
        "done",
        "high",
    ),
    (
        "admin",
        "Design landing page",
        "Create a landing page that explains the app features.",
        "in_progress",
        "medium",
    ),
    (
        "member",
        "Add dark mode support",
        "Implement dark mode toggle and ensure the UI works in both themes.",
        "todo",
        "low",
    ),
    (
        "member",
        "Create issue management API",
        "Build endpoints for creating, updating and deleting issues.",
        "done",
        "high",
    ),
    (
        "admin",
        "Implement drag and drop for issues",
        "Add drag and drop to move issues between status columns.",
        "todo",
        "medium",
    ),
)


def seed_demo_data(engine, *, password_hasher: PasswordHasherPort) -> dict[str, str]:
    """Replaces all users and issues with two demo accounts and a few issues.

    Returns the created user ids keyed by role.
    """
    now = datetime.now(timezone.utc)
    password_hash = password_hasher.hash(DEMO_PASSWORD)
    user_ids = {"admin": str(uuid4()), "member": str(uuid4())}
    emails = {"admin": "admin@example.com", "member": "user@example.com"}

    with engine.begin() as conn:
        conn.execute(text("DELETE FROM issues"))
        conn.execute(text("DELETE FROM users"))

        for role, user_id in user_ids.items():
            conn.execute(
                text(
                    """
                    INSERT INTO users (id, email, password_hash, created_at)
                    VALUES (:id, :email, :password_hash, :created_at)
                    """
                ),
                {
                    "id": user_id,
                    "email": emails[role],
                    "password_hash": password_hash,
                    "created_at": now,
                },
            )

        for role, title, description, status, priority in _DEMO_ISSUES:
            conn.execute(
                text(
                    """
                    INSERT INTO issues (
                        title, description, status, priority, user_id, created_at, updated_at
                    ) VALUES (
                        :title, :description, :status, :priority, :user_id, :created_at, :updated_at
                    )
                    """
                ),
                {
                    "title": title,
                    "description": description,
                    "status": status,
                    "priority": priority,
                    "user_id": user_ids[role],
                    "created_at": now,
                    "updated_at": now,
                },
            )

    logger.info(
        "Seeded demo data users=%s issues=%s",
        ", ".join(emails.values()),
        len(_DEMO_ISSUES),
    )
    return user_ids


def main() -> None:
    from tracker.infrastructure.db.engine import create_schema, get_engine
    from tracker.infrastructure.security.password_hasher import PasswordHasher
    from tracker.shared.config import get_settings
    from tracker.shared.logging_setup import configure_logging

    settings = get_settings()
    configure_logging(settings.log_level)
    if not settings.postgres_dsn:
        raise SystemExit("POSTGRES_DSN is required.")

    engine = get_engine(settings.postgres_dsn)
    create_schema(engine)
    seed_demo_data(engine, password_hasher=PasswordHasher())


if __name__ == "__main__":
    main()
