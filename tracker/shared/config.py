from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    app_env: str
    app_url: str
    jwt_secret: str
    postgres_dsn: str
    session_ttl_days: int
    session_refresh_threshold_hours: int
    session_clock_skew_seconds: int
    log_level: str

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def session_ttl(self) -> timedelta:
        return timedelta(days=self.session_ttl_days)

    @property
    def session_refresh_threshold(self) -> timedelta:
        return timedelta(hours=self.session_refresh_threshold_hours)

    @property
    def session_clock_skew(self) -> timedelta:
        return timedelta(seconds=self.session_clock_skew_seconds)

    @property
    def sign_in_url(self) -> str:
        return f"{self.app_url.rstrip('/')}/signin"


def get_settings() -> Settings:
    return Settings(
        app_env=(_env("APP_ENV", "development") or "development").strip().lower(),
        app_url=_env("APP_URL", "http://localhost:3000"),
        jwt_secret=_env("JWT_SECRET", ""),
        postgres_dsn=_env("POSTGRES_DSN", ""),
        session_ttl_days=int(_env("SESSION_TTL_DAYS", "7")),
        session_refresh_threshold_hours=int(_env("SESSION_REFRESH_THRESHOLD_HOURS", "24")),
        session_clock_skew_seconds=int(_env("SESSION_CLOCK_SKEW_SECONDS", "15")),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
