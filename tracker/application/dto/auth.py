from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthUserOutput:
    id: str
    email: str


@dataclass(frozen=True)
class SignUpInput:
    email: str
    password: str
    confirm_password: str | None = None


@dataclass(frozen=True)
class SignInInput:
    email: str
    password: str


@dataclass(frozen=True)
class SignOutOutput:
    redirect_to: str
