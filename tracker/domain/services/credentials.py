from __future__ import annotations

import re


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PASSWORD_MIN_LENGTH = 6


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def _add(errors: dict[str, list[str]], field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)


def _check_email(errors: dict[str, list[str]], email: str) -> None:
    if not email:
        _add(errors, "email", "Email is required")
    elif not is_valid_email(email):
        _add(errors, "email", "Invalid email format")


def validate_sign_up(
    *,
    email: str,
    password: str,
    confirm_password: str | None,
) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    _check_email(errors, email)
    if len(password) < PASSWORD_MIN_LENGTH:
        _add(errors, "password", f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
    if confirm_password is not None:
        if not confirm_password:
            _add(errors, "confirm_password", "Please confirm your password")
        elif confirm_password != password:
            _add(errors, "confirm_password", "Passwords don't match")
    return errors


def validate_sign_in(*, email: str, password: str) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    _check_email(errors, email)
    if not password:
        _add(errors, "password", "Password is required")
    return errors
