from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class FieldValidationError(DomainError):
    """Input failed validation; carries the messages per field."""

    def __init__(self, errors: dict[str, list[str]], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = errors


class CredentialsValidationError(FieldValidationError):
    """Malformed email, short password or mismatched confirmation."""


class InvalidCredentialsError(DomainError):
    """Unknown email or wrong password. Both causes share one message."""


class EmailAlreadyExistsError(DomainError):
    """A user with this email is already registered."""


class IssueValidationError(FieldValidationError):
    """Issue fields are invalid."""


class IssueNotFoundError(DomainError):
    """Requested issue does not exist."""


class IssueAccessDeniedError(DomainError):
    """Issue belongs to another user."""
