from __future__ import annotations

from tracker.domain.exceptions import FieldValidationError


def validation_detail(exc: FieldValidationError) -> dict:
    return {"message": str(exc), "errors": exc.errors}
