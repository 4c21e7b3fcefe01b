from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def as_str(value: Any) -> str:
    return str(value)


def as_datetime(value: Any) -> datetime:
    # Drivers without a native timestamp type (sqlite) hand back ISO strings.
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value
