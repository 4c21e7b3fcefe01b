from __future__ import annotations

from typing import Callable, Protocol


class CookieJarPort(Protocol):
    """Cookies of the current request plus the mutations queued for its response."""

    def get(self, name: str) -> str | None:
        ...

    def set(
        self,
        *,
        name: str,
        value: str,
        max_age: int,
        path: str,
        http_only: bool,
        secure: bool,
        same_site: str,
    ) -> None:
        ...

    def delete(self, *, name: str, path: str) -> None:
        ...


class TaskDispatcherPort(Protocol):
    """Runs best-effort work after the response has been produced."""

    def defer(self, task: Callable[[], object], *, name: str) -> None:
        ...
