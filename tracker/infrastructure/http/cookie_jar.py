from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from starlette.responses import Response

from tracker.application.ports.request_context_port import CookieJarPort


@dataclass(frozen=True)
class _PendingCookie:
    name: str
    value: str | None
    max_age: int
    path: str
    http_only: bool = True
    secure: bool = False
    same_site: str = "lax"

    @property
    def deleted(self) -> bool:
        return self.value is None


class RequestCookieJar(CookieJarPort):
    """Reads the incoming cookies and queues changes for the outgoing response.

    Reads see the queued changes, so a value set earlier in the same request
    is what later readers get.
    """

    def __init__(self, incoming: Mapping[str, str]):
        self._incoming = dict(incoming)
        self._pending: dict[str, _PendingCookie] = {}

    def get(self, name: str) -> str | None:
        if name in self._pending:
            return self._pending[name].value
        return self._incoming.get(name)

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
        self._pending[name] = _PendingCookie(
            name=name,
            value=value,
            max_age=max_age,
            path=path,
            http_only=http_only,
            secure=secure,
            same_site=same_site,
        )

    def delete(self, *, name: str, path: str) -> None:
        self._pending[name] = _PendingCookie(name=name, value=None, max_age=0, path=path)

    @property
    def has_changes(self) -> bool:
        return bool(self._pending)

    def apply_to(self, response: Response) -> None:
        for cookie in self._pending.values():
            if cookie.deleted:
                response.delete_cookie(key=cookie.name, path=cookie.path)
                continue
            response.set_cookie(
                key=cookie.name,
                value=cookie.value,
                max_age=cookie.max_age,
                path=cookie.path,
                httponly=cookie.http_only,
                secure=cookie.secure,
                samesite=cookie.same_site,
            )
