from __future__ import annotations

from dataclasses import dataclass

from tracker.application.ports.request_context_port import CookieJarPort, TaskDispatcherPort


@dataclass(frozen=True)
class RequestContext:
    cookies: CookieJarPort
    tasks: TaskDispatcherPort
