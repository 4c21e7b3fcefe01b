from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from tracker.application.dto.request_context import RequestContext
from tracker.infrastructure.http.cookie_jar import RequestCookieJar
from tracker.infrastructure.http.deferred_tasks import DeferredTasks


REQUEST_CONTEXT_STATE_KEY = "request_context"


class SessionCookieMiddleware(BaseHTTPMiddleware):
    """Gives each request a cookie jar and a deferred-task queue.

    After the route handler returns, queued tasks (the session refresh) run
    and every queued cookie change is written onto the outgoing response.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        cookies = RequestCookieJar(request.cookies)
        tasks = DeferredTasks()
        setattr(request.state, REQUEST_CONTEXT_STATE_KEY, RequestContext(cookies=cookies, tasks=tasks))

        response = await call_next(request)

        tasks.run_all()
        cookies.apply_to(response)
        return response
