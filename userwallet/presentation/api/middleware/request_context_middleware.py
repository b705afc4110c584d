"""Request context middleware.

- Binds a fresh request context (request id, no ambient transaction) for
  every request, so repositories and log lines see this request only
- Honors an incoming X-Request-Id header, otherwise generates one
- Adds X-Request-Id response header
"""

from __future__ import annotations

from typing import Awaitable, Callable
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from userwallet.core.request_context import RequestContextService, request_scope

REQUEST_ID_HEADER = "X-Request-Id"


def get_request_id() -> str:
    """Return the current request ID.

    Outside a request (scripts, tests) a context is bound lazily, so this
    always returns an id.
    """
    return RequestContextService.get_request_id()


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that runs each request inside ``request_scope``."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Bind the request context and propagate the request ID.

        Args:
            request (Request): Incoming request.
            call_next (Callable[[Request], Awaitable[Response]]): Next handler.

        Returns:
            Response: Response with X-Request-Id header added.
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        # Exception handlers outside this middleware read it from state
        request.state.request_id = request_id
        async with request_scope(request_id):
            response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
