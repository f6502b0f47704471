"""
Bioskop API: Request ID Middleware
===================================

What:  Tags every request with a short correlation ID and echoes it back in
       the `X-Request-ID` response header.
How:   Reuses a client-supplied X-Request-ID or generates one, stores it in
       a ContextVar read by the access log and exception handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Assigns a request ID.

    Behavior:
        1. Use the client's X-Request-ID header when present
        2. Otherwise generate the first 8 hex chars of a UUID4
        3. Store in ContextVar
        4. Add to response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:8]

        request_id_var.set(rid)

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
