"""Unhandled error middleware — last-resort 500 inside the middleware stack.

Learn: Starlette sends exception handlers registered for `Exception` to
its outermost ServerErrorMiddleware, so their responses skip every other
middleware (no X-Request-ID, no security headers). Registered first, this
middleware sits innermost and turns unclassified errors into the generic
500 before the response travels back out through the rest of the stack.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from authapi.api.errors import unhandled_error_handler


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Convert uncaught exceptions into a logged JSON 500."""

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return await unhandled_error_handler(request, exc)
