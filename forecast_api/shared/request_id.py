"""
Request correlation id middleware.

Assigns every request an id (taken from the incoming header when the
caller supplies one), exposes it on ``request.state.request_id`` and
echoes it back on the response.
"""

import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

DEFAULT_REQUEST_ID_HEADER = "X-Request-ID"


def new_request_id() -> str:
    return uuid.uuid4().hex


def get_request_id(request: Request) -> str:
    """Return the request's correlation id, generating one if none was set."""
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        request_id = new_request_id()
        request.state.request_id = request_id
    return request_id


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware that attaches a correlation id to each request."""

    def __init__(
        self, app: ASGIApp, header_name: str = DEFAULT_REQUEST_ID_HEADER
    ) -> None:
        super().__init__(app)
        self._header_name = header_name

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Store the request id, process the request, and echo the id."""
        request.state.request_id = (
            request.headers.get(self._header_name) or new_request_id()
        )
        response = await call_next(request)
        response.headers[self._header_name] = request.state.request_id
        return response
