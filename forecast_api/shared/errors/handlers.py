"""
Centralized error handling for FastAPI.

Every exception that escapes a route is translated into a problem
response by the ErrorTranslator. No stack traces or internal details
are exposed to clients.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from forecast_api.domain.weather.errors import FieldErrorsBuilder, ValidationFailure
from forecast_api.shared.errors.problem import ProblemJSONResponse
from forecast_api.shared.errors.translator import ErrorTranslator
from forecast_api.shared.request_id import get_request_id

# Location prefixes FastAPI adds in front of the field name.
_LOCATION_PREFIXES = frozenset({"query", "path", "header", "cookie", "body"})


def request_validation_failure(exc: RequestValidationError) -> ValidationFailure:
    """Convert framework-level input errors into a ValidationFailure."""
    builder = FieldErrorsBuilder()
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        builder.add(".".join(loc) or "request", error.get("msg", "Invalid value."))
    return ValidationFailure(builder.build(), cause=exc)


class ProblemDetailsMiddleware(BaseHTTPMiddleware):
    """Catch-all boundary turning unhandled exceptions into problem responses.

    Only ``Exception`` is caught; task cancellation propagates untouched
    so a cancelled request never gets a partial body.
    """

    def __init__(self, app: ASGIApp, translator: ErrorTranslator) -> None:
        super().__init__(app)
        self._translator = translator

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            problem = self._translator.translate(
                exc, request.url.path, get_request_id(request)
            )
            return ProblemJSONResponse(problem)


def register_error_handlers(app: FastAPI, translator: ErrorTranslator) -> None:
    """Register the error translation boundary on the FastAPI application.

    Call before adding middleware that must wrap the boundary (such as
    request ids), since the most recently added middleware runs outermost.

    Args:
        app: The FastAPI application instance.
        translator: The translator shared by all handlers.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> ProblemJSONResponse:
        """Render unbindable input as a 400 validation problem."""
        problem = translator.translate(
            request_validation_failure(exc),
            request.url.path,
            get_request_id(request),
        )
        return ProblemJSONResponse(problem)

    app.add_middleware(ProblemDetailsMiddleware, translator=translator)
