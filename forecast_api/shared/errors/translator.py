"""
Global error translation.

Turns any exception into a ProblemResponse. Domain errors are dispatched
on their ErrorKind tag; anything else is treated as unclassified and
answered with a fixed 500 body so internal details never reach callers.
Full details, including the original message, go to the log only.
"""

import logging
import traceback
from types import MappingProxyType
from typing import Any, Callable

from forecast_api.domain.weather.errors import (
    DomainError,
    ErrorKind,
    ForecastFailure,
    NotFound,
    ValidationFailure,
)
from forecast_api.shared.errors.problem import (
    TYPE_BAD_REQUEST,
    TYPE_INTERNAL_SERVER_ERROR,
    TYPE_NOT_FOUND,
    ProblemResponse,
)
from forecast_api.shared.tracing import TraceContext, TraceContextReader

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

VALIDATION_TITLE = "One or more validation errors occurred."
NOT_FOUND_TITLE = "Resource not found."
FORECAST_TITLE = "Weather forecast error."
DOMAIN_TITLE = "A domain error occurred."
UNEXPECTED_TITLE = "An error occurred while processing your request."
UNEXPECTED_DETAIL = "An unexpected error occurred. Please try again later."

ExtrasBuilder = Callable[[Any], dict[str, Any]]


def _validation_extras(exc: ValidationFailure) -> dict[str, Any]:
    if not exc.field_errors:
        return {}
    return {
        "errors": {
            field: list(messages) for field, messages in exc.field_errors.items()
        }
    }


def _not_found_extras(exc: NotFound) -> dict[str, Any]:
    entity_id = "" if exc.entity_id is None else str(exc.entity_id)
    return {"entityType": exc.entity_type, "entityId": entity_id}


def _forecast_extras(exc: ForecastFailure) -> dict[str, Any]:
    if exc.requested_days is None:
        return {}
    return {"requestedDays": exc.requested_days}


def _no_extras(exc: DomainError) -> dict[str, Any]:
    return {}


# kind -> (status, type URI, title, extension builder)
DISPATCH_TABLE: dict[ErrorKind, tuple[int, str, str, ExtrasBuilder]] = {
    ErrorKind.VALIDATION: (
        HTTP_400, TYPE_BAD_REQUEST, VALIDATION_TITLE, _validation_extras,
    ),
    ErrorKind.NOT_FOUND: (
        HTTP_404, TYPE_NOT_FOUND, NOT_FOUND_TITLE, _not_found_extras,
    ),
    ErrorKind.FORECAST: (
        HTTP_400, TYPE_BAD_REQUEST, FORECAST_TITLE, _forecast_extras,
    ),
    ErrorKind.BUSINESS_RULE: (
        HTTP_400, TYPE_BAD_REQUEST, DOMAIN_TITLE, _no_extras,
    ),
    ErrorKind.GENERIC: (
        HTTP_400, TYPE_BAD_REQUEST, DOMAIN_TITLE, _no_extras,
    ),
}


class ErrorTranslator:
    """Single recovery point that maps errors to problem responses.

    Args:
        trace_reader: Source of the ambient trace identifiers.
        error_logger: Logger receiving one ERROR record per translation.
    """

    def __init__(
        self,
        trace_reader: TraceContextReader,
        error_logger: logging.Logger | None = None,
    ) -> None:
        self._trace_reader = trace_reader
        self._logger = error_logger or logger

    def translate(
        self,
        exc: BaseException,
        request_path: str,
        fallback_correlation_id: str,
    ) -> ProblemResponse:
        """Translate ``exc`` into a problem response and log it once.

        Args:
            exc: Any error that escaped request handling.
            request_path: Path of the failing request, used as ``instance``.
            fallback_correlation_id: Host request id, used as ``traceId``
                when no trace is active.

        Returns:
            The problem response to send to the caller.
        """
        trace_context = self._trace_reader.current()
        trace_id = trace_context.trace_id or fallback_correlation_id

        self._log(exc, trace_id, trace_context.span_id)

        if isinstance(exc, DomainError):
            status, type_uri, title, extras = DISPATCH_TABLE[exc.kind]
            detail = exc.message
            extensions: dict[str, Any] = {}
            if exc.code:
                extensions["errorCode"] = exc.code
            extensions.update(extras(exc))
        else:
            status, type_uri, title = (
                HTTP_500, TYPE_INTERNAL_SERVER_ERROR, UNEXPECTED_TITLE,
            )
            detail = UNEXPECTED_DETAIL
            extensions = {}

        extensions.update(self._trace_extensions(trace_id, trace_context))

        return ProblemResponse(
            type=type_uri,
            title=title,
            status=status,
            detail=detail,
            instance=request_path,
            extensions=MappingProxyType(extensions),
        )

    @staticmethod
    def _trace_extensions(
        trace_id: str, trace_context: TraceContext
    ) -> dict[str, Any]:
        extensions: dict[str, Any] = {"traceId": trace_id}
        if trace_context.span_id:
            extensions["spanId"] = trace_context.span_id
            if trace_context.parent_span_id:
                extensions["parentSpanId"] = trace_context.parent_span_id
        return extensions

    def _log(self, exc: BaseException, trace_id: str, span_id: str | None) -> None:
        try:
            self._logger.error(
                "An exception occurred: %s - %s | TraceId: %s | SpanId: %s",
                type(exc).__name__,
                exc,
                trace_id,
                span_id,
                exc_info=exc,
                extra={
                    "exception_type": type(exc).__name__,
                    "trace_id": trace_id,
                    "span_id": span_id,
                },
            )
        except Exception:
            traceback.print_exc()
