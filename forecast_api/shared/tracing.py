"""
Read-only access to the ambient distributed-trace context.

Identifiers use the W3C Trace Context hex encoding: 32 lowercase hex
digits for trace ids, 16 for span ids. This module never creates or
propagates spans; it only reads what the host has made current.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from opentelemetry import trace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraceContext:
    """Trace identifiers for the current operation. All fields may be absent."""

    trace_id: str | None = None
    span_id: str | None = None
    parent_span_id: str | None = None


EMPTY_TRACE_CONTEXT = TraceContext()


class TraceContextReader(ABC):
    """Port for reading the current trace context."""

    @abstractmethod
    def current(self) -> TraceContext:
        """Return the active trace context. Must never raise."""
        raise NotImplementedError


class NullTraceContextReader(TraceContextReader):
    """Reader for hosts without tracing."""

    def current(self) -> TraceContext:
        return EMPTY_TRACE_CONTEXT


class OpenTelemetryTraceContextReader(TraceContextReader):
    """Reads the span that OpenTelemetry considers current.

    The parent span id is only available from SDK spans, which expose
    their parent ``SpanContext`` as ``parent``; API-only spans report none.
    """

    def current(self) -> TraceContext:
        try:
            span = trace.get_current_span()
            span_context = span.get_span_context()
            if not span_context.is_valid:
                return EMPTY_TRACE_CONTEXT

            parent_span_id = None
            parent = getattr(span, "parent", None)
            if parent is not None and getattr(parent, "is_valid", False):
                parent_span_id = trace.format_span_id(parent.span_id)

            return TraceContext(
                trace_id=trace.format_trace_id(span_context.trace_id),
                span_id=trace.format_span_id(span_context.span_id),
                parent_span_id=parent_span_id,
            )
        except Exception:
            logger.debug("Could not read the current trace context", exc_info=True)
            return EMPTY_TRACE_CONTEXT
