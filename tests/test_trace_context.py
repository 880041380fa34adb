"""
Tests for the trace context readers.

Uses OpenTelemetry API spans only; no SDK or exporter is needed.
"""

import pytest
from opentelemetry import trace
from opentelemetry.trace import NonRecordingSpan, SpanContext, TraceFlags

from forecast_api.shared.tracing import (
    EMPTY_TRACE_CONTEXT,
    NullTraceContextReader,
    OpenTelemetryTraceContextReader,
    TraceContext,
)

TRACE_ID = 0x0AF7651916CD43DD8448EB211C80319C
SPAN_ID = 0x00F067AA0BA902B7
PARENT_SPAN_ID = 0xB7AD6B7169203331


def span_context(span_id: int = SPAN_ID) -> SpanContext:
    return SpanContext(
        trace_id=TRACE_ID,
        span_id=span_id,
        is_remote=False,
        trace_flags=TraceFlags(TraceFlags.SAMPLED),
    )


class SpanWithParent(NonRecordingSpan):
    """API span exposing ``parent`` the way SDK spans do."""

    def __init__(self, context: SpanContext, parent: SpanContext | None) -> None:
        super().__init__(context)
        self.parent = parent


class TestNullTraceContextReader:
    def test_always_empty(self) -> None:
        assert NullTraceContextReader().current() == TraceContext()


class TestOpenTelemetryTraceContextReader:
    """Tests for reading the ambient OpenTelemetry span."""

    def test_no_active_span(self) -> None:
        """Without a current span every field is absent."""
        assert OpenTelemetryTraceContextReader().current() == EMPTY_TRACE_CONTEXT

    def test_active_span_without_parent(self) -> None:
        with trace.use_span(NonRecordingSpan(span_context())):
            context = OpenTelemetryTraceContextReader().current()

        assert context.trace_id == "0af7651916cd43dd8448eb211c80319c"
        assert context.span_id == "00f067aa0ba902b7"
        assert context.parent_span_id is None

    def test_active_span_with_parent(self) -> None:
        span = SpanWithParent(span_context(), parent=span_context(PARENT_SPAN_ID))
        with trace.use_span(span):
            context = OpenTelemetryTraceContextReader().current()

        assert context.parent_span_id == "b7ad6b7169203331"
        assert len(context.trace_id) == 32
        assert len(context.span_id) == 16

    def test_context_is_restored_after_span_ends(self) -> None:
        reader = OpenTelemetryTraceContextReader()
        with trace.use_span(NonRecordingSpan(span_context())):
            assert reader.current().trace_id is not None
        assert reader.current() == EMPTY_TRACE_CONTEXT

    def test_never_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A broken tracing backend yields an empty context."""

        def boom() -> None:
            raise RuntimeError("tracer exploded")

        monkeypatch.setattr(trace, "get_current_span", boom)
        assert OpenTelemetryTraceContextReader().current() == EMPTY_TRACE_CONTEXT
