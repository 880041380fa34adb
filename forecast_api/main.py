"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error translation (centralized domain-to-problem mapping)
- Request correlation ids
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI

from forecast_api.core.config import Settings, settings
from forecast_api.interfaces.health import router as health_router
from forecast_api.interfaces.weather.router import router as weather_router
from forecast_api.shared.errors.handlers import register_error_handlers
from forecast_api.shared.errors.translator import ErrorTranslator
from forecast_api.shared.logging import configure_logging
from forecast_api.shared.request_id import RequestIdMiddleware
from forecast_api.shared.tracing import (
    NullTraceContextReader,
    OpenTelemetryTraceContextReader,
    TraceContextReader,
)


def build_trace_reader(config: Settings) -> TraceContextReader:
    if config.trace_context_enabled:
        return OpenTelemetryTraceContextReader()
    return NullTraceContextReader()


def create_app(
    config: Settings = settings,
    trace_reader: TraceContextReader | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error translation, and middleware.
    This is the composition root of the application.

    Args:
        config: Application settings.
        trace_reader: Overrides the trace reader chosen from settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=config.log_level)

    app = FastAPI(
        title=config.project_name,
        version=config.version,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
    )

    # --- Error Translation ---
    translator = ErrorTranslator(trace_reader or build_trace_reader(config))
    register_error_handlers(app, translator)

    # --- Request ids (outermost, so error responses carry the header) ---
    app.add_middleware(RequestIdMiddleware, header_name=config.request_id_header)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(weather_router, prefix="/api/v1")

    return app


app = create_app()
