"""
Pydantic schemas for the weather API responses.

These schemas define the API contract. Range and format checks on the
query live in the application rule set, so the schemas stay permissive.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class ForecastItem(BaseModel):
    """A single day's forecast in the response."""

    date: date
    temperature_c: int
    temperature_f: int
    summary: str | None = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ProblemDetailsSchema(BaseModel):
    """Problem response returned by all error handlers (documentation only)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str
    title: str
    status: int
    detail: str
    instance: str
    error_code: str | None = Field(default=None, alias="errorCode")
    trace_id: str = Field(alias="traceId")
    span_id: str | None = Field(default=None, alias="spanId")
    parent_span_id: str | None = Field(default=None, alias="parentSpanId")
