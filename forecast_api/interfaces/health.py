"""
Health check router.

Reports liveness and the version the running app was built with.
"""

from fastapi import APIRouter, Request

from forecast_api.interfaces.weather.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
def health_check(request: Request) -> HealthResponse:
    return HealthResponse(status="ok", version=request.app.version)
