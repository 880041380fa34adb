"""
FastAPI router for the weather bounded context.

All routes delegate to use cases. No business logic here.
Input rules are enforced by the use case's validator.
Error mapping is handled by the centralized error translator.
"""

import logging

from fastapi import APIRouter, Depends

from forecast_api.application.weather.dtos import GetForecastsQuery
from forecast_api.application.weather.get_forecasts import GetForecastsUseCase
from forecast_api.interfaces.weather.dependencies import get_forecasts_use_case
from forecast_api.interfaces.weather.schemas import ForecastItem, ProblemDetailsSchema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/weatherforecast", tags=["weather"])

PROBLEM_RESPONSES = {
    400: {"model": ProblemDetailsSchema},
    404: {"model": ProblemDetailsSchema},
    500: {"model": ProblemDetailsSchema},
}


@router.get(
    "",
    response_model=list[ForecastItem],
    responses=PROBLEM_RESPONSES,
    summary="Get weather forecasts",
    description="Generate forecasts for the next 1-30 days.",
)
def get_weather_forecast(
    days: int = 5,
    location: str | None = None,
    include_details: bool = False,
    use_case: GetForecastsUseCase = Depends(get_forecasts_use_case),
) -> list[ForecastItem]:
    """Return forecasts for the requested number of days."""
    logger.info("Received request for weather forecasts for %d days", days)
    query = GetForecastsQuery(
        days=days, location=location, include_details=include_details
    )
    results = use_case.execute(query)
    return [
        ForecastItem(
            date=r.date,
            temperature_c=r.temperature_c,
            temperature_f=r.temperature_f,
            summary=r.summary,
        )
        for r in results
    ]
