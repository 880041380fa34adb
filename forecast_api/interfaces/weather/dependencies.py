"""
Dependency injection for the weather bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
"""

from forecast_api.application.weather.get_forecasts import GetForecastsUseCase
from forecast_api.infrastructure.weather.random_forecast_generator import (
    RandomForecastGenerator,
)


def get_forecasts_use_case() -> GetForecastsUseCase:
    """Build GetForecastsUseCase with its infrastructure dependencies."""
    return GetForecastsUseCase(generator=RandomForecastGenerator())
