"""
Port interfaces (ABCs) for the weather bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod

from forecast_api.domain.weather.entities import WeatherForecast


class ForecastGenerator(ABC):
    """Port for producing forecasts."""

    @abstractmethod
    def generate(
        self, days: int, location: str | None = None
    ) -> list[WeatherForecast]:
        """Return one forecast per day, starting tomorrow.

        Args:
            days: Number of consecutive days to forecast.
            location: Optional location name; adapters may ignore it.
        """
        raise NotImplementedError
