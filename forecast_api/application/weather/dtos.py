"""
Data Transfer Objects for the weather application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class GetForecastsQuery:
    """Input DTO for requesting forecasts.

    Attributes:
        days: Number of days to forecast (1-30).
        location: Optional location name.
        include_details: Whether extended details were requested.
    """

    days: int = 5
    location: str | None = None
    include_details: bool = False


@dataclass(frozen=True)
class ForecastResult:
    """Output DTO for a single day's forecast.

    Attributes:
        date: The forecast date.
        temperature_c: Temperature in Celsius.
        temperature_f: Temperature in Fahrenheit.
        summary: Textual summary of the conditions.
    """

    date: date
    temperature_c: int
    temperature_f: int
    summary: str | None
