"""
Domain entities for the weather bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import date

SUMMARIES = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)

# Fahrenheit conversion divides by 0.5556 rather than 5/9; kept as-is
# so generated values match existing fixtures.
FAHRENHEIT_DIVISOR = 0.5556


@dataclass(frozen=True)
class WeatherForecast:
    """A synthetic forecast for a single day."""

    date: date
    temperature_c: int
    summary: str | None = None

    @property
    def temperature_f(self) -> int:
        """Return the temperature in Fahrenheit, truncated toward zero."""
        return 32 + int(self.temperature_c / FAHRENHEIT_DIVISOR)
