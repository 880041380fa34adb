"""
Adapter: random forecast generator.

Implements ForecastGenerator with uniformly random temperatures.
The values are synthetic; no external service is contacted.
"""

import random
from datetime import date, datetime, timedelta, timezone
from typing import Callable

from forecast_api.domain.weather.entities import SUMMARIES, WeatherForecast
from forecast_api.domain.weather.ports import ForecastGenerator

MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 55  # exclusive


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class RandomForecastGenerator(ForecastGenerator):
    """Concrete adapter producing random daily forecasts.

    Args:
        rng: Random source; a seeded ``random.Random`` gives reproducible output.
        today: Clock returning the current UTC date.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        today: Callable[[], date] = _utc_today,
    ) -> None:
        self._rng = rng or random.Random()
        self._today = today

    def generate(
        self, days: int, location: str | None = None
    ) -> list[WeatherForecast]:
        start = self._today()
        return [
            WeatherForecast(
                date=start + timedelta(days=offset),
                temperature_c=self._rng.randrange(
                    MIN_TEMPERATURE_C, MAX_TEMPERATURE_C
                ),
                summary=self._rng.choice(SUMMARIES),
            )
            for offset in range(1, days + 1)
        ]
