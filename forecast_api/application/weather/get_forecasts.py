"""
Use case: Generate forecasts for the requested number of days.

Input: GetForecastsQuery (days, location, include_details)
Output: list[ForecastResult]
Side effects: None.
Failure cases: ValidationFailure. Generator errors propagate unchanged.
"""

import logging

from forecast_api.application.weather.dtos import ForecastResult, GetForecastsQuery
from forecast_api.application.weather.validators import ForecastQueryValidator
from forecast_api.domain.weather.errors import ValidationFailure
from forecast_api.domain.weather.ports import ForecastGenerator
from forecast_api.domain.weather.validation import RuleSetValidator

logger = logging.getLogger(__name__)


class GetForecastsUseCase:
    """Orchestrates forecast generation.

    Validates the query first and fails fast before any generation
    work happens, then delegates to the ForecastGenerator port.
    """

    def __init__(
        self,
        generator: ForecastGenerator,
        validator: RuleSetValidator[GetForecastsQuery] | None = None,
    ) -> None:
        self._generator = generator
        self._validator = validator or ForecastQueryValidator()

    def execute(self, query: GetForecastsQuery) -> list[ForecastResult]:
        """Run the forecast use case.

        Args:
            query: The forecast request.

        Returns:
            One forecast per requested day, earliest first.

        Raises:
            ValidationFailure: If the query breaks any validation rule.
        """
        errors = self._validator.validate(query)
        if errors:
            failure = ValidationFailure.from_field_errors(errors)
            logger.warning(
                "Validation failed for forecast request: %s",
                dict(failure.field_errors),
            )
            raise failure

        logger.info(
            "Generating forecasts for days=%d%s",
            query.days,
            f", location={query.location}" if query.location else "",
        )

        forecasts = self._generator.generate(query.days, query.location)

        logger.info("Generated %d forecasts", len(forecasts))
        return [
            ForecastResult(
                date=f.date,
                temperature_c=f.temperature_c,
                temperature_f=f.temperature_f,
                summary=f.summary,
            )
            for f in forecasts
        ]
