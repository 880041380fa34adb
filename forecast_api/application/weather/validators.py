"""
Validation rules for forecast requests.

Every rule is evaluated, so a request with several problems reports
all of them at once. Location rules only apply to non-blank locations.
"""

from forecast_api.application.weather.dtos import GetForecastsQuery
from forecast_api.domain.weather.validation import Rule, RuleSetValidator

MIN_DAYS = 1
MAX_DAYS = 30
MAX_LOCATION_LENGTH = 100

LOCATION_PUNCTUATION = frozenset(" -',")


def has_location(query: GetForecastsQuery) -> bool:
    return query.location is not None and bool(query.location.strip())


def is_valid_location_format(location: str | None) -> bool:
    """Allow letters, digits, spaces, hyphens, apostrophes and commas."""
    if location is None or not location.strip():
        return True
    return all(
        char.isalpha() or char.isdecimal() or char in LOCATION_PUNCTUATION
        for char in location
    )


class ForecastQueryValidator(RuleSetValidator[GetForecastsQuery]):
    """Rule set for GetForecastsQuery."""

    rules = (
        Rule(
            field="days",
            code="WF_DAYS_TOO_LOW",
            message=f"The number of days must be at least {MIN_DAYS}.",
            check=lambda q: q.days >= MIN_DAYS,
        ),
        Rule(
            field="days",
            code="WF_DAYS_TOO_HIGH",
            message=f"The number of days cannot exceed {MAX_DAYS}.",
            check=lambda q: q.days <= MAX_DAYS,
        ),
        Rule(
            field="location",
            code="WF_LOCATION_TOO_LONG",
            message=(
                f"The location name cannot exceed {MAX_LOCATION_LENGTH} characters."
            ),
            check=lambda q: len(q.location) <= MAX_LOCATION_LENGTH,
            when=has_location,
        ),
        Rule(
            field="location",
            code="WF_LOCATION_INVALID",
            message=(
                "The location name contains invalid characters. Only letters, "
                "numbers, spaces, and basic punctuation are allowed."
            ),
            check=lambda q: is_valid_location_format(q.location),
            when=has_location,
        ),
    )
