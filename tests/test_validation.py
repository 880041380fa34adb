"""
Tests for the forecast request rule set and the generic rule engine.

Validators return field errors and never raise, so the rules are
tested directly without going through the use case.
"""

import pytest

from forecast_api.application.weather.dtos import GetForecastsQuery
from forecast_api.application.weather.validators import (
    MAX_DAYS,
    MAX_LOCATION_LENGTH,
    MIN_DAYS,
    ForecastQueryValidator,
    is_valid_location_format,
)
from forecast_api.domain.weather.errors import FieldError, ValidationFailure
from forecast_api.domain.weather.validation import Rule, RuleSetValidator


@pytest.fixture
def validator() -> ForecastQueryValidator:
    return ForecastQueryValidator()


def codes(errors: list[FieldError]) -> list[str]:
    return [e.code for e in errors]


class TestDaysRules:
    """Tests for the days range rules."""

    def test_default_query_is_valid(self, validator: ForecastQueryValidator) -> None:
        assert validator.validate(GetForecastsQuery()) == []

    @pytest.mark.parametrize("days", [MIN_DAYS, 5, 15, MAX_DAYS])
    def test_days_in_range_are_valid(
        self, validator: ForecastQueryValidator, days: int
    ) -> None:
        assert validator.validate(GetForecastsQuery(days=days)) == []

    @pytest.mark.parametrize("days", [0, -1, -10, -100])
    def test_days_below_minimum(
        self, validator: ForecastQueryValidator, days: int
    ) -> None:
        errors = validator.validate(GetForecastsQuery(days=days))
        assert errors == [
            FieldError(
                field="days",
                message="The number of days must be at least 1.",
                code="WF_DAYS_TOO_LOW",
            )
        ]

    @pytest.mark.parametrize("days", [31, 50, 100, 365])
    def test_days_above_maximum(
        self, validator: ForecastQueryValidator, days: int
    ) -> None:
        errors = validator.validate(GetForecastsQuery(days=days))
        assert errors == [
            FieldError(
                field="days",
                message="The number of days cannot exceed 30.",
                code="WF_DAYS_TOO_HIGH",
            )
        ]


class TestLocationRules:
    """Tests for the location length and format rules."""

    @pytest.mark.parametrize("location", [None, "", " ", "   \t "])
    def test_absent_or_blank_location_is_exempt(
        self, validator: ForecastQueryValidator, location: str | None
    ) -> None:
        assert validator.validate(GetForecastsQuery(location=location)) == []

    @pytest.mark.parametrize(
        "location",
        [
            "London",
            "New York",
            "O'Brien",
            "London, UK",
            "Saint-Tropez",
            "Area51",
            "City 42",
            "Zürich",
            "東京",
            "Area٥١",
        ],
    )
    def test_valid_locations(
        self, validator: ForecastQueryValidator, location: str
    ) -> None:
        assert validator.validate(GetForecastsQuery(location=location)) == []

    def test_location_at_max_length_is_valid(
        self, validator: ForecastQueryValidator
    ) -> None:
        location = "a" * MAX_LOCATION_LENGTH
        assert validator.validate(GetForecastsQuery(location=location)) == []

    def test_location_over_max_length(self, validator: ForecastQueryValidator) -> None:
        location = "a" * (MAX_LOCATION_LENGTH + 1)
        errors = validator.validate(GetForecastsQuery(location=location))
        assert codes(errors) == ["WF_LOCATION_TOO_LONG"]
        assert errors[0].field == "location"
        assert errors[0].message == "The location name cannot exceed 100 characters."

    @pytest.mark.parametrize(
        "location",
        ["London@", "New#York", "Paris!", "Berlin$", "Rome%", "Madrid&",
         "Munich(", "Prague+", "Warsaw[", "Dublin}", "Oslo.", "Kyiv/",
         "Area²", "Half½", "RomeⅫ"],
    )
    def test_invalid_characters(
        self, validator: ForecastQueryValidator, location: str
    ) -> None:
        errors = validator.validate(GetForecastsQuery(location=location))
        assert codes(errors) == ["WF_LOCATION_INVALID"]
        assert errors[0].field == "location"

    def test_long_and_invalid_location_reports_both(
        self, validator: ForecastQueryValidator
    ) -> None:
        location = "!" * (MAX_LOCATION_LENGTH + 1)
        errors = validator.validate(GetForecastsQuery(location=location))
        assert codes(errors) == ["WF_LOCATION_TOO_LONG", "WF_LOCATION_INVALID"]

    def test_format_helper_exempts_blank(self) -> None:
        assert is_valid_location_format(None)
        assert is_valid_location_format("  ")
        assert not is_valid_location_format("a;b")

    @pytest.mark.parametrize("location", ["x²", "¾ mile", "Ⅻ"])
    def test_numeric_symbols_are_not_digits(self, location: str) -> None:
        """Superscripts, fractions and numerals are not decimal digits."""
        assert not is_valid_location_format(location)


class TestIncludeDetails:
    """include_details never affects validation."""

    @pytest.mark.parametrize("include_details", [True, False])
    def test_include_details_is_valid(
        self, validator: ForecastQueryValidator, include_details: bool
    ) -> None:
        query = GetForecastsQuery(days=7, location="Leeds", include_details=include_details)
        assert validator.validate(query) == []


class TestMultipleFailures:
    """All rules run in one pass and group by field."""

    def test_days_and_location_fail_together(
        self, validator: ForecastQueryValidator
    ) -> None:
        query = GetForecastsQuery(days=0, location="Bad@Place")
        errors = validator.validate(query)
        assert codes(errors) == ["WF_DAYS_TOO_LOW", "WF_LOCATION_INVALID"]

        failure = ValidationFailure.from_field_errors(errors)
        assert list(failure.field_errors) == ["days", "location"]

    def test_validation_is_deterministic(self, validator: ForecastQueryValidator) -> None:
        query = GetForecastsQuery(days=99, location="x" * 200)
        assert validator.validate(query) == validator.validate(query)


class TestRuleSetValidator:
    """Tests for the generic rule engine."""

    def test_rules_passed_to_constructor(self) -> None:
        rule = Rule(field="n", code="N_NEGATIVE", message="n < 0", check=lambda v: v >= 0)
        validator = RuleSetValidator([rule])
        assert validator.validate(1) == []
        assert validator.validate(-1) == [FieldError("n", "n < 0", "N_NEGATIVE")]

    def test_when_skips_rule(self) -> None:
        rule = Rule(
            field="n",
            code="N_ODD",
            message="odd",
            check=lambda v: v % 2 == 0,
            when=lambda v: v > 10,
        )
        validator = RuleSetValidator([rule])
        assert validator.validate(3) == []
        assert codes(validator.validate(11)) == ["N_ODD"]

    def test_empty_rule_set_accepts_everything(self) -> None:
        assert RuleSetValidator().validate(object()) == []
