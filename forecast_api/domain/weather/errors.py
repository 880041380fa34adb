"""
Domain-specific errors for the weather bounded context.

All errors raised from the domain and application layers are defined here.
Each variant is tagged with an ErrorKind and carries a stable error code;
the code prefix identifies the variant family (VAL/NF/BR/WF/DOM).
These are mapped to HTTP responses at the shared error layer.
No framework imports allowed.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping


class ErrorKind(Enum):
    """Closed set of domain error variants."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    BUSINESS_RULE = "business_rule"
    FORECAST = "forecast"
    GENERIC = "generic"


@dataclass(frozen=True)
class FieldError:
    """A single validation failure on one input field.

    Attributes:
        field: Name of the offending field.
        message: Human-readable failure message.
        code: Machine-readable rule code (e.g. WF_DAYS_TOO_LOW).
    """

    field: str
    message: str
    code: str


class FieldErrorsBuilder:
    """Collects field messages in first-seen order, then freezes them."""

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}

    def add(self, field: str, message: str) -> "FieldErrorsBuilder":
        self._errors.setdefault(field, []).append(message)
        return self

    def extend(self, errors: Iterable[FieldError]) -> "FieldErrorsBuilder":
        for error in errors:
            self.add(error.field, error.message)
        return self

    def build(self) -> Mapping[str, tuple[str, ...]]:
        """Return a read-only mapping of field name to its messages."""
        return MappingProxyType(
            {field: tuple(messages) for field, messages in self._errors.items()}
        )


def _freeze_field_errors(
    field_errors: Mapping[str, Iterable[str]] | None,
) -> Mapping[str, tuple[str, ...]]:
    builder = FieldErrorsBuilder()
    for field, messages in (field_errors or {}).items():
        for message in messages:
            builder.add(field, message)
    return builder.build()


def _rebuild(cls: type, kwargs: dict[str, Any]) -> "DomainError":
    return cls(**kwargs)


class DomainError(Exception):
    """Base error for all weather domain errors.

    Args:
        message: Human-readable description, safe to show to callers.
        code: Stable error code that is part of the wire contract.
        cause: Optional underlying error kept for diagnostics only.
    """

    kind: ErrorKind = ErrorKind.GENERIC
    default_message = "A domain exception occurred."
    default_code = "DOM000"

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.message = message if message is not None else self.default_message
        self.code = code if code is not None else self.default_code
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def _constructor_kwargs(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.code}

    def __reduce__(self) -> tuple[Any, ...]:
        # Rebuilt from keywords; the cause is not carried over.
        return _rebuild, (type(self), self._constructor_kwargs())

    def _identity(self) -> tuple[Any, ...]:
        return (self.code, self.message)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._identity() == other._identity()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.code, self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class GenericDomainFailure(DomainError):
    """Raised for known domain conditions without a dedicated variant."""


class ValidationFailure(DomainError):
    """Raised when caller input fails one or more validation rules.

    Attributes:
        field_errors: Read-only mapping of field name to its messages,
            in first-seen field order.
    """

    kind = ErrorKind.VALIDATION
    default_message = "One or more validation errors occurred."
    default_code = "VAL000"

    def __init__(
        self,
        field_errors: Mapping[str, Iterable[str]] | None = None,
        message: str | None = None,
        code: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, code, cause)
        self.field_errors = _freeze_field_errors(field_errors)

    @classmethod
    def for_field(
        cls, field: str, message: str, cause: BaseException | None = None
    ) -> "ValidationFailure":
        """Build a failure for a single field (VAL001)."""
        return cls(
            {field: [message]},
            message=f"Validation failed for field '{field}': {message}",
            code="VAL001",
            cause=cause,
        )

    @classmethod
    def from_field_errors(
        cls, errors: Iterable[FieldError], cause: BaseException | None = None
    ) -> "ValidationFailure":
        """Group a flat list of field errors by field, keeping first-seen order."""
        return cls(FieldErrorsBuilder().extend(errors).build(), cause=cause)

    def _constructor_kwargs(self) -> dict[str, Any]:
        field_errors = {field: list(m) for field, m in self.field_errors.items()}
        return {**super()._constructor_kwargs(), "field_errors": field_errors}

    def _identity(self) -> tuple[Any, ...]:
        return super()._identity() + (tuple(self.field_errors.items()),)


class NotFound(DomainError):
    """Raised when a referenced entity does not exist.

    Attributes:
        entity_type: Type name of the missing entity.
        entity_id: Identifier that was looked up.
    """

    kind = ErrorKind.NOT_FOUND
    default_message = "The requested resource was not found."
    default_code = "NF000"

    def __init__(
        self,
        entity_type: str | None = None,
        entity_id: Any = None,
        message: str | None = None,
        cause: BaseException | None = None,
        code: str | None = None,
    ) -> None:
        if entity_type is None:
            super().__init__(message, code, cause)
            self.entity_type = "Unknown"
            self.entity_id = entity_id if entity_id is not None else ""
            return
        if message is None:
            message = f"{entity_type} with identifier '{entity_id}' was not found."
        super().__init__(message, code if code is not None else "NF001", cause)
        self.entity_type = entity_type
        self.entity_id = entity_id

    def _constructor_kwargs(self) -> dict[str, Any]:
        return {
            **super()._constructor_kwargs(),
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
        }

    def _identity(self) -> tuple[Any, ...]:
        return super()._identity() + (self.entity_type, self.entity_id)


class BusinessRuleViolation(DomainError):
    """Raised when a named business rule is violated."""

    kind = ErrorKind.BUSINESS_RULE
    default_message = "A business rule was violated."
    default_code = "BR000"

    def __init__(
        self,
        message: str | None = None,
        rule_name: str | None = None,
        code: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        if code is None and rule_name is not None:
            code = "BR001"
        super().__init__(message, code, cause)
        self.rule_name = rule_name if rule_name is not None else "Unknown"

    def _constructor_kwargs(self) -> dict[str, Any]:
        return {**super()._constructor_kwargs(), "rule_name": self.rule_name}

    def _identity(self) -> tuple[Any, ...]:
        return super()._identity() + (self.rule_name,)


class ForecastFailure(DomainError):
    """Raised when a weather forecast operation cannot be completed.

    Attributes:
        requested_days: The number of days that caused the failure, if known.
    """

    kind = ErrorKind.FORECAST
    default_message = (
        "An error occurred whilst processing the weather forecast request."
    )
    default_code = "WF000"

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        requested_days: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, code, cause)
        self.requested_days = requested_days

    @classmethod
    def invalid_day_range(
        cls, days: int, min_days: int, max_days: int
    ) -> "ForecastFailure":
        """Build a failure for a day count outside the allowed range (WF001)."""
        return cls(
            f"The requested number of days ({days}) is outside the valid "
            f"range of {min_days} to {max_days}.",
            code="WF001",
            requested_days=days,
        )

    @classmethod
    def unavailable(cls, reason: str) -> "ForecastFailure":
        """Build a failure for forecast data that cannot be served (WF002)."""
        return cls(
            f"Weather forecast is currently unavailable: {reason}",
            code="WF002",
        )

    def _constructor_kwargs(self) -> dict[str, Any]:
        return {
            **super()._constructor_kwargs(),
            "requested_days": self.requested_days,
        }

    def _identity(self) -> tuple[Any, ...]:
        return super()._identity() + (self.requested_days,)
