"""
Rule-based validation for request values.

A validator is an ordered list of rules. Every rule is evaluated on every
call (no short-circuit), and each failing rule yields one FieldError.
Validators never raise: callers decide what to do with the result.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

from forecast_api.domain.weather.errors import FieldError

T = TypeVar("T")


@dataclass(frozen=True)
class Rule(Generic[T]):
    """A single field rule.

    Attributes:
        field: Field name reported when the rule fails.
        code: Machine-readable failure code.
        message: Failure message.
        check: Returns True when the value satisfies the rule.
        when: Optional precondition; the rule is skipped when it returns False.
    """

    field: str
    code: str
    message: str
    check: Callable[[T], bool]
    when: Callable[[T], bool] | None = None

    def evaluate(self, instance: T) -> FieldError | None:
        if self.when is not None and not self.when(instance):
            return None
        if self.check(instance):
            return None
        return FieldError(field=self.field, message=self.message, code=self.code)


class RuleSetValidator(Generic[T]):
    """Evaluates an ordered rule set against a value.

    Subclasses declare their rules in ``rules``; a rule set can also be
    passed directly to the constructor.
    """

    rules: tuple[Rule[T], ...] = ()

    def __init__(self, rules: Iterable[Rule[T]] | None = None) -> None:
        if rules is not None:
            self.rules = tuple(rules)

    def validate(self, instance: T) -> list[FieldError]:
        """Return every failure for ``instance``; an empty list means valid."""
        errors = []
        for rule in self.rules:
            error = rule.evaluate(instance)
            if error is not None:
                errors.append(error)
        return errors
