"""Field-level validation with error accumulation.

A `Validator` owns a list of errors. `Validator.check` hands out a
`FieldValidator` bound to one field/value pair and to that list; each chained
check appends its own error and never stops the chain, so a single pass
reports every problem at once.

Numeric and length checks silently skip values of the wrong type (e.g.
``min_length`` on a number). Pair them with ``required()`` or an explicit type
check where strictness matters.

Example:
    ```py
    validator = Validator()
    validator.check("name", name).required().min_length(3)
    validator.check("limit", limit).required().min_number(0)
    result = validator.as_result()
    ```
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime
from numbers import Real
from typing import Any, Self

from pennywise.domain import errors
from pennywise.domain.result import Result
from pennywise.domain.unsettable import is_set
from pennywise.domain.utils import as_finite_float
from pennywise.domain.value_objects.unique_id import UniqueId


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_empty(value: Any) -> bool:
    if value is None or not is_set(value):
        return True
    return isinstance(value, str) and not value.strip()


class FieldValidator:
    """Fluent checks for a single field; errors go to the owner's list."""

    __slots__ = ("_field", "_value", "_errors")

    def __init__(
        self, field: str, value: Any, error_list: list[errors.ValidationError]
    ) -> None:
        self._field = field
        self._value = value
        self._errors = error_list

    def _report(self, error: errors.ValidationError) -> None:
        self._errors.append(error)

    # --- Presence ---

    def required(self) -> Self:
        """None, UNSET, and empty/whitespace-only strings are absent."""
        if _is_empty(self._value):
            self._report(errors.RequiredFieldError(self._field))
        return self

    # --- Numbers ---

    def min_number(self, minimum: float) -> Self:
        """Value must be >= ``minimum``."""
        if _is_number(self._value) and self._value < minimum:
            self._report(errors.MinNumberError(self._field, minimum, self._value))
        return self

    def max_number(self, maximum: float) -> Self:
        """Value must be <= ``maximum``."""
        if _is_number(self._value) and self._value > maximum:
            self._report(errors.MaxNumberError(self._field, maximum, self._value))
        return self

    def number_in_range(self, minimum: float, maximum: float) -> Self:
        """Value must lie within ``[minimum, maximum]``."""
        if _is_number(self._value) and not minimum <= self._value <= maximum:
            self._report(
                errors.NumberRangeError(self._field, minimum, maximum, self._value)
            )
        return self

    def is_non_negative_number(self) -> Self:
        """Value must be >= 0."""
        if _is_number(self._value) and self._value < 0:
            self._report(errors.NegativeNumberError(self._field, self._value))
        return self

    def is_currency(self) -> Self:
        """Value, when given, must be a finite non-negative number."""
        if self._value is None or not is_set(self._value):
            return self
        amount = as_finite_float(self._value)
        if amount is None or amount < 0:
            self._report(errors.InvalidCurrencyError(self._field, self._value))
        return self

    # --- Strings ---

    def min_length(self, minimum: int) -> Self:
        """Stripped string must have at least ``minimum`` characters."""
        if isinstance(self._value, str) and not _is_empty(self._value):
            actual_len = len(self._value.strip())
            if actual_len < minimum:
                self._report(errors.MinLengthError(self._field, minimum, actual_len))
        return self

    def max_length(self, maximum: int) -> Self:
        """Stripped string must have at most ``maximum`` characters."""
        if isinstance(self._value, str) and not _is_empty(self._value):
            actual_len = len(self._value.strip())
            if actual_len > maximum:
                self._report(errors.MaxLengthError(self._field, maximum, actual_len))
        return self

    def is_valid_uuid(self) -> Self:
        """Value, when truthy, must be a UUID v4 string."""
        if self._value and not UniqueId.is_valid(self._value):
            self._report(errors.InvalidUuidError(self._field, self._value))
        return self

    # --- Collections ---

    def array_not_empty(self) -> Self:
        """Value must be a list or tuple with at least one item."""
        if not isinstance(self._value, (list, tuple)) or not self._value:
            self._report(errors.ArrayNotEmptyError(self._field))
        return self

    # --- Dates ---

    def is_valid_date(self) -> Self:
        """Value, when given, must be a `date` or `datetime`."""
        if self._value is None or not is_set(self._value):
            return self
        if not isinstance(self._value, date):
            self._report(errors.InvalidDateError(self._field, self._value))
        return self

    def is_date_after(self, reference: Any, reference_field: str = "start_date") -> Self:
        """Value must be strictly after ``reference`` when both are dates.

        Dates that cannot be ordered against each other (a naive and an aware
        datetime) are reported as an invalid range.
        """
        if not (isinstance(self._value, date) and isinstance(reference, date)):
            return self
        try:
            is_after = _as_comparable(self._value, reference) > _as_comparable(
                reference, self._value
            )
        except TypeError:
            is_after = False
        if not is_after:
            self._report(errors.InvalidDateRangeError(self._field, reference_field))
        return self


def _as_comparable(value: date, other: date) -> date:
    # datetime vs plain date: compare calendar days
    if isinstance(value, datetime) and not isinstance(other, datetime):
        return value.date()
    return value


class Validator:
    """Accumulator of validation errors for one validation pass."""

    __slots__ = ("_errors",)

    def __init__(self) -> None:
        self._errors: list[errors.ValidationError] = []

    def check(self, field: str, value: Any) -> FieldValidator:
        """Start a chain of checks for ``field`` holding ``value``."""
        return FieldValidator(field, value, self._errors)

    def add_error(self, error: errors.ValidationError) -> None:
        """Record an error produced outside a field chain."""
        self._errors.append(error)

    def add_errors(self, error_list: Iterable[errors.ValidationError]) -> None:
        """Merge errors reported elsewhere (e.g. by a nested value object)."""
        self._errors.extend(error_list)

    def has_errors(self) -> bool:
        """Whether any check has failed so far."""
        return bool(self._errors)

    def get_errors(self) -> tuple[errors.ValidationError, ...]:
        """Snapshot of the errors collected so far, in report order."""
        return tuple(self._errors)

    def as_result(self) -> Result[None]:
        """``Result.ok(None)`` if clean, otherwise a failure with every error."""
        if self._errors:
            return Result.fail(self._errors)
        return Result.ok(None)
