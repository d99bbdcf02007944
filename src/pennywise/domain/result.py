"""Explicit success/failure container used by every domain operation.

INVARIANT: domain logic reports expected failures (bad input, broken
business rules) through `Result.fail`, never by raising.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from pennywise.domain.errors import FailedResultValueError, ValidationError

T = TypeVar("T")


class Result(Generic[T]):
    """Tagged union of ``ok(value)`` or ``fail(errors)``.

    Results are immutable once built. Use the `ok` and `fail` class methods
    rather than the constructor.
    """

    __slots__ = ("_success", "_value", "_errors")

    def __init__(
        self, success: bool, value: T | None, errors: tuple[ValidationError, ...]
    ) -> None:
        self._success = success
        self._value = value
        self._errors = errors

    # --- Construction Paths ---

    @classmethod
    def ok(cls, value: T) -> Result[T]:
        """Build a successful result holding ``value``."""
        return cls(True, value, ())

    @classmethod
    def fail(cls, errors: Iterable[ValidationError]) -> Result[T]:
        """Build a failed result carrying one or more errors.

        Raises:
            ValueError: If ``errors`` is empty.
        """
        collected = tuple(errors)
        if not collected:
            raise ValueError("A failed result needs at least one error")
        return cls(False, None, collected)

    # --- Accessors ---

    @property
    def is_success(self) -> bool:
        """Whether the operation succeeded."""
        return self._success

    @property
    def is_failure(self) -> bool:
        """Whether the operation failed."""
        return not self._success

    @property
    def value(self) -> T:
        """The yielded value.

        Raises:
            FailedResultValueError: If the result is a failure.
        """
        if not self._success:
            raise FailedResultValueError
        return self._value  # type: ignore[return-value]

    @property
    def errors(self) -> tuple[ValidationError, ...]:
        """Every error reported by the operation (empty on success)."""
        return self._errors

    def __repr__(self) -> str:
        if self._success:
            return f"Result.ok({self._value!r})"
        return f"Result.fail({list(self._errors)!r})"
