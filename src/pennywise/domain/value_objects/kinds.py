"""Value objects whose value comes from a closed set.

Each value object wraps a member of a `StrEnum`; untrusted strings are parsed
once at the boundary through ``create`` / ``validate``. Members compare equal
to their raw string, so ``account.type.value == "corrente"`` holds.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar, Self

from pennywise.domain import errors
from pennywise.domain.result import Result

from .base import ValueObject

# pylint: disable=too-few-public-methods


class ClosedValueObject(ValueObject[StrEnum]):
    """Value object restricted to the members of ``ALLOWED``.

    Concrete classes must set ``ALLOWED`` (the enum), ``FIELD`` (the field name
    reported on failure) and ``ERROR`` (the validation error type).
    """

    __slots__ = ()

    ALLOWED: ClassVar[type[StrEnum]]
    FIELD: ClassVar[str]
    ERROR: ClassVar[type[errors.ValidationError]]

    @classmethod
    def validate(cls, value: Any) -> Result[None]:
        """Check that ``value`` is one of the allowed members."""
        if cls._parse(value) is None:
            return Result.fail([cls.ERROR(cls.FIELD, value)])  # type: ignore[call-arg]
        return Result.ok(None)

    @classmethod
    def create(cls, value: Any) -> Result[Self]:
        """Parse ``value`` into a value object, or fail with ``ERROR``."""
        member = cls._parse(value)
        if member is None:
            return Result.fail([cls.ERROR(cls.FIELD, value)])  # type: ignore[call-arg]
        return Result.ok(cls(member))

    @classmethod
    def _parse(cls, value: Any) -> StrEnum | None:
        if isinstance(value, cls.ALLOWED):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls.ALLOWED(value)
        except ValueError:
            return None

    def __str__(self) -> str:
        return str(self.value)


# --- Accounts ---


class AccountKind(StrEnum):
    """Kinds of bank account."""

    CHECKING = "corrente"
    SAVINGS = "poupanca"


class AccountType(ClosedValueObject):
    """Type of a bank account (checking or savings)."""

    __slots__ = ()

    ALLOWED = AccountKind
    FIELD = "type"
    ERROR = errors.InvalidAccountTypeError


# --- Categories ---


class CategoryKind(StrEnum):
    """Whether a category groups expenses or income."""

    EXPENSE = "expense"
    INCOME = "income"


class CategoryType(ClosedValueObject):
    """Type of a category."""

    __slots__ = ()

    ALLOWED = CategoryKind
    FIELD = "type"
    ERROR = errors.InvalidCategoryTypeError


# --- Invoices ---


class InvoiceState(StrEnum):
    """Lifecycle states of a credit card invoice."""

    OPEN = "open"
    CLOSED = "closed"
    PAID = "paid"


class InvoiceStatus(ClosedValueObject):
    """Status of a credit card invoice."""

    __slots__ = ()

    ALLOWED = InvoiceState
    FIELD = "status"
    ERROR = errors.InvalidInvoiceStatusError

    def is_open(self) -> bool:
        """Whether the invoice still accepts transactions."""
        return self.value == InvoiceState.OPEN

    def is_closed(self) -> bool:
        """Whether the invoice has been closed."""
        return self.value == InvoiceState.CLOSED

    def is_paid(self) -> bool:
        """Whether the invoice has been paid."""
        return self.value == InvoiceState.PAID


# --- Transactions ---


class TransactionKind(StrEnum):
    """Direction of a transaction."""

    EXPENSE = "expense"
    INCOME = "income"


class TransactionType(ClosedValueObject):
    """Type of a transaction."""

    __slots__ = ()

    ALLOWED = TransactionKind
    FIELD = "type"
    ERROR = errors.InvalidTransactionTypeError

    def is_expense(self) -> bool:
        """Whether money leaves the account."""
        return self.value == TransactionKind.EXPENSE

    def is_income(self) -> bool:
        """Whether money enters the account."""
        return self.value == TransactionKind.INCOME
