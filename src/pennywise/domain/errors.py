"""Domain-layer error definitions.

Validation errors are *returned* inside a failed `Result`, never raised. They
still derive from `Exception` so callers can re-raise them at an outer layer
if they need to. Only the programmer errors at the bottom of this module are
raised by the domain itself.
"""

from typing import Any

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class ValidationError(DomainError):
    """Base class for every field-level validation failure.

    Attributes:
        field: Name of the offending field (stable, suitable for mapping to
            request-level feedback).
        message: Human-readable description embedding the field and value.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message

    @property
    def name(self) -> str:
        """The error type name (e.g. ``"RequiredFieldError"``)."""
        return type(self).__name__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.field == other.field
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((type(self), self.field, self.message))

    def __repr__(self) -> str:
        return f"{self.name}(field={self.field!r}, message={self.message!r})"


# ============================================================================
#                        Generic field validation errors
# ============================================================================


class RequiredFieldError(ValidationError):
    """Raised when a mandatory field is absent or blank."""

    def __init__(self, field: str) -> None:
        super().__init__(field, f'The field "{field}" is required.')


class MinNumberError(ValidationError):
    """Raised when a number is below its lower bound."""

    def __init__(self, field: str, minimum: float, actual: float) -> None:
        super().__init__(
            field, f'The field "{field}" must be >= {minimum}. Current value: {actual}'
        )


class MaxNumberError(ValidationError):
    """Raised when a number is above its upper bound."""

    def __init__(self, field: str, maximum: float, actual: float) -> None:
        super().__init__(
            field, f'The field "{field}" must be <= {maximum}. Current value: {actual}'
        )


class NumberRangeError(ValidationError):
    """Raised when a number falls outside an inclusive range."""

    def __init__(
        self, field: str, minimum: float, maximum: float, actual: float
    ) -> None:
        super().__init__(
            field,
            f'The field "{field}" must be between {minimum} and {maximum}. '
            f"Current: {actual}",
        )


class NegativeNumberError(ValidationError):
    """Raised when a number must not be negative."""

    def __init__(self, field: str, value: float) -> None:
        super().__init__(
            field,
            f'The field "{field}" must be greater than or equal to 0. Current: {value}',
        )


class MinLengthError(ValidationError):
    """Raised when a string is shorter than allowed."""

    def __init__(self, field: str, minimum: int, actual_len: int) -> None:
        super().__init__(
            field,
            f'The field "{field}" must be at least {minimum} characters. '
            f"Current length: {actual_len}",
        )


class MaxLengthError(ValidationError):
    """Raised when a string is longer than allowed."""

    def __init__(self, field: str, maximum: int, actual_len: int) -> None:
        super().__init__(
            field,
            f'The field "{field}" must be at most {maximum} characters. '
            f"Current length: {actual_len}",
        )


class ArrayNotEmptyError(ValidationError):
    """Raised when a list must contain at least one item."""

    def __init__(self, field: str) -> None:
        super().__init__(
            field, f'The field "{field}" must have at least one item in the List.'
        )


class InvalidUuidError(ValidationError):
    """Raised when a value is not a UUID v4 string."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(field, f'The field "{field}" must be a valid UUID. Current: {value}')


class InvalidDateError(ValidationError):
    """Raised when a value is not a date."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(field, f'The field "{field}" must be a valid date. Received: {value}')


class InvalidDateRangeError(ValidationError):
    """Raised when a date is not strictly after its reference date."""

    def __init__(self, field: str, reference_field: str) -> None:
        super().__init__(field, f'The field "{field}" must be after {reference_field}')
        self.reference_field = reference_field


class InvalidCurrencyError(ValidationError):
    """Raised when a value is not a valid (finite, non-negative) currency amount."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(
            field, f'The field "{field}" must be a valid currency value. Current: {value}'
        )


# ============================================================================
#                              Money errors
# ============================================================================


class InvalidMoneyValueError(ValidationError):
    """Raised when a Money amount or currency code is malformed."""

    def __init__(self, field: str, value: Any) -> None:
        if field == "currency":
            message = (
                f'The field "{field}" must be a valid ISO 4217 currency code '
                f"(3 uppercase letters). Received: {value}"
            )
        else:
            message = (
                f'The field "{field}" must be a valid monetary value with up to '
                f"2 decimal places. Received: {value}"
            )
        super().__init__(field, message)


class IncompatibleCurrencyError(ValidationError):
    """Raised when arithmetic mixes two different currencies."""

    def __init__(self, operation: str, currency_a: str, currency_b: str) -> None:
        super().__init__(
            "currency",
            f"Cannot {operation} money with different currencies: {currency_a} and "
            f"{currency_b}. Currencies must match.",
        )

    @classmethod
    def for_addition(cls, currency_a: str, currency_b: str) -> "IncompatibleCurrencyError":
        """Build the error reported by `Money.add`."""
        return cls("add", currency_a, currency_b)

    @classmethod
    def for_subtraction(
        cls, currency_a: str, currency_b: str
    ) -> "IncompatibleCurrencyError":
        """Build the error reported by `Money.subtract`."""
        return cls("subtract", currency_a, currency_b)


# ============================================================================
#                        Account related errors
# ============================================================================


class InvalidAccountTypeError(ValidationError):
    """Raised when an account type is not one of the known kinds."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(
            field, f'The field "{field}" must be "corrente" or "poupanca". Current: {value}'
        )


class InvalidAccountBalanceError(ValidationError):
    """Raised when an account balance would become negative."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(field, f"Balance cannot be negative. Current: {value}")


# ============================================================================
#                        Category related errors
# ============================================================================


class InvalidCategoryTypeError(ValidationError):
    """Raised when a category type is neither expense nor income."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(
            field, f'The field "{field}" must be "expense" or "income". Current: {value}'
        )


class InvalidCategoryParentError(ValidationError):
    """Raised when a category is made its own parent."""

    def __init__(self, field: str, category_id: str) -> None:
        super().__init__(
            field, f"A category cannot be its own parent. Category ID: {category_id}"
        )


# ============================================================================
#                         Invoice related errors
# ============================================================================


class InvalidInvoiceStatusError(ValidationError):
    """Raised when an invoice status is not open, closed or paid."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(
            field,
            f'The field "{field}" must be "open", "closed" or "paid". Current: {value}',
        )


# ============================================================================
#                       Transaction related errors
# ============================================================================


class InvalidTransactionTypeError(ValidationError):
    """Raised when a transaction type is neither expense nor income."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(
            field, f'The field "{field}" must be "expense" or "income". Current: {value}'
        )


class InvalidTransactionSourceError(ValidationError):
    """Raised unless exactly one of account_id / invoice_id is set."""

    def __init__(self) -> None:
        super().__init__(
            "source",
            "Transaction must be associated with either an account or an invoice, "
            "but not both",
        )


class InvalidInstallmentError(ValidationError):
    """Raised when installment information is incomplete or inconsistent."""

    def __init__(self, message: str) -> None:
        super().__init__("installment", message)

    @classmethod
    def current_greater_than_total(
        cls, current: int, total: int
    ) -> "InvalidInstallmentError":
        """Current installment exceeds the total number of installments."""
        return cls(
            f"Current installment ({current}) cannot be greater than "
            f"total installments ({total})"
        )

    @classmethod
    def missing_total_installments(cls) -> "InvalidInstallmentError":
        """Installment info given without a total."""
        return cls("Total installments is required when current installment is provided")

    @classmethod
    def missing_current_installment(cls) -> "InvalidInstallmentError":
        """Installment info given without a current installment."""
        return cls("Current installment is required when total installments is provided")

    @classmethod
    def missing_group_id(cls) -> "InvalidInstallmentError":
        """Installment info given without a group identifier."""
        return cls("Installment group ID is required for installment transactions")

    @classmethod
    def invalid_value(cls, field_label: str, value: Any) -> "InvalidInstallmentError":
        """An installment count that is not a positive integer."""
        return cls(f"Invalid {field_label} value: {value}. Must be a positive integer.")


# ============================================================================
#                    Programmer errors (raised, not returned)
# ============================================================================


class InvalidUniqueIdError(DomainError):
    """Raised when a UniqueId is constructed directly from a malformed string."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid UUID: {value!r}")
        self.value = value


class FailedResultValueError(DomainError):
    """Raised when reading the value of a failed Result."""

    def __init__(self) -> None:
        super().__init__("Cannot get the value of a failed result.")
