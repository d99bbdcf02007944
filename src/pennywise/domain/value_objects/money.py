"""Money value object.

Amounts are plain floats restricted to two decimal places; every arithmetic
operation re-validates its result through `Money.create`, so an operation that
would produce sub-cent precision (e.g. ``multiply(0.333)``) is reported as a
failure rather than silently rounded.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pennywise import config
from pennywise.domain.errors import IncompatibleCurrencyError, InvalidMoneyValueError
from pennywise.domain.result import Result
from pennywise.domain.utils import as_finite_float

from .base import ValueObject

CURRENCY_PATTERN: re.Pattern[str] = re.compile(r"^[A-Z]{3}$")
PRECISION_TOLERANCE = 0.00001

CURRENCY_SYMBOLS: dict[str, str] = {"BRL": "R$", "USD": "US$", "EUR": "€", "GBP": "£"}


class Money(ValueObject[Mapping[str, Any]]):
    """An amount of money in a given ISO 4217 currency."""

    __slots__ = ()

    @property
    def amount(self) -> float:
        """The monetary amount."""
        return self.value["amount"]

    @property
    def currency(self) -> str:
        """The ISO 4217 currency code (e.g. ``"BRL"``)."""
        return self.value["currency"]

    # --- Construction Paths ---

    @classmethod
    def create(cls, amount: Any, currency: str | None = None) -> Result[Money]:
        """Validate and build a Money instance.

        Args:
            amount: A finite number with at most two decimal places.
            currency: Three uppercase letters. Defaults to the configured
                default currency (``PENNYWISE_DEFAULT_CURRENCY``, ``BRL``).

        Returns:
            The Money on success, or a failure with an `InvalidMoneyValueError`
            for the first offending field (amount is checked before currency).
        """
        if currency is None:
            currency = config.get_default_currency()
        if not cls.is_valid_amount(amount):
            return Result.fail([InvalidMoneyValueError("amount", amount)])
        if not cls.is_valid_currency(currency):
            return Result.fail([InvalidMoneyValueError("currency", currency)])
        if isinstance(amount, float):
            # drop binary noise below the tolerance (0.1 + 0.2 -> 0.3)
            amount = round(amount, 2)
        return Result.ok(cls({"amount": amount, "currency": currency}))

    @classmethod
    def zero(cls, currency: str | None = None) -> Money:
        """Zero in ``currency`` (the configured default when omitted)."""
        return cls.create(0, currency).value

    @staticmethod
    def is_valid_amount(amount: Any) -> bool:
        """Finite real number representable with at most two decimal places."""
        if (as_float := as_finite_float(amount)) is None:
            return False
        return abs(as_float - round(as_float, 2)) < PRECISION_TOLERANCE

    @staticmethod
    def is_valid_currency(currency: Any) -> bool:
        """Three uppercase ASCII letters."""
        return isinstance(currency, str) and CURRENCY_PATTERN.match(currency) is not None

    # --- Arithmetic ---

    def add(self, other: Money) -> Result[Money]:
        """Sum of two amounts in the same currency."""
        if self.currency != other.currency:
            return Result.fail(
                [IncompatibleCurrencyError.for_addition(self.currency, other.currency)]
            )
        return Money.create(self.amount + other.amount, self.currency)

    def subtract(self, other: Money) -> Result[Money]:
        """Difference of two amounts in the same currency."""
        if self.currency != other.currency:
            return Result.fail(
                [IncompatibleCurrencyError.for_subtraction(self.currency, other.currency)]
            )
        return Money.create(self.amount - other.amount, self.currency)

    def multiply(self, factor: float) -> Result[Money]:
        """Scale the amount; fails if the product needs more than two decimals."""
        return Money.create(self.amount * factor, self.currency)

    # --- Presentation ---

    def format(self) -> str:
        """Render in pt-BR style, e.g. ``R$ 1.234,56``."""
        symbol = CURRENCY_SYMBOLS.get(self.currency, self.currency)
        sign = "-" if self.amount < 0 else ""
        digits = f"{abs(self.amount):,.2f}"
        # swap en-US separators for pt-BR ones
        digits = digits.replace(",", "_").replace(".", ",").replace("_", ".")
        return f"{sign}{symbol} {digits}"
