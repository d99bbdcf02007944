"""Transaction entity."""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pennywise.domain.errors import InvalidInstallmentError, InvalidTransactionSourceError
from pennywise.domain.result import Result
from pennywise.domain.unsettable import UNSET, Unsettable, is_set, resolve
from pennywise.domain.utils import as_finite_float
from pennywise.domain.validation import Validator
from pennywise.domain.value_objects import TransactionType, UniqueId

from .base import Entity

# pylint: disable=too-many-arguments,too-many-instance-attributes,too-many-locals

DESCRIPTION_MIN_LENGTH = 3


@dataclass(frozen=True, slots=True)
class TransactionCreateInput:
    """User-supplied data for a new transaction.

    Exactly one of ``account_id`` / ``invoice_id`` must be given. Installment
    fields are all-or-nothing.
    """

    date: dt.date
    type: str
    description: str
    category_id: str
    amount: float
    account_id: str | None = None
    invoice_id: str | None = None
    current_installment: int | None = None
    total_installments: int | None = None
    installment_group_id: str | None = None


@dataclass(frozen=True, slots=True)
class TransactionLoadInput:
    """Persisted state of a transaction."""

    id: str
    date: dt.date
    type: str
    description: str
    category_id: str
    amount: float
    created_at: dt.datetime
    updated_at: dt.datetime
    deleted_at: dt.datetime | None = None
    account_id: str | None = None
    invoice_id: str | None = None
    current_installment: int | None = None
    total_installments: int | None = None
    installment_group_id: str | None = None


@dataclass(frozen=True, slots=True)
class TransactionUpdateInput:
    """Partial update; ``UNSET`` fields are left unchanged."""

    date: Unsettable[dt.date] = UNSET
    type: Unsettable[str] = UNSET
    description: Unsettable[str] = UNSET
    category_id: Unsettable[str] = UNSET
    amount: Unsettable[float] = UNSET


class Transaction(Entity):
    """A single expense or income, booked on an account or on a card invoice.

    Installment purchases are split into one transaction per installment;
    the installments of one purchase share ``installment_group_id``.
    """

    KIND = "transaction"

    def __init__(
        self,
        transaction_type: TransactionType,
        amount: float,
        date: dt.date,
        description: str,
        category_id: UniqueId,
        account_id: UniqueId | None = None,
        invoice_id: UniqueId | None = None,
        current_installment: int | None = None,
        total_installments: int | None = None,
        installment_group_id: UniqueId | None = None,
        **identity: Any,
    ) -> None:
        super().__init__(**identity)
        self._type = transaction_type
        self._amount = amount
        self._date = date
        self._description = description
        self._category_id = category_id
        self._account_id = account_id
        self._invoice_id = invoice_id
        self._current_installment = current_installment
        self._total_installments = total_installments
        self._installment_group_id = installment_group_id

    @property
    def type(self) -> TransactionType:
        """Expense or income."""
        return self._type

    @property
    def amount(self) -> float:
        """Non-negative amount; the direction comes from ``type``."""
        return self._amount

    @property
    def date(self) -> dt.date:
        """When the transaction happened."""
        return self._date

    @property
    def description(self) -> str:
        """Free-text description."""
        return self._description

    @property
    def category_id(self) -> UniqueId:
        """Identifier of the category."""
        return self._category_id

    @property
    def account_id(self) -> UniqueId | None:
        """Identifier of the account, for account transactions."""
        return self._account_id

    @property
    def invoice_id(self) -> UniqueId | None:
        """Identifier of the invoice, for credit card transactions."""
        return self._invoice_id

    @property
    def current_installment(self) -> int | None:
        """1-based position of this installment."""
        return self._current_installment

    @property
    def total_installments(self) -> int | None:
        """Number of installments of the purchase."""
        return self._total_installments

    @property
    def installment_group_id(self) -> UniqueId | None:
        """Identifier shared by all installments of one purchase."""
        return self._installment_group_id

    def is_expense(self) -> bool:
        return self._type.is_expense()

    def is_income(self) -> bool:
        return self._type.is_income()

    def is_installment(self) -> bool:
        """Whether the purchase is split into more than one installment."""
        return bool(self._total_installments) and self._total_installments > 1

    def is_from_account(self) -> bool:
        return self._account_id is not None

    def is_from_invoice(self) -> bool:
        return self._invoice_id is not None

    # --- Construction Paths ---

    @classmethod
    def create(
        cls, data: TransactionCreateInput | Mapping[str, Any]
    ) -> Result[Transaction]:
        """Record a new transaction."""
        data = cls._coerce_input(TransactionCreateInput, data)
        validator = Validator()
        validator.check("date", data.date).required().is_valid_date()
        validator.check("description", data.description).required().min_length(
            DESCRIPTION_MIN_LENGTH
        )
        validator.check("category_id", data.category_id).required().is_valid_uuid()
        validator.check("amount", data.amount).required().is_currency()
        type_result = TransactionType.create(data.type)
        validator.add_errors(type_result.errors)

        if bool(data.account_id) == bool(data.invoice_id):
            validator.add_error(InvalidTransactionSourceError())
        validator.check("account_id", data.account_id).is_valid_uuid()
        validator.check("invoice_id", data.invoice_id).is_valid_uuid()

        cls._check_installments(validator, data)
        if validator.has_errors():
            return cls._rejected("create", validator.as_result())

        return Result.ok(cls._build(data, type_result.value))

    @classmethod
    def load(cls, data: TransactionLoadInput | Mapping[str, Any]) -> Result[Transaction]:
        """Rehydrate a transaction from persisted state."""
        data = cls._coerce_input(TransactionLoadInput, data)
        validator = Validator()
        cls._check_identity(validator, data.id)
        validator.check("category_id", data.category_id).required().is_valid_uuid()
        validator.check("account_id", data.account_id).is_valid_uuid()
        validator.check("invoice_id", data.invoice_id).is_valid_uuid()
        validator.check("installment_group_id", data.installment_group_id).is_valid_uuid()
        type_result = TransactionType.create(data.type)
        validator.add_errors(type_result.errors)
        if validator.has_errors():
            return cls._rejected("load", validator.as_result())

        return Result.ok(
            cls._build(
                data,
                type_result.value,
                entity_id=data.id,
                created_at=data.created_at,
                updated_at=data.updated_at,
                deleted_at=data.deleted_at,
            )
        )

    @classmethod
    def _build(
        cls,
        data: TransactionCreateInput | TransactionLoadInput,
        transaction_type: TransactionType,
        **identity: Any,
    ) -> Transaction:
        def optional_id(value: str | None) -> UniqueId | None:
            return None if not value or _is_blank(value) else UniqueId(value)

        return cls(
            transaction_type=transaction_type,
            amount=data.amount,
            date=data.date,
            description=data.description,
            category_id=UniqueId(data.category_id),
            account_id=optional_id(data.account_id),
            invoice_id=optional_id(data.invoice_id),
            current_installment=data.current_installment,
            total_installments=data.total_installments,
            installment_group_id=optional_id(data.installment_group_id),
            **identity,
        )

    # --- Updates ---

    def update_data(
        self, data: TransactionUpdateInput | Mapping[str, Any]
    ) -> Result[None]:
        """Apply a partial update; nothing changes if any field is invalid."""
        data = self._coerce_input(TransactionUpdateInput, data)
        validator = Validator()
        if is_set(data.date):
            validator.check("date", data.date).required().is_valid_date()
        if is_set(data.type):
            validator.add_errors(TransactionType.validate(data.type).errors)
        if is_set(data.description):
            validator.check("description", data.description).required().min_length(
                DESCRIPTION_MIN_LENGTH
            )
        if is_set(data.category_id):
            validator.check("category_id", data.category_id).required().is_valid_uuid()
        if is_set(data.amount):
            validator.check("amount", data.amount).required().is_currency()
        if validator.has_errors():
            return self._rejected("update", validator.as_result())

        self._date = resolve(data.date, self._date)
        if is_set(data.type):
            self._type = TransactionType.create(data.type).value
        self._description = resolve(data.description, self._description)
        if is_set(data.category_id):
            self._category_id = UniqueId(data.category_id)
        self._amount = resolve(data.amount, self._amount)
        self._update_timestamp()
        return Result.ok(None)

    # --- Validation ---

    @staticmethod
    def _check_installments(validator: Validator, data: TransactionCreateInput) -> None:
        current = data.current_installment
        total = data.total_installments
        group_id = data.installment_group_id
        group_missing = _is_blank(group_id)
        if current is None and total is None and group_missing:
            return

        if total is None:
            validator.add_error(InvalidInstallmentError.missing_total_installments())
        if current is None:
            validator.add_error(InvalidInstallmentError.missing_current_installment())
        if group_missing:
            validator.add_error(InvalidInstallmentError.missing_group_id())

        if _is_count(current) and _is_count(total) and current > total:
            validator.add_error(
                InvalidInstallmentError.current_greater_than_total(current, total)
            )
        if current is not None and not _is_count(current):
            validator.add_error(
                InvalidInstallmentError.invalid_value("current installment", current)
            )
        if total is not None and not _is_count(total):
            validator.add_error(
                InvalidInstallmentError.invalid_value("total installments", total)
            )
        if not group_missing:
            validator.check("installment_group_id", group_id).is_valid_uuid()


def _is_count(value: Any) -> bool:
    """Positive integer (integral floats such as ``2.0`` included)."""
    if (as_float := as_finite_float(value)) is None:
        return False
    return as_float.is_integer() and as_float >= 1


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
