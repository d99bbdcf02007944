"""Bank account entity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pennywise.domain.errors import InvalidAccountBalanceError, InvalidCurrencyError
from pennywise.domain.result import Result
from pennywise.domain.unsettable import UNSET, Unsettable, is_set, resolve
from pennywise.domain.utils import as_finite_float
from pennywise.domain.validation import Validator
from pennywise.domain.value_objects import AccountType, UniqueId

from .base import Entity

# pylint: disable=too-many-instance-attributes,too-many-arguments

NAME_MIN_LENGTH = 3
AGENCY_MAX_LENGTH = 10
NUMBER_MAX_LENGTH = 20

# --- Inputs ---


@dataclass(frozen=True, slots=True)
class AccountCreateInput:
    """User-supplied data for opening a new account."""

    bank_id: str
    name: str
    type: str
    agency: str | None = None
    number: str | None = None


@dataclass(frozen=True, slots=True)
class AccountLoadInput:
    """Persisted state of an account."""

    id: str
    bank_id: str
    name: str
    type: str
    balance: float
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None
    agency: str | None = None
    number: str | None = None


@dataclass(frozen=True, slots=True)
class AccountUpdateInput:
    """Partial update; ``UNSET`` fields are left unchanged."""

    bank_id: Unsettable[str] = UNSET
    name: Unsettable[str] = UNSET
    type: Unsettable[str] = UNSET
    agency: Unsettable[str] = UNSET
    number: Unsettable[str] = UNSET


# --- Entity ---


class Account(Entity):
    """A bank account (checking or savings) held at a bank.

    The bank is referenced by id only. New accounts start with a zero balance.
    """

    KIND = "account"

    def __init__(
        self,
        bank_id: UniqueId,
        name: str,
        account_type: AccountType,
        balance: float,
        agency: str | None = None,
        number: str | None = None,
        **identity: Any,
    ) -> None:
        super().__init__(**identity)
        self._bank_id = bank_id
        self._name = name
        self._type = account_type
        self._balance = balance
        self._agency = agency
        self._number = number

    @property
    def bank_id(self) -> UniqueId:
        """Identifier of the bank holding the account."""
        return self._bank_id

    @property
    def name(self) -> str:
        """Display name."""
        return self._name

    @property
    def type(self) -> AccountType:
        """Checking (``corrente``) or savings (``poupanca``)."""
        return self._type

    @property
    def balance(self) -> float:
        """Current balance, never negative."""
        return self._balance

    @property
    def agency(self) -> str | None:
        """Branch (agency) code, if known."""
        return self._agency

    @property
    def number(self) -> str | None:
        """Account number, if known."""
        return self._number

    # --- Construction Paths ---

    @classmethod
    def create(cls, data: AccountCreateInput | Mapping[str, Any]) -> Result[Account]:
        """Open a new account with a zero balance."""
        data = cls._coerce_input(AccountCreateInput, data)
        validation = cls._validate_create(data)
        if validation.is_failure:
            return cls._rejected("create", validation)

        return Result.ok(
            cls(
                bank_id=UniqueId(data.bank_id),
                name=data.name,
                account_type=AccountType.create(data.type).value,
                balance=0,
                agency=data.agency,
                number=data.number,
            )
        )

    @classmethod
    def load(cls, data: AccountLoadInput | Mapping[str, Any]) -> Result[Account]:
        """Rehydrate an account from persisted state."""
        data = cls._coerce_input(AccountLoadInput, data)
        validator = Validator()
        cls._check_identity(validator, data.id)
        validator.check("bank_id", data.bank_id).required().is_valid_uuid()
        type_result = AccountType.create(data.type)
        validator.add_errors(type_result.errors)
        if validator.has_errors():
            return cls._rejected("load", validator.as_result())

        return Result.ok(
            cls(
                bank_id=UniqueId(data.bank_id),
                name=data.name,
                account_type=type_result.value,
                balance=data.balance,
                agency=data.agency,
                number=data.number,
                entity_id=data.id,
                created_at=data.created_at,
                updated_at=data.updated_at,
                deleted_at=data.deleted_at,
            )
        )

    # --- Updates ---

    def update_data(self, data: AccountUpdateInput | Mapping[str, Any]) -> Result[None]:
        """Apply a partial update; nothing changes if any field is invalid."""
        data = self._coerce_input(AccountUpdateInput, data)
        validation = self._validate_update(data)
        if validation.is_failure:
            return self._rejected("update", validation)

        if is_set(data.bank_id):
            self._bank_id = UniqueId(data.bank_id)
        if is_set(data.type):
            self._type = AccountType.create(data.type).value
        self._name = resolve(data.name, self._name)
        self._agency = resolve(data.agency, self._agency)
        self._number = resolve(data.number, self._number)
        self._update_timestamp()
        return Result.ok(None)

    def set_balance(self, new_balance: float) -> Result[None]:
        """Replace the balance; negative balances are rejected."""
        if as_finite_float(new_balance) is None:
            return self._rejected(
                "set_balance", Result.fail([InvalidCurrencyError("balance", new_balance)])
            )
        if new_balance < 0:
            return self._rejected(
                "set_balance",
                Result.fail([InvalidAccountBalanceError("balance", new_balance)]),
            )
        self._balance = new_balance
        self._update_timestamp()
        return Result.ok(None)

    # --- Validation ---

    @staticmethod
    def _validate_create(data: AccountCreateInput) -> Result[None]:
        validator = Validator()
        validator.check("bank_id", data.bank_id).required().is_valid_uuid()
        validator.check("name", data.name).required().min_length(NAME_MIN_LENGTH)

        type_result = AccountType.validate(data.type)
        if type_result.is_failure:
            validator.check("type", data.type).required()
            validator.add_errors(type_result.errors)

        validator.check("agency", data.agency).max_length(AGENCY_MAX_LENGTH)
        validator.check("number", data.number).max_length(NUMBER_MAX_LENGTH)
        return validator.as_result()

    @staticmethod
    def _validate_update(data: AccountUpdateInput) -> Result[None]:
        validator = Validator()
        if is_set(data.bank_id):
            validator.check("bank_id", data.bank_id).required().is_valid_uuid()
        if is_set(data.name):
            validator.check("name", data.name).required().min_length(NAME_MIN_LENGTH)
        if is_set(data.type):
            validator.add_errors(AccountType.validate(data.type).errors)
        if is_set(data.agency):
            validator.check("agency", data.agency).max_length(AGENCY_MAX_LENGTH)
        if is_set(data.number):
            validator.check("number", data.number).max_length(NUMBER_MAX_LENGTH)
        return validator.as_result()
