"""Credit card entity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pennywise.domain.result import Result
from pennywise.domain.unsettable import UNSET, Unsettable, is_set, resolve
from pennywise.domain.validation import Validator
from pennywise.domain.value_objects import UniqueId

from .base import Entity

# pylint: disable=too-many-arguments

NAME_MIN_LENGTH = 3
FIRST_DAY, LAST_DAY = 1, 31


@dataclass(frozen=True, slots=True)
class CardCreateInput:
    """User-supplied data for a new credit card."""

    name: str
    limit: float
    closing_day: int
    due_day: int
    account_id: str


@dataclass(frozen=True, slots=True)
class CardLoadInput:
    """Persisted state of a credit card."""

    id: str
    name: str
    limit: float
    closing_day: int
    due_day: int
    account_id: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class CardUpdateInput:
    """Partial update; ``UNSET`` fields are left unchanged."""

    name: Unsettable[str] = UNSET
    limit: Unsettable[float] = UNSET
    closing_day: Unsettable[int] = UNSET
    due_day: Unsettable[int] = UNSET
    account_id: Unsettable[str] = UNSET


class Card(Entity):
    """A credit card paid from an account.

    ``closing_day`` is the day of the month the invoice closes and ``due_day``
    the day it must be paid.
    """

    KIND = "card"

    def __init__(
        self,
        name: str,
        limit: float,
        closing_day: int,
        due_day: int,
        account_id: UniqueId,
        **identity: Any,
    ) -> None:
        super().__init__(**identity)
        self._name = name
        self._limit = limit
        self._closing_day = closing_day
        self._due_day = due_day
        self._account_id = account_id

    @property
    def name(self) -> str:
        """Display name."""
        return self._name

    @property
    def limit(self) -> float:
        """Credit limit."""
        return self._limit

    @property
    def closing_day(self) -> int:
        """Day of the month the invoice closes."""
        return self._closing_day

    @property
    def due_day(self) -> int:
        """Day of the month the invoice is due."""
        return self._due_day

    @property
    def account_id(self) -> UniqueId:
        """Identifier of the account paying the card."""
        return self._account_id

    # --- Construction Paths ---

    @classmethod
    def create(cls, data: CardCreateInput | Mapping[str, Any]) -> Result[Card]:
        """Register a new credit card."""
        data = cls._coerce_input(CardCreateInput, data)
        validator = Validator()
        validator.check("name", data.name).required().min_length(NAME_MIN_LENGTH)
        validator.check("limit", data.limit).required().min_number(0)
        validator.check("closing_day", data.closing_day).required().number_in_range(
            FIRST_DAY, LAST_DAY
        )
        validator.check("due_day", data.due_day).required().number_in_range(
            FIRST_DAY, LAST_DAY
        )
        validator.check("account_id", data.account_id).required().is_valid_uuid()
        if validator.has_errors():
            return cls._rejected("create", validator.as_result())

        return Result.ok(
            cls(
                name=data.name,
                limit=data.limit,
                closing_day=data.closing_day,
                due_day=data.due_day,
                account_id=UniqueId(data.account_id),
            )
        )

    @classmethod
    def load(cls, data: CardLoadInput | Mapping[str, Any]) -> Result[Card]:
        """Rehydrate a credit card from persisted state."""
        data = cls._coerce_input(CardLoadInput, data)
        validator = Validator()
        cls._check_identity(validator, data.id)
        validator.check("account_id", data.account_id).required().is_valid_uuid()
        if validator.has_errors():
            return cls._rejected("load", validator.as_result())

        return Result.ok(
            cls(
                name=data.name,
                limit=data.limit,
                closing_day=data.closing_day,
                due_day=data.due_day,
                account_id=UniqueId(data.account_id),
                entity_id=data.id,
                created_at=data.created_at,
                updated_at=data.updated_at,
                deleted_at=data.deleted_at,
            )
        )

    # --- Updates ---

    def update_data(self, data: CardUpdateInput | Mapping[str, Any]) -> Result[None]:
        """Apply a partial update; nothing changes if any field is invalid."""
        data = self._coerce_input(CardUpdateInput, data)
        validator = Validator()
        if is_set(data.name):
            validator.check("name", data.name).required().min_length(NAME_MIN_LENGTH)
        if is_set(data.limit):
            validator.check("limit", data.limit).required().min_number(0)
        if is_set(data.closing_day):
            validator.check("closing_day", data.closing_day).required().number_in_range(
                FIRST_DAY, LAST_DAY
            )
        if is_set(data.due_day):
            validator.check("due_day", data.due_day).required().number_in_range(
                FIRST_DAY, LAST_DAY
            )
        if is_set(data.account_id):
            validator.check("account_id", data.account_id).required().is_valid_uuid()
        if validator.has_errors():
            return self._rejected("update", validator.as_result())

        self._name = resolve(data.name, self._name)
        self._limit = resolve(data.limit, self._limit)
        self._closing_day = resolve(data.closing_day, self._closing_day)
        self._due_day = resolve(data.due_day, self._due_day)
        if is_set(data.account_id):
            self._account_id = UniqueId(data.account_id)
        self._update_timestamp()
        return Result.ok(None)

    def update_limit(self, new_limit: float) -> Result[None]:
        """Change the credit limit; it cannot go below zero."""
        validator = Validator()
        validator.check("limit", new_limit).required().min_number(0)
        if validator.has_errors():
            return self._rejected("update_limit", validator.as_result())

        self._limit = new_limit
        self._update_timestamp()
        return Result.ok(None)
