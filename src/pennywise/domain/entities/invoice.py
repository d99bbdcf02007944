"""Credit card invoice entity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from pennywise.domain.result import Result
from pennywise.domain.unsettable import UNSET, Unsettable, is_set, resolve
from pennywise.domain.validation import Validator
from pennywise.domain.value_objects import InvoiceState, InvoiceStatus, UniqueId

from .base import Entity

# pylint: disable=too-many-arguments,too-many-instance-attributes


@dataclass(frozen=True, slots=True)
class InvoiceCreateInput:
    """User-supplied data for a new invoice.

    ``total_amount`` defaults to 0 and ``status`` to ``"open"``.
    """

    card_id: str
    due_date: date
    start_date: date
    end_date: date
    total_amount: float | None = None
    status: str | None = None


@dataclass(frozen=True, slots=True)
class InvoiceLoadInput:
    """Persisted state of an invoice."""

    id: str
    card_id: str
    due_date: date
    start_date: date
    end_date: date
    total_amount: float
    status: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class InvoiceUpdateInput:
    """Partial update; ``UNSET`` fields are left unchanged."""

    due_date: Unsettable[date] = UNSET
    start_date: Unsettable[date] = UNSET
    end_date: Unsettable[date] = UNSET
    total_amount: Unsettable[float] = UNSET
    status: Unsettable[str] = UNSET


class Invoice(Entity):
    """The statement of a credit card for one billing period.

    INVARIANT: ``end_date`` is strictly after ``start_date``.
    """

    KIND = "invoice"

    def __init__(
        self,
        card_id: UniqueId,
        due_date: date,
        start_date: date,
        end_date: date,
        total_amount: float,
        status: InvoiceStatus,
        **identity: Any,
    ) -> None:
        super().__init__(**identity)
        self._card_id = card_id
        self._due_date = due_date
        self._start_date = start_date
        self._end_date = end_date
        self._total_amount = total_amount
        self._status = status

    @property
    def card_id(self) -> UniqueId:
        """Identifier of the card the invoice belongs to."""
        return self._card_id

    @property
    def due_date(self) -> date:
        """Payment deadline."""
        return self._due_date

    @property
    def start_date(self) -> date:
        """First day of the billing period."""
        return self._start_date

    @property
    def end_date(self) -> date:
        """Last day of the billing period."""
        return self._end_date

    @property
    def total_amount(self) -> float:
        """Amount billed."""
        return self._total_amount

    @property
    def status(self) -> InvoiceStatus:
        """Open, closed or paid."""
        return self._status

    # --- Construction Paths ---

    @classmethod
    def create(cls, data: InvoiceCreateInput | Mapping[str, Any]) -> Result[Invoice]:
        """Open a new invoice for a card."""
        data = cls._coerce_input(InvoiceCreateInput, data)
        validator = Validator()
        validator.check("card_id", data.card_id).required().is_valid_uuid()
        validator.check("due_date", data.due_date).required().is_valid_date()
        validator.check("start_date", data.start_date).required().is_valid_date()
        validator.check("end_date", data.end_date).required().is_valid_date().is_date_after(
            data.start_date, "start_date"
        )
        validator.check("total_amount", data.total_amount).is_currency()
        if data.status is not None:
            validator.add_errors(InvoiceStatus.validate(data.status).errors)
        if validator.has_errors():
            return cls._rejected("create", validator.as_result())

        status = data.status if data.status is not None else InvoiceState.OPEN
        return Result.ok(
            cls(
                card_id=UniqueId(data.card_id),
                due_date=data.due_date,
                start_date=data.start_date,
                end_date=data.end_date,
                total_amount=data.total_amount if data.total_amount is not None else 0,
                status=InvoiceStatus.create(status).value,
            )
        )

    @classmethod
    def load(cls, data: InvoiceLoadInput | Mapping[str, Any]) -> Result[Invoice]:
        """Rehydrate an invoice from persisted state."""
        data = cls._coerce_input(InvoiceLoadInput, data)
        validator = Validator()
        cls._check_identity(validator, data.id)
        validator.check("card_id", data.card_id).required().is_valid_uuid()
        status_result = InvoiceStatus.create(data.status)
        validator.add_errors(status_result.errors)
        if validator.has_errors():
            return cls._rejected("load", validator.as_result())

        return Result.ok(
            cls(
                card_id=UniqueId(data.card_id),
                due_date=data.due_date,
                start_date=data.start_date,
                end_date=data.end_date,
                total_amount=data.total_amount,
                status=status_result.value,
                entity_id=data.id,
                created_at=data.created_at,
                updated_at=data.updated_at,
                deleted_at=data.deleted_at,
            )
        )

    # --- Updates ---

    def update_status(self, status: str) -> Result[None]:
        """Move the invoice to another status."""
        status_result = InvoiceStatus.create(status)
        if status_result.is_failure:
            return self._rejected("update_status", status_result)

        self._status = status_result.value
        self._update_timestamp()
        return Result.ok(None)

    def update_total_amount(self, amount: float) -> Result[None]:
        """Replace the billed amount; it must be a valid currency value."""
        validator = Validator()
        validator.check("total_amount", amount).required().is_currency()
        if validator.has_errors():
            return self._rejected("update_total_amount", validator.as_result())

        self._total_amount = amount
        self._update_timestamp()
        return Result.ok(None)

    def update_data(self, data: InvoiceUpdateInput | Mapping[str, Any]) -> Result[None]:
        """Apply a partial update; nothing changes if any field is invalid.

        Changing either end of the billing period re-checks the range against
        the other end's new or current value.
        """
        data = self._coerce_input(InvoiceUpdateInput, data)
        validator = Validator()
        if is_set(data.due_date):
            validator.check("due_date", data.due_date).required().is_valid_date()
        if is_set(data.start_date):
            validator.check("start_date", data.start_date).required().is_valid_date()
        if is_set(data.start_date) or is_set(data.end_date):
            end_date = resolve(data.end_date, self._end_date)
            start_date = resolve(data.start_date, self._start_date)
            validator.check("end_date", end_date).required().is_valid_date().is_date_after(
                start_date, "start_date"
            )
        if is_set(data.total_amount):
            validator.check("total_amount", data.total_amount).required().is_currency()
        if is_set(data.status):
            validator.add_errors(InvoiceStatus.validate(data.status).errors)
        if validator.has_errors():
            return self._rejected("update", validator.as_result())

        self._due_date = resolve(data.due_date, self._due_date)
        self._start_date = resolve(data.start_date, self._start_date)
        self._end_date = resolve(data.end_date, self._end_date)
        self._total_amount = resolve(data.total_amount, self._total_amount)
        if is_set(data.status):
            self._status = InvoiceStatus.create(data.status).value
        self._update_timestamp()
        return Result.ok(None)
