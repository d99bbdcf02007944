"""Bank entity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pennywise.domain.result import Result
from pennywise.domain.unsettable import UNSET, Unsettable, resolve
from pennywise.domain.validation import Validator

from .base import Entity

NAME_MIN_LENGTH = 3
CODE_LENGTH = 3


@dataclass(frozen=True, slots=True)
class BankCreateInput:
    """User-supplied data for registering a bank."""

    name: str
    code: str


@dataclass(frozen=True, slots=True)
class BankLoadInput:
    """Persisted state of a bank."""

    id: str
    name: str
    code: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class BankUpdateInput:
    """Partial update; ``UNSET`` fields are left unchanged."""

    name: Unsettable[str] = UNSET
    code: Unsettable[str] = UNSET


class Bank(Entity):
    """A financial institution, identified by its 3-character clearing code."""

    KIND = "bank"

    def __init__(self, name: str, code: str, **identity: Any) -> None:
        super().__init__(**identity)
        self._name = name
        self._code = code

    @property
    def name(self) -> str:
        """Display name."""
        return self._name

    @property
    def code(self) -> str:
        """Clearing code (e.g. ``"341"``)."""
        return self._code

    @classmethod
    def create(cls, data: BankCreateInput | Mapping[str, Any]) -> Result[Bank]:
        """Register a new bank."""
        data = cls._coerce_input(BankCreateInput, data)
        validator = Validator()
        cls._check_fields(validator, data.name, data.code)
        if validator.has_errors():
            return cls._rejected("create", validator.as_result())
        return Result.ok(cls(name=data.name, code=data.code))

    @classmethod
    def load(cls, data: BankLoadInput | Mapping[str, Any]) -> Result[Bank]:
        """Rehydrate a bank from persisted state.

        Unlike the other entities, name and code are re-validated on load.
        """
        data = cls._coerce_input(BankLoadInput, data)
        validator = Validator()
        cls._check_identity(validator, data.id)
        cls._check_fields(validator, data.name, data.code)
        if validator.has_errors():
            return cls._rejected("load", validator.as_result())
        return Result.ok(
            cls(
                name=data.name,
                code=data.code,
                entity_id=data.id,
                created_at=data.created_at,
                updated_at=data.updated_at,
                deleted_at=data.deleted_at,
            )
        )

    def update_data(self, data: BankUpdateInput | Mapping[str, Any]) -> Result[None]:
        """Apply a partial update; nothing changes if any field is invalid."""
        data = self._coerce_input(BankUpdateInput, data)
        validator = Validator()
        self._check_fields(
            validator, resolve(data.name, self._name), resolve(data.code, self._code)
        )
        if validator.has_errors():
            return self._rejected("update", validator.as_result())

        self._name = resolve(data.name, self._name)
        self._code = resolve(data.code, self._code)
        self._update_timestamp()
        return Result.ok(None)

    @staticmethod
    def _check_fields(validator: Validator, name: Any, code: Any) -> None:
        validator.check("name", name).required().min_length(NAME_MIN_LENGTH)
        validator.check("code", code).required().min_length(CODE_LENGTH).max_length(
            CODE_LENGTH
        )
