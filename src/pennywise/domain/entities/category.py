"""Category entity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pennywise.domain.errors import InvalidCategoryParentError
from pennywise.domain.result import Result
from pennywise.domain.unsettable import UNSET, Unsettable, is_set, resolve
from pennywise.domain.validation import Validator
from pennywise.domain.value_objects import CategoryType, UniqueId

from .base import Entity

NAME_MIN_LENGTH = 3


@dataclass(frozen=True, slots=True)
class CategoryCreateInput:
    """User-supplied data for a new category."""

    name: str
    type: str
    description: str | None = None
    parent_id: str | None = None


@dataclass(frozen=True, slots=True)
class CategoryLoadInput:
    """Persisted state of a category."""

    id: str
    name: str
    type: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None
    description: str | None = None
    parent_id: str | None = None


@dataclass(frozen=True, slots=True)
class CategoryUpdateInput:
    """Partial update; ``UNSET`` fields are left unchanged.

    ``None`` clears ``description`` or ``parent_id`` (the latter turns the
    category back into a root category).
    """

    name: Unsettable[str] = UNSET
    type: Unsettable[str] = UNSET
    description: Unsettable[str] = UNSET
    parent_id: Unsettable[str] = UNSET


class Category(Entity):
    """Expense or income category, optionally nested under a parent category."""

    KIND = "category"

    def __init__(
        self,
        name: str,
        category_type: CategoryType,
        description: str | None = None,
        parent_id: UniqueId | None = None,
        **identity: Any,
    ) -> None:
        super().__init__(**identity)
        self._name = name
        self._type = category_type
        self._description = description
        self._parent_id = parent_id

    @property
    def name(self) -> str:
        """Display name."""
        return self._name

    @property
    def type(self) -> CategoryType:
        """Expense or income."""
        return self._type

    @property
    def description(self) -> str | None:
        """Free-text description, if any."""
        return self._description

    @property
    def parent_id(self) -> UniqueId | None:
        """Identifier of the parent category, or None for a root category."""
        return self._parent_id

    def is_root(self) -> bool:
        """Whether the category has no parent."""
        return self._parent_id is None

    # --- Construction Paths ---

    @classmethod
    def create(cls, data: CategoryCreateInput | Mapping[str, Any]) -> Result[Category]:
        """Create a new category."""
        data = cls._coerce_input(CategoryCreateInput, data)
        validator = Validator()
        validator.check("name", data.name).required().min_length(NAME_MIN_LENGTH)
        validator.check("parent_id", data.parent_id).is_valid_uuid()
        validator.check("type", data.type).required()
        type_result = CategoryType.create(data.type)
        validator.add_errors(type_result.errors)
        if validator.has_errors():
            return cls._rejected("create", validator.as_result())

        return Result.ok(
            cls(
                name=data.name,
                category_type=type_result.value,
                description=data.description,
                parent_id=UniqueId(data.parent_id) if data.parent_id else None,
            )
        )

    @classmethod
    def load(cls, data: CategoryLoadInput | Mapping[str, Any]) -> Result[Category]:
        """Rehydrate a category from persisted state."""
        data = cls._coerce_input(CategoryLoadInput, data)
        validator = Validator()
        cls._check_identity(validator, data.id)
        validator.check("parent_id", data.parent_id).is_valid_uuid()
        type_result = CategoryType.create(data.type)
        validator.add_errors(type_result.errors)
        if validator.has_errors():
            return cls._rejected("load", validator.as_result())

        return Result.ok(
            cls(
                name=data.name,
                category_type=type_result.value,
                description=data.description,
                parent_id=UniqueId(data.parent_id) if data.parent_id else None,
                entity_id=data.id,
                created_at=data.created_at,
                updated_at=data.updated_at,
                deleted_at=data.deleted_at,
            )
        )

    # --- Updates ---

    def update_data(self, data: CategoryUpdateInput | Mapping[str, Any]) -> Result[None]:
        """Apply a partial update; nothing changes if any field is invalid."""
        data = self._coerce_input(CategoryUpdateInput, data)
        validator = Validator()
        if is_set(data.name):
            validator.check("name", data.name).required().min_length(NAME_MIN_LENGTH)
        if is_set(data.parent_id):
            validator.check("parent_id", data.parent_id).is_valid_uuid()
            if self._is_self(data.parent_id):
                validator.add_error(InvalidCategoryParentError("parent_id", self.id.value))
        if is_set(data.type):
            validator.add_errors(CategoryType.validate(data.type).errors)
        if validator.has_errors():
            return self._rejected("update", validator.as_result())

        self._name = resolve(data.name, self._name)
        self._description = resolve(data.description, self._description)
        if is_set(data.parent_id):
            self._parent_id = UniqueId(data.parent_id) if data.parent_id else None
        if is_set(data.type):
            self._type = CategoryType.create(data.type).value
        self._update_timestamp()
        return Result.ok(None)

    def _is_self(self, candidate: Any) -> bool:
        return isinstance(candidate, str) and candidate.lower() == self.id.value.lower()
