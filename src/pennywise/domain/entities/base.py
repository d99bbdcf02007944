"""Base class for all entities."""

from __future__ import annotations

import abc
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, ClassVar, TypeVar

from pennywise.domain.result import Result
from pennywise.domain.utils import dict_to_dataclass
from pennywise.domain.validation import Validator
from pennywise.domain.value_objects import UniqueId

logger = logging.getLogger(__name__)

I = TypeVar("I")


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Entity(abc.ABC):
    """Generic base class for all entities.

    Provides identity (a UUID v4 `UniqueId`), audit timestamps and soft
    deletion. Equality is identity-based: two entities with the same id are
    equal whatever their other fields hold.
    """

    KIND: ClassVar[str]
    """Human-readable entity name used in log messages (e.g. ``"account"``)."""

    def __init__(
        self,
        entity_id: str | UniqueId | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        deleted_at: datetime | None = None,
    ) -> None:
        """Initialise identity and timestamps.

        Args:
            entity_id: Existing identifier; a new one is generated when omitted.
            created_at: Creation time (defaults to now, UTC).
            updated_at: Last update time (defaults to now, UTC).
            deleted_at: Soft-deletion time, or None.

        Raises:
            InvalidUniqueIdError: If ``entity_id`` is a malformed string.
        """
        if isinstance(entity_id, UniqueId):
            self._id = entity_id
        else:
            self._id = UniqueId(entity_id) if entity_id else UniqueId.generate()
        now = utc_now()
        self._created_at: datetime = created_at or now
        self._updated_at: datetime = updated_at or now
        self._deleted_at: datetime | None = deleted_at

    # --- Identity & audit ---

    @property
    def id(self) -> UniqueId:
        """The entity's permanent identifier."""
        return self._id

    @property
    def created_at(self) -> datetime:
        """When the entity was created."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """When the entity last changed."""
        return self._updated_at

    @property
    def deleted_at(self) -> datetime | None:
        """When the entity was soft-deleted, or None."""
        return self._deleted_at

    @property
    def is_deleted(self) -> bool:
        """Whether the entity has been soft-deleted."""
        return self._deleted_at is not None

    def delete(self) -> Result[None]:
        """Soft-delete the entity. Deleting twice keeps the first timestamp."""
        self._mark_as_deleted()
        return Result.ok(None)

    # --- Equality ---

    def equals(self, other: object) -> bool:
        """Identity equality; never equal to None or to a non-entity."""
        if other is None or not isinstance(other, Entity):
            return False
        if self is other:
            return True
        return self._id.equals(other._id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id.value!r})"

    # --- Protected mutation primitives ---

    def _mark_as_deleted(self) -> None:
        if self._deleted_at is None:
            self._deleted_at = utc_now()

    def _update_timestamp(self) -> None:
        self._updated_at = utc_now()

    # --- Helpers for factories ---

    @staticmethod
    def _coerce_input(input_type: type[I], data: I | Mapping[str, Any]) -> I:
        """Accept either an input dataclass or an equivalent mapping.

        Keys absent from a mapping become None and are reported by the
        validators; unknown keys raise `TypeError`.
        """
        if isinstance(data, Mapping):
            return dict_to_dataclass(input_type, data, fill_missing=True)
        return data

    @staticmethod
    def _check_identity(validator: Validator, entity_id: Any) -> None:
        """Checks shared by every ``load``: the persisted id must be a UUID v4."""
        validator.check("id", entity_id).required().is_valid_uuid()

    @classmethod
    def _rejected(cls, operation: str, failed: Result[Any]) -> Result[Any]:
        """Log a failed validation pass and pass its errors on."""
        logger.debug(
            "%s %s rejected: %d error(s) on %s",
            cls.KIND,
            operation,
            len(failed.errors),
            sorted({error.field for error in failed.errors}),
        )
        return Result.fail(failed.errors)
