"""UUID v4 identifiers for entities and cross-entity references.

INVARIANT: a UniqueId always wraps a well-formed UUID v4 string. Identifiers
are permanent; once assigned, an entity's id never changes.
"""

from __future__ import annotations

import re
import uuid
from typing import Any

from pennywise.domain.errors import InvalidUniqueIdError, InvalidUuidError
from pennywise.domain.result import Result

from .base import ValueObject

UUID_V4_PATTERN: re.Pattern[str] = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


class UniqueId(ValueObject[str]):
    """Value object wrapping a UUID v4 string."""

    __slots__ = ()

    def __init__(self, value: str) -> None:
        """Wrap ``value``.

        Raises:
            InvalidUniqueIdError: If ``value`` is not a UUID v4 string. Use
                `UniqueId.create` for untrusted input.
        """
        if not self.is_valid(value):
            raise InvalidUniqueIdError(value)
        super().__init__(value)

    @staticmethod
    def is_valid(value: Any) -> bool:
        """Check whether ``value`` is a UUID v4 string."""
        return isinstance(value, str) and UUID_V4_PATTERN.match(value) is not None

    @classmethod
    def generate(cls) -> UniqueId:
        """Return a fresh random identifier."""
        return cls(str(uuid.uuid4()))

    @classmethod
    def create(cls, value: str | None = None, field: str = "id") -> Result[UniqueId]:
        """Build an identifier from untrusted input.

        Args:
            value: The candidate identifier. A new one is generated when omitted.
            field: Field name reported in the error if ``value`` is malformed.

        Returns:
            A successful result with the identifier, or a failure carrying an
            `InvalidUuidError` for ``field``.
        """
        if not value:
            return Result.ok(cls.generate())
        if not cls.is_valid(value):
            return Result.fail([InvalidUuidError(field, value)])
        return Result.ok(cls(value))

    def __str__(self) -> str:
        return self.value
