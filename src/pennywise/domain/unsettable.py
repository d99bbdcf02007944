"""Tri-state handling for partial entity updates.

This module defines the ``UNSET`` sentinel, the `Unsettable` type alias,
and the `resolve` helper for applying partial updates to entities.

A field of type ``Unsettable[T]`` in an update input can take three states:

* ``UNSET``: the field is left unchanged by the update.
* ``None``: the field is explicitly cleared (only optional fields accept it;
  entities report a `RequiredFieldError` for mandatory ones).
* concrete ``T``: the field is explicitly updated to a new value.
"""

from dataclasses import dataclass
from typing import Any, TypeVar


def _get_unset() -> "_UnsetType":
    # Factory used by pickle to retrieve the one true instance.
    return UNSET


@dataclass(frozen=True)
class _UnsetType:
    """Type of ``UNSET``: marks update-input fields the caller did not provide."""

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_unset, ())


UNSET = _UnsetType()

T = TypeVar("T")
type Unsettable[T] = T | _UnsetType | None


def is_set(value: Any) -> bool:
    """Return True unless ``value`` is the ``UNSET`` sentinel."""
    return not isinstance(value, _UnsetType)


def resolve(value: "T | None | _UnsetType", current: T) -> T | None:
    """Resolve a tri-state update value against the current value.

    Args:
        value: The new value from the update (may be UNSET, None, or a concrete value).
        current: The value currently held by the entity.

    Returns:
        ``current`` if value is UNSET, otherwise ``value`` (which may be None).
    """
    if isinstance(value, _UnsetType):
        return current
    return value
