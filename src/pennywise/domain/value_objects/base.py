"""Base class for all value objects."""

from __future__ import annotations

import copy
from collections.abc import Mapping, Set
from types import MappingProxyType
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ValueObject(Generic[T]):
    """Immutable wrapper around a primitive or structured value.

    The wrapped payload is copied into private immutable storage at
    construction time:

    - mappings become read-only `MappingProxyType` views over private dicts,
    - lists and tuples become tuples,
    - sets become frozensets,
    - anything else is deep-copied.

    Mutating the object the caller passed in never changes `value`, and
    `value` itself rejects mutation.

    Equality is structural: two value objects of the same class are equal when
    their payloads are equal field-by-field, regardless of mapping key order.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", _freeze(value))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> T:
        """The wrapped (frozen) value."""
        return self._value

    def equals(self, other: object) -> bool:
        """Structural equality; False for None and for other classes."""
        if other is None:
            return False
        if self is other:
            return True
        if type(self) is not type(other):
            return False
        return _canonical(self._value) == _canonical(other._value)  # type: ignore[attr-defined]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((type(self), _canonical(self._value)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({_thaw(self._value)!r})"

    def __copy__(self) -> ValueObject[T]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> ValueObject[T]:
        return self


def _freeze(value: Any) -> Any:
    """Return an immutable deep copy of ``value``."""
    if value is None or isinstance(value, (str, bytes, int, float, complex, bool)):
        return value
    if isinstance(value, ValueObject):
        return value
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, Set):
        return frozenset(_freeze(item) for item in value)
    return copy.deepcopy(value)


def _canonical(value: Any) -> Any:
    """Normalize a frozen payload into a hashable, key-order-independent form."""
    if isinstance(value, ValueObject):
        return (type(value).__name__, _canonical(value.value))
    if isinstance(value, Mapping):
        return (
            "map",
            tuple(sorted(((repr(k), _canonical(v)) for k, v in value.items()))),
        )
    if isinstance(value, tuple):
        return ("seq", tuple(_canonical(item) for item in value))
    if isinstance(value, frozenset):
        return ("set", tuple(sorted(repr(_canonical(item)) for item in value)))
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    return value
