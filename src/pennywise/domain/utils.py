"""Domain layer utilities."""

import math
from collections.abc import Callable, Mapping
from dataclasses import MISSING, Field, fields, is_dataclass
from numbers import Real
from types import NoneType
from typing import Any, TypeVar, cast, get_args, get_origin, get_type_hints

D = TypeVar("D")


def dict_to_dataclass(
    dc_type: type[D],
    values: Mapping[str, Any],
    *,
    strict: bool = True,
    fill_missing: bool = False,
) -> D:
    """Recursively build a dataclass instance from a (possibly nested) mapping.

    Entity factories use this to accept plain mappings (e.g. rows handed over
    by a persistence layer) wherever they accept their input dataclasses.

    Args:
        dc_type: The dataclass type to build.
        values: The mapping containing the data.
        strict: When True, keys that are not fields of ``dc_type`` are rejected.
        fill_missing: When True, absent fields without a default are set to
            None instead of raising, so validation can report them.

    Returns:
        An instance of dc_type populated with data from values. Fields absent
        from ``values`` take their declared default (``UNSET`` for update inputs).

    Raises:
        TypeError: If ``dc_type`` is not a dataclass, or if ``strict`` and
            ``values`` holds unknown keys.
        KeyError: If a field without a default is missing from ``values`` and
            ``fill_missing`` is False.
    """

    if not is_dataclass(dc_type):
        raise TypeError(f"{dc_type} is not a dataclass type")

    dc_fields = {f.name: f for f in fields(dc_type) if f.init}
    if strict and (unknown := sorted(set(values) - set(dc_fields))):
        raise TypeError(f"Unknown field(s) for {dc_type.__name__}: {', '.join(unknown)}")

    type_hints = get_type_hints(dc_type)
    kwargs: dict[str, Any] = {}
    for name, field in dc_fields.items():
        if name not in values:
            if _has_default(field):
                kwargs[name] = _default_of(field)
            elif fill_missing:
                kwargs[name] = None
            else:
                raise KeyError(f"Missing required field '{name}'")
            continue
        inner = values[name]
        target_dc = _resolve_dataclass_type(type_hints.get(name, field.type))
        if target_dc is not None and isinstance(inner, Mapping):
            kwargs[name] = dict_to_dataclass(
                target_dc, inner, strict=strict, fill_missing=fill_missing
            )
        else:
            kwargs[name] = inner
    return cast(D, dc_type(**kwargs))


def as_finite_float(value: Any) -> float | None:
    """Convert a real number to a finite float.

    Returns None for booleans, non-numbers, NaN, infinities and integers too
    large for a float.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    try:
        converted = float(value)
    except OverflowError:
        return None
    return converted if math.isfinite(converted) else None


def _has_default(field: Field) -> bool:
    return field.default is not MISSING or field.default_factory is not MISSING


def _default_of(field: Field) -> Any:
    if field.default is not MISSING:
        return field.default
    factory = cast(Callable[[], Any], field.default_factory)
    return factory()


def _resolve_dataclass_type(field_type: Any) -> type[Any] | None:
    origin = get_origin(field_type)
    if origin is None:
        return cast(type[Any], field_type) if is_dataclass(field_type) else None
    args = [arg for arg in get_args(field_type) if arg is not NoneType]
    if len(args) == 1 and is_dataclass(args[0]):
        return cast(type[Any], args[0])
    return None
