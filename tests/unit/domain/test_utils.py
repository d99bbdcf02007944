"""Unit tests for pennywise.domain.utils module."""

import math
import re
from dataclasses import asdict, dataclass

import pytest

from pennywise.domain.unsettable import UNSET, Unsettable
from pennywise.domain.utils import as_finite_float, dict_to_dataclass

# pylint: disable=missing-class-docstring, magic-value-comparison


@dataclass(frozen=True, slots=True)
class Inner:
    a: int
    b: str


@dataclass(frozen=True, slots=True)
class Outer:
    x: float
    y: Inner
    z: dict[str, int]


@dataclass(frozen=True, slots=True)
class Patch:
    name: Unsettable[str] = UNSET
    note: str | None = None


def test_dict_to_dataclass_round_trip():
    """Test that dict_to_dataclass rebuilds a nested dataclass from its dict form."""
    original = Outer(x=3.14, y=Inner(a=42, b="hello"), z={"key": 1})
    rebuilt = dict_to_dataclass(Outer, asdict(original))
    assert rebuilt == original


def test_dict_to_dataclass_type_error():
    """Test that dict_to_dataclass raises TypeError when given a non-dataclass type."""
    with pytest.raises(
        TypeError, match=re.escape("<class 'int'> is not a dataclass type")
    ):
        dict_to_dataclass(int, {"a": 1})


@pytest.mark.parametrize("data, missing", [({"a": 1}, "b"), ({"b": "test"}, "a")])
def test_dict_to_dataclass_missing_field(data, missing):
    """Test that dict_to_dataclass raises KeyError when a required field is missing."""
    with pytest.raises(KeyError, match=f"Missing required field '{missing}'"):
        dict_to_dataclass(Inner, data)


def test_dict_to_dataclass_fills_defaults():
    """Test that absent fields take their defaults, UNSET included."""
    patch = dict_to_dataclass(Patch, {})
    assert patch.name is UNSET
    assert patch.note is None


def test_dict_to_dataclass_keeps_explicit_none():
    """Test that an explicit None is passed through rather than defaulted."""
    patch = dict_to_dataclass(Patch, {"name": None})
    assert patch.name is None


def test_dict_to_dataclass_rejects_unknown_keys():
    """Test that strict mode rejects keys that are not fields."""
    with pytest.raises(TypeError, match="Unknown field\\(s\\) for Inner: c"):
        dict_to_dataclass(Inner, {"a": 1, "b": "x", "c": 2})


def test_dict_to_dataclass_lenient_mode_ignores_unknown_keys():
    """Test that strict=False drops unknown keys."""
    assert dict_to_dataclass(Inner, {"a": 1, "b": "x", "c": 2}, strict=False) == Inner(
        a=1, b="x"
    )


def test_dict_to_dataclass_fill_missing():
    """Test that fill_missing sets absent required fields to None."""
    assert dict_to_dataclass(Inner, {"a": 1}, fill_missing=True) == Inner(a=1, b=None)
    assert dict_to_dataclass(Patch, {}, fill_missing=True).name is UNSET


def test_dict_to_dataclass_fill_missing_keeps_strict_check():
    """Test that fill_missing does not relax the unknown-key check."""
    with pytest.raises(TypeError):
        dict_to_dataclass(Inner, {"c": 2}, fill_missing=True)


@pytest.mark.parametrize(
    "value, expected",
    [
        (10, 10.0),
        (2.5, 2.5),
        (10**400, None),
        (math.inf, None),
        (math.nan, None),
        (True, None),
        ("1", None),
    ],
)
def test_as_finite_float(value, expected):
    """Test the guarded float conversion used by amount checks."""
    assert as_finite_float(value) == expected
