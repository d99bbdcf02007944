"""Unit tests for the ValueObject base class."""

import copy
from types import MappingProxyType

import pytest

from pennywise.domain.value_objects import ValueObject

# pylint: disable=magic-value-comparison,too-few-public-methods


class Point(ValueObject[dict]):
    """A structured value object for testing."""

    __slots__ = ()


class Tag(ValueObject[str]):
    """A primitive value object for testing."""

    __slots__ = ()


class OtherTag(ValueObject[str]):
    """A second primitive value object, structurally identical to Tag."""

    __slots__ = ()


class TestImmutability:
    """Tests that value objects cannot be changed after construction."""

    @staticmethod
    def test_attribute_assignment_is_rejected() -> None:
        """Test that setting attributes raises."""
        tag = Tag("food")
        with pytest.raises(AttributeError):
            tag._value = "other"  # pylint: disable=protected-access
        with pytest.raises(AttributeError):
            tag.extra = 1  # type: ignore[attr-defined]

    @staticmethod
    def test_mapping_payload_is_read_only() -> None:
        """Test that a mapping payload is exposed as a read-only view."""
        point = Point({"x": 1, "y": 2})
        assert isinstance(point.value, MappingProxyType)
        with pytest.raises(TypeError):
            point.value["x"] = 10  # type: ignore[index]

    @staticmethod
    def test_source_mutation_does_not_leak() -> None:
        """Test that mutating the caller's object leaves the value object intact."""
        source = {"x": 1, "tags": ["a"], "meta": {"k": "v"}}
        point = Point(source)
        source["x"] = 99
        source["tags"].append("b")
        source["meta"]["k"] = "changed"
        assert point.value["x"] == 1
        assert point.value["tags"] == ("a",)
        assert point.value["meta"]["k"] == "v"

    @staticmethod
    def test_sets_are_frozen() -> None:
        """Test that set payloads become frozensets."""
        assert Point({"s": {1, 2}}).value["s"] == frozenset({1, 2})

    @staticmethod
    def test_copies_return_the_same_object() -> None:
        """Test that copying an immutable value object is a no-op."""
        tag = Tag("food")
        assert copy.copy(tag) is tag
        assert copy.deepcopy(tag) is tag


class TestEquality:
    """Tests for structural equality."""

    @staticmethod
    def test_equal_payloads() -> None:
        """Test that equal payloads compare equal and hash alike."""
        assert Tag("food") == Tag("food")
        assert hash(Tag("food")) == hash(Tag("food"))
        assert Tag("food") != Tag("rent")

    @staticmethod
    def test_key_order_is_ignored() -> None:
        """Test that mapping key order does not affect equality."""
        first = Point({"x": 1, "y": {"a": 1, "b": 2}})
        second = Point({"y": {"b": 2, "a": 1}, "x": 1})
        assert first.equals(second)
        assert hash(first) == hash(second)

    @staticmethod
    def test_none_and_other_classes() -> None:
        """Test that None and other value object classes are never equal."""
        assert not Tag("food").equals(None)
        assert not Tag("food").equals(OtherTag("food"))
        assert Tag("food") != "food"

    @staticmethod
    def test_same_instance() -> None:
        """Test that an instance equals itself."""
        tag = Tag("food")
        assert tag.equals(tag)

    @staticmethod
    def test_usable_in_sets() -> None:
        """Test that value objects deduplicate in sets."""
        assert len({Tag("a"), Tag("a"), Tag("b")}) == 2


def test_repr_shows_plain_payload() -> None:
    """Test that repr unwraps mapping views."""
    assert repr(Point({"x": 1})) == "Point({'x': 1})"
    assert repr(Tag("food")) == "Tag('food')"
