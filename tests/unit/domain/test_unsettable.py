"""Unit tests for the UNSET sentinel and partial update helpers."""

import copy
import pickle

from pennywise.domain.unsettable import UNSET, is_set, resolve

# pylint: disable=magic-value-comparison


def test_unset_is_falsy_and_named() -> None:
    """Test that UNSET is falsy and prints as UNSET."""
    assert not UNSET
    assert repr(UNSET) == "UNSET"


def test_unset_survives_pickle_and_copy() -> None:
    """Test that UNSET stays a singleton through pickle and copy."""
    assert pickle.loads(pickle.dumps(UNSET)) is UNSET
    assert copy.deepcopy(UNSET) is UNSET


def test_is_set() -> None:
    """Test that only UNSET counts as not set; None is an explicit value."""
    assert not is_set(UNSET)
    assert is_set(None)
    assert is_set("")
    assert is_set(0)


class TestResolve:
    """Tests for resolve()."""

    @staticmethod
    def test_unset_keeps_current() -> None:
        """Test that UNSET leaves the current value."""
        assert resolve(UNSET, "old") == "old"

    @staticmethod
    def test_none_clears() -> None:
        """Test that None replaces the current value."""
        assert resolve(None, "old") is None

    @staticmethod
    def test_value_replaces() -> None:
        """Test that a concrete value replaces the current value."""
        assert resolve("new", "old") == "new"
