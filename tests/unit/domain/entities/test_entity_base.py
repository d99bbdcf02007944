"""Unit tests for the Entity base class."""

import logging
from datetime import datetime, timezone

import pytest

from pennywise.domain.entities import Entity
from pennywise.domain.errors import InvalidUniqueIdError, RequiredFieldError
from pennywise.domain.result import Result
from pennywise.domain.value_objects import UniqueId
from tests.helpers.time_asserts import assert_recent, assert_strict_utc

# pylint: disable=protected-access,magic-value-comparison,too-few-public-methods

VALID_UUID = "4f1c2a9e-8d3b-4c6a-9e2f-1a2b3c4d5e6f"
PAST = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeEntity(Entity):
    """A fake entity for testing the base Entity class."""

    KIND = "fake"


class OtherFakeEntity(Entity):
    """A second entity type sharing the identifier space."""

    KIND = "other"


class TestEntityInitialization:
    """Tests for identity and timestamps on construction."""

    @staticmethod
    def test_generates_id_and_timestamps() -> None:
        """Test that a bare entity gets a fresh id and UTC timestamps."""
        entity = FakeEntity()
        assert UniqueId.is_valid(entity.id.value)
        assert_recent(entity.created_at)
        assert_strict_utc(entity.updated_at)
        assert entity.deleted_at is None
        assert not entity.is_deleted

    @staticmethod
    def test_keeps_given_identity() -> None:
        """Test that persisted identity and timestamps are kept as-is."""
        entity = FakeEntity(
            entity_id=VALID_UUID, created_at=PAST, updated_at=PAST, deleted_at=PAST
        )
        assert entity.id.value == VALID_UUID
        assert entity.created_at == PAST
        assert entity.updated_at == PAST
        assert entity.is_deleted

    @staticmethod
    def test_accepts_unique_id_instance() -> None:
        """Test that an existing UniqueId is reused."""
        uid = UniqueId(VALID_UUID)
        assert FakeEntity(entity_id=uid).id is uid

    @staticmethod
    def test_rejects_malformed_id() -> None:
        """Test that direct construction with a bad id raises."""
        with pytest.raises(InvalidUniqueIdError):
            FakeEntity(entity_id="123")


class TestEntityEquality:
    """Tests for identity-based equality."""

    @staticmethod
    def test_same_id_is_equal() -> None:
        """Test that entities with the same id are equal."""
        first = FakeEntity(entity_id=VALID_UUID)
        second = FakeEntity(entity_id=VALID_UUID, created_at=PAST)
        assert first.equals(second)
        assert first == second
        assert hash(first) == hash(second)

    @staticmethod
    def test_equality_ignores_entity_type() -> None:
        """Test that equality only looks at the identifier."""
        assert FakeEntity(entity_id=VALID_UUID) == OtherFakeEntity(entity_id=VALID_UUID)

    @staticmethod
    def test_different_ids_or_non_entities() -> None:
        """Test that different ids, None and other objects are never equal."""
        entity = FakeEntity()
        assert not entity.equals(FakeEntity())
        assert not entity.equals(None)
        assert not entity.equals(entity.id)
        assert entity != entity.id.value

    @staticmethod
    def test_repr() -> None:
        """Test that repr shows the type and id."""
        assert repr(FakeEntity(entity_id=VALID_UUID)) == f"FakeEntity(id='{VALID_UUID}')"


class TestEntityMutationPrimitives:
    """Tests for deletion and timestamp updates."""

    @staticmethod
    def test_delete_marks_once() -> None:
        """Test that deleting twice keeps the first timestamp."""
        entity = FakeEntity()
        assert entity.delete().is_success
        first = entity.deleted_at
        assert entity.is_deleted
        assert_strict_utc(first)
        entity.delete()
        assert entity.deleted_at == first

    @staticmethod
    def test_update_timestamp_moves_forward() -> None:
        """Test that _update_timestamp replaces an old updated_at."""
        entity = FakeEntity(created_at=PAST, updated_at=PAST)
        entity._update_timestamp()
        assert entity.updated_at > PAST
        assert entity.created_at == PAST


class TestFactoryHelpers:
    """Tests for the helpers used by subclass factories."""

    @staticmethod
    def test_rejected_logs_and_fails(caplog: pytest.LogCaptureFixture) -> None:
        """Test that rejected validation passes are logged at DEBUG."""
        failed = Result.fail([RequiredFieldError("name"), RequiredFieldError("code")])
        with caplog.at_level(logging.DEBUG, logger="pennywise.domain.entities.base"):
            result = FakeEntity._rejected("create", failed)
        assert result.errors == failed.errors
        assert "fake create rejected: 2 error(s) on ['code', 'name']" in caplog.text
