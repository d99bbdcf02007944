"""Unit tests for the Account entity."""

from datetime import datetime, timezone

import pytest

from pennywise.domain import errors
from pennywise.domain.entities import (
    Account,
    AccountCreateInput,
    AccountUpdateInput,
)
from pennywise.domain.unsettable import UNSET
from tests.fixtures.datagen import new_id

# pylint: disable=magic-value-comparison

PAST = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _load_data(**overrides) -> dict:
    data = {
        "id": new_id(),
        "bank_id": new_id(),
        "name": "Conta Principal",
        "type": "poupanca",
        "balance": 1500.0,
        "created_at": PAST,
        "updated_at": PAST,
    }
    data.update(overrides)
    return data


class TestAccountCreate:
    """Tests for Account.create."""

    @staticmethod
    def test_valid_input(make_account_data) -> None:
        """Test that valid data yields an account with a zero balance."""
        data = make_account_data()
        result = Account.create(data)
        assert result.is_success
        account = result.value
        assert account.balance == 0
        assert account.name == data["name"]
        assert account.bank_id.value == data["bank_id"]
        assert account.type.value == "corrente"
        assert account.agency == "0001"
        assert account.number == "12345-6"

    @staticmethod
    def test_accepts_input_dataclass() -> None:
        """Test that the typed input is accepted as well as a mapping."""
        result = Account.create(
            AccountCreateInput(bank_id=new_id(), name="Reserva", type="poupanca")
        )
        assert result.is_success
        assert result.value.agency is None

    @staticmethod
    def test_short_name(make_account_data) -> None:
        """Test that a two-character name is too short."""
        result = Account.create(make_account_data(name="Ab"))
        assert result.is_failure
        assert result.errors == (errors.MinLengthError("name", 3, 2),)

    @staticmethod
    def test_invalid_type(make_account_data) -> None:
        """Test that unknown account types are rejected."""
        result = Account.create(make_account_data(type="credito"))
        assert result.errors == (errors.InvalidAccountTypeError("type", "credito"),)

    @staticmethod
    def test_missing_type_reports_required_and_type(make_account_data) -> None:
        """Test that an empty type is both required and invalid."""
        result = Account.create(make_account_data(type=""))
        assert [type(e) for e in result.errors] == [
            errors.RequiredFieldError,
            errors.InvalidAccountTypeError,
        ]

    @staticmethod
    def test_collects_every_error(make_account_data) -> None:
        """Test that all invalid fields are reported in one pass."""
        result = Account.create(
            make_account_data(
                bank_id="nope", name="", agency="12345678901", number="1" * 21
            )
        )
        assert [e.field for e in result.errors] == ["bank_id", "name", "agency", "number"]

    @staticmethod
    def test_missing_keys_are_reported() -> None:
        """Test that a mapping without required keys yields a failed result."""
        result = Account.create({"bank_id": new_id(), "name": "Conta"})
        assert result.is_failure
        assert result.errors == (
            errors.RequiredFieldError("type"),
            errors.InvalidAccountTypeError("type", None),
        )

    @staticmethod
    def test_load_with_missing_keys_is_reported() -> None:
        """Test that an incomplete persisted row fails instead of raising."""
        result = Account.load({"bank_id": new_id(), "name": "Conta", "type": "corrente"})
        assert result.is_failure
        assert errors.RequiredFieldError("id") in result.errors

    @staticmethod
    def test_unknown_keys_are_rejected(make_account_data) -> None:
        """Test that misspelled input keys are caught early."""
        with pytest.raises(TypeError):
            Account.create(make_account_data(nmae="typo"))


class TestAccountLoad:
    """Tests for Account.load."""

    @staticmethod
    def test_restores_state() -> None:
        """Test that persisted state is restored verbatim."""
        data = _load_data()
        account = Account.load(data).value
        assert account.id.value == data["id"]
        assert account.balance == 1500.0
        assert account.created_at == PAST
        assert account.updated_at == PAST
        assert account.deleted_at is None

    @staticmethod
    def test_invalid_ids() -> None:
        """Test that malformed persisted ids are reported, not raised."""
        result = Account.load(_load_data(id="x", bank_id="y"))
        assert [e.field for e in result.errors] == ["id", "bank_id"]

    @staticmethod
    def test_invalid_type() -> None:
        """Test that an unknown persisted type is reported."""
        assert Account.load(_load_data(type="credito")).is_failure


class TestAccountUpdate:
    """Tests for Account.update_data."""

    @staticmethod
    def test_partial_update(account: Account) -> None:
        """Test that only the given fields change."""
        before_bank = account.bank_id
        result = account.update_data({"name": "Conta Salario", "type": "poupanca"})
        assert result.is_success
        assert account.name == "Conta Salario"
        assert account.type.value == "poupanca"
        assert account.bank_id == before_bank
        assert account.agency == "0001"

    @staticmethod
    def test_none_clears_optional_fields(account: Account) -> None:
        """Test that None clears agency and number."""
        assert account.update_data(AccountUpdateInput(agency=None, number=None)).is_success
        assert account.agency is None
        assert account.number is None

    @staticmethod
    def test_none_on_required_field_fails(account: Account) -> None:
        """Test that a required field cannot be cleared."""
        result = account.update_data({"name": None})
        assert result.errors == (errors.RequiredFieldError("name"),)
        assert account.name == "Conta Principal"

    @staticmethod
    def test_invalid_update_changes_nothing(account: Account) -> None:
        """Test that a failed update leaves every field untouched."""
        updated_at = account.updated_at
        result = account.update_data({"name": "Nova Conta", "type": "credito"})
        assert result.is_failure
        assert account.name == "Conta Principal"
        assert account.updated_at == updated_at

    @staticmethod
    def test_empty_update_touches_timestamp() -> None:
        """Test that an all-UNSET update succeeds and refreshes updated_at."""
        account = Account.load(_load_data()).value
        assert account.update_data(AccountUpdateInput(name=UNSET)).is_success
        assert account.updated_at > PAST


class TestAccountBalance:
    """Tests for Account.set_balance."""

    @staticmethod
    def test_negative_balance_is_rejected(account: Account) -> None:
        """Test that a negative balance fails and leaves the balance unchanged."""
        result = account.set_balance(-100)
        assert result.errors == (errors.InvalidAccountBalanceError("balance", -100),)
        assert account.balance == 0

    @staticmethod
    def test_valid_balance_updates_timestamp() -> None:
        """Test that a valid balance is stored and updated_at moves forward."""
        account = Account.load(_load_data()).value
        assert account.set_balance(2000).is_success
        assert account.balance == 2000
        assert account.updated_at > PAST

    @staticmethod
    @pytest.mark.parametrize("value", ["100", None, True, float("nan"), 10**400])
    def test_non_numbers_are_rejected(account: Account, value) -> None:
        """Test that non-numeric or non-finite balances are invalid currency."""
        result = account.set_balance(value)
        assert result.errors == (errors.InvalidCurrencyError("balance", value),)


def test_delete(account: Account) -> None:
    """Test soft deletion through the public API."""
    assert account.delete().is_success
    assert account.is_deleted
