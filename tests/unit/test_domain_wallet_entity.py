"""Unit tests for the WalletEntity aggregate."""

from uuid import uuid4

import pytest

from userwallet.core.enums import ErrorCode
from userwallet.core.errors import ValidationException
from userwallet.domain.entities.wallet import MAX_BALANCE, WalletEntity
from userwallet.domain.errors import WalletError
from userwallet.domain.events import WalletBalanceChanged, WalletCreated


@pytest.mark.unit
class TestWalletCreate:
    """Test WalletEntity.create factory."""

    def test_create_opens_empty_wallet(self):
        user_id = uuid4()

        wallet = WalletEntity.create(user_id=user_id)

        assert wallet.balance == 0
        assert wallet.user_id == user_id
        (event,) = wallet.pending_events
        assert isinstance(event, WalletCreated)
        assert event.user_id == user_id
        assert event.aggregate_id == wallet.id


@pytest.mark.unit
class TestWalletBalance:
    """Test deposits and withdrawals."""

    def test_deposit_then_withdraw(self):
        # Arrange
        wallet = WalletEntity.create(user_id=uuid4())
        wallet.pull_events()

        # Act
        wallet.deposit(100)
        wallet.withdraw(40)

        # Assert
        assert wallet.balance == 60
        changes = wallet.pull_events()
        assert all(isinstance(e, WalletBalanceChanged) for e in changes)
        assert [(e.old_balance, e.new_balance) for e in changes] == [(0, 100), (100, 60)]

    def test_withdraw_more_than_balance_fails(self):
        wallet = WalletEntity.create(user_id=uuid4())
        wallet.deposit(10)

        with pytest.raises(ValidationException) as exc_info:
            wallet.withdraw(11)

        assert exc_info.value.error.code == ErrorCode.INSUFFICIENT_BALANCE
        assert exc_info.value.error.message == WalletError.INSUFFICIENT_BALANCE
        assert wallet.balance == 10

    def test_deposit_above_maximum_fails(self):
        wallet = WalletEntity.create(user_id=uuid4())
        wallet.deposit(MAX_BALANCE)

        with pytest.raises(ValidationException) as exc_info:
            wallet.deposit(1)

        assert exc_info.value.error.code == ErrorCode.BALANCE_LIMIT_EXCEEDED
        assert wallet.balance == MAX_BALANCE

    @pytest.mark.parametrize("amount", [0, -5, True, 1.5])
    def test_non_positive_or_non_integer_amounts_are_rejected(self, amount):
        wallet = WalletEntity.create(user_id=uuid4())

        with pytest.raises(ValidationException) as exc_info:
            wallet.deposit(amount)

        assert exc_info.value.error.code == ErrorCode.INVALID_AMOUNT

    def test_validate_rejects_out_of_range_balance(self):
        wallet = WalletEntity(user_id=uuid4(), balance=-1)

        with pytest.raises(ValidationException) as exc_info:
            wallet.validate()

        assert exc_info.value.error.field == "balance"
