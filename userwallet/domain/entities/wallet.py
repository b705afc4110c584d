"""Wallet aggregate.

Business Rules:
    - One wallet per user, opened with a zero balance
    - Balance is an integer in [0, MAX_BALANCE]
    - Deposits and withdrawals take a positive amount
    - A withdrawal cannot exceed the balance
"""

from dataclasses import dataclass
from uuid import UUID

from userwallet.core.enums import ErrorCode
from userwallet.core.errors import ValidationError, ValidationException
from userwallet.domain.entities.base import AggregateRoot
from userwallet.domain.errors import WalletError
from userwallet.domain.events.wallet_events import (
    WalletBalanceChanged,
    WalletCreated,
)

MAX_BALANCE = 9_999_999


@dataclass(kw_only=True)
class WalletEntity(AggregateRoot):
    """Wallet aggregate root.

    Attributes:
        user_id: Owning user (unique in the store).
        balance: Current balance.
    """

    user_id: UUID
    balance: int = 0

    @classmethod
    def create(cls, *, user_id: UUID) -> "WalletEntity":
        """Open an empty wallet for a user and enqueue WalletCreated."""
        wallet = cls(user_id=user_id, balance=0)
        wallet.validate()
        wallet.add_event(WalletCreated(aggregate_id=wallet.id, user_id=user_id))
        return wallet

    def validate(self) -> None:
        if not isinstance(self.user_id, UUID):
            raise ValidationException(
                ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Wallet owner is required",
                    field="user_id",
                )
            )
        # bool is an int subclass but never a balance
        if (
            isinstance(self.balance, bool)
            or not isinstance(self.balance, int)
            or not 0 <= self.balance <= MAX_BALANCE
        ):
            raise ValidationException(
                ValidationError(
                    code=ErrorCode.INVALID_BALANCE,
                    message=WalletError.BALANCE_OUT_OF_RANGE,
                    field="balance",
                )
            )

    def deposit(self, amount: int) -> None:
        self._check_amount(amount)
        if self.balance + amount > MAX_BALANCE:
            raise ValidationException(
                ValidationError(
                    code=ErrorCode.BALANCE_LIMIT_EXCEEDED,
                    message=WalletError.BALANCE_OUT_OF_RANGE,
                    field="balance",
                )
            )
        self._set_balance(self.balance + amount)

    def withdraw(self, amount: int) -> None:
        self._check_amount(amount)
        if amount > self.balance:
            raise ValidationException(
                ValidationError(
                    code=ErrorCode.INSUFFICIENT_BALANCE,
                    message=WalletError.INSUFFICIENT_BALANCE,
                    field="balance",
                )
            )
        self._set_balance(self.balance - amount)

    def _check_amount(self, amount: int) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise ValidationException(
                ValidationError(
                    code=ErrorCode.INVALID_AMOUNT,
                    message=WalletError.INVALID_AMOUNT,
                    field="amount",
                )
            )

    def _set_balance(self, new_balance: int) -> None:
        old_balance = self.balance
        self.balance = new_balance
        self.validate()
        self._touch()
        self.add_event(
            WalletBalanceChanged(
                aggregate_id=self.id,
                user_id=self.user_id,
                old_balance=old_balance,
                new_balance=new_balance,
            )
        )
