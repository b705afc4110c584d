"""Wallet aggregate events."""

from dataclasses import dataclass
from uuid import UUID

from userwallet.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class WalletCreated(DomainEvent):
    """Wallet opened for a user.

    Attributes:
        user_id: Owning user.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class WalletBalanceChanged(DomainEvent):
    """Wallet balance changed by a deposit or withdrawal.

    Attributes:
        user_id: Owning user.
        old_balance: Balance before the change.
        new_balance: Balance after the change.
    """

    user_id: UUID
    old_balance: int
    new_balance: int
