"""Domain events package."""

from userwallet.domain.events.base_event import DomainEvent
from userwallet.domain.events.user_events import (
    UserAddressUpdated,
    UserCreated,
    UserDeleted,
    UserRoleChanged,
)
from userwallet.domain.events.wallet_events import (
    WalletBalanceChanged,
    WalletCreated,
)

__all__ = [
    "DomainEvent",
    "UserCreated",
    "UserDeleted",
    "UserRoleChanged",
    "UserAddressUpdated",
    "WalletCreated",
    "WalletBalanceChanged",
]
