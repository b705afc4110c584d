"""User aggregate events.

Handlers:
- LoggingEventHandler: all events
- WalletEventHandler: UserCreated (creates the user's wallet)
"""

from dataclasses import dataclass

from userwallet.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class UserCreated(DomainEvent):
    """A new user was created.

    Attributes:
        email: Normalized email address.
        country: Address country.
        postal_code: Address postal code.
        street: Address street.
    """

    email: str
    country: str
    postal_code: str
    street: str


@dataclass(frozen=True, kw_only=True)
class UserDeleted(DomainEvent):
    """A user was deleted. The wallet goes with it (store-level cascade)."""


@dataclass(frozen=True, kw_only=True)
class UserRoleChanged(DomainEvent):
    """User role changed.

    Attributes:
        old_role: Previous role value.
        new_role: New role value.
    """

    old_role: str
    new_role: str


@dataclass(frozen=True, kw_only=True)
class UserAddressUpdated(DomainEvent):
    """User address changed. Carries the full new address."""

    country: str
    postal_code: str
    street: str
