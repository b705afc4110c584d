"""Domain events registry.

Catalogs every domain event with the handlers it requires. The container
loops over it to wire subscriptions, and tests use it to catch drift (an
event class with no entry, or a flag with no handler method).

Adding new events:
1. Define the event dataclass in the appropriate *_events.py file
2. Add an entry to EVENT_REGISTRY below
3. Add the handler method the flags ask for
"""

from dataclasses import dataclass
from enum import Enum
from typing import Type

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


class EventCategory(Enum):
    """Event categories for organization and filtering."""

    USER = "user"
    WALLET = "wallet"


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for a domain event.

    Attributes:
        event_class: The event dataclass.
        category: Event category.
        requires_logging: LoggingEventHandler handles this event.
        requires_wallet: WalletEventHandler handles this event.
    """

    event_class: Type[DomainEvent]
    category: EventCategory
    requires_logging: bool = True
    requires_wallet: bool = False


EVENT_REGISTRY: list[EventMetadata] = [
    EventMetadata(
        event_class=UserCreated,
        category=EventCategory.USER,
        requires_wallet=True,  # Open the user's wallet
    ),
    EventMetadata(event_class=UserDeleted, category=EventCategory.USER),
    EventMetadata(event_class=UserRoleChanged, category=EventCategory.USER),
    EventMetadata(event_class=UserAddressUpdated, category=EventCategory.USER),
    EventMetadata(event_class=WalletCreated, category=EventCategory.WALLET),
    EventMetadata(event_class=WalletBalanceChanged, category=EventCategory.WALLET),
]


def get_all_events() -> list[Type[DomainEvent]]:
    """Get all registered event classes."""
    return [meta.event_class for meta in EVENT_REGISTRY]


def get_events_requiring_handler(handler_type: str) -> list[Type[DomainEvent]]:
    """Get events requiring specific handler.

    Args:
        handler_type: "logging" or "wallet".

    Returns:
        List of event classes requiring that handler.

    Raises:
        ValueError: If handler_type is invalid.
    """
    field_map = {
        "logging": "requires_logging",
        "wallet": "requires_wallet",
    }

    if handler_type not in field_map:
        raise ValueError(
            f"Invalid handler_type: {handler_type}. "
            f"Must be one of: {list(field_map.keys())}"
        )

    field = field_map[handler_type]
    return [meta.event_class for meta in EVENT_REGISTRY if getattr(meta, field)]
