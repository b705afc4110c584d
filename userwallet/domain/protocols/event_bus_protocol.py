"""Event bus protocol (port) for domain events.

The domain defines the port; infrastructure provides the adapter
(``InMemoryEventBus``). Repositories are the only publishers: they drain an
aggregate's buffered events after a write and hand them to ``publish`` one by
one, in order.

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(UserCreated, wallet_handler.handle_user_created)
    >>> await event_bus.publish(event)
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from userwallet.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async callable taking one event and returning None."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Sequential dispatch**: Handlers for one event run one after the
           other, in subscription order. Subscribers that write through a
           repository share the publisher's ambient session, and a session
           cannot run two statements at once.
        2. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and must NOT propagate to the publisher.
        3. **Exact type routing**: Handlers registered for a type receive only
           events of that exact type.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (e.g., UserCreated).
            handler: Async function called with the event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Returns once every handler has finished (or failed and been logged).
        Never raises handler exceptions.

        Args:
            event: Domain event to publish.
        """
        ...
