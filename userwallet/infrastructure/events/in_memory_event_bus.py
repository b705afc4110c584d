"""In-memory event bus implementation.

This module implements the EventBusProtocol using an in-memory dictionary-based
registry. Suitable for single-process deployments.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event_type -> list of handlers)
    - Sequential handler execution, in subscription order
    - Fail-open behavior (one handler failure doesn't break others)

Handlers run one at a time because subscribers that write through a
repository share the publisher's ambient AsyncSession, and an AsyncSession
does not support concurrent operations.

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(UserCreated, wallet_handler.handle_user_created)
    >>> await bus.publish(UserCreated(aggregate_id=user_id, email="a@b.com", ...))
"""

from collections import defaultdict

from userwallet.domain.events.base_event import DomainEvent
from userwallet.domain.protocols.event_bus_protocol import EventHandler
from userwallet.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Attributes:
        _handlers: Dictionary mapping event types to list of async handlers.
        _logger: Logger for handler failures and event publishing.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logs handler exceptions (warning level) and dispatch
                (debug level).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle. Only exact type matches
                (no inheritance matching).
            handler: Async function to call when event is published.

        Notes:
            - Handlers run in the order they were subscribed
            - No duplicate detection (same handler can be registered twice)
        """
        self._handlers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers, one after the other.

        Handler exceptions are logged but NOT propagated to the publisher. If
        no handlers are registered, this is a no-op.

        Args:
            event: Domain event to publish.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            aggregate_id=str(event.aggregate_id),
            sequence=event.sequence,
            handler_count=len(handlers),
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handler, "__name__", repr(handler)),
                    error_type=type(e).__name__,
                    error_message=str(e),
                    exc_info=e,
                )
