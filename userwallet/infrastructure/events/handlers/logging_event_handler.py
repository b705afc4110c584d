"""Logging event handler for domain events.

Logs every registered domain event at INFO with structured fields. Subscribed
by the container for each registry entry with ``requires_logging``.

Structured Fields:
    - event_type: Event class name (e.g., "UserCreated")
    - event_id: UUID for event correlation
    - aggregate_id: UUID of the aggregate that raised the event
    - sequence: Position within the aggregate's event stream
    - occurred_at: ISO 8601 timestamp (UTC)
    - request_id: Current request correlation id
"""

from userwallet.core.request_context import RequestContextService
from userwallet.domain.events.base_event import DomainEvent
from userwallet.domain.events.user_events import (
    UserAddressUpdated,
    UserCreated,
    UserRoleChanged,
)
from userwallet.domain.events.wallet_events import WalletBalanceChanged
from userwallet.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events."""

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    async def handle_event(self, event: DomainEvent) -> None:
        """Log any domain event with its common fields plus a few extras.

        Email addresses are never logged, only ids and changed values.
        """
        context: dict[str, object] = {
            "event_type": type(event).__name__,
            "event_id": str(event.event_id),
            "aggregate_id": str(event.aggregate_id),
            "sequence": event.sequence,
            "occurred_at": event.occurred_at.isoformat(),
            "request_id": RequestContextService.get_request_id(),
        }
        match event:
            case UserRoleChanged(old_role=old_role, new_role=new_role):
                context.update(old_role=old_role, new_role=new_role)
            case UserCreated(country=country) | UserAddressUpdated(country=country):
                context.update(country=country)
            case WalletBalanceChanged(old_balance=old, new_balance=new):
                context.update(old_balance=old, new_balance=new)
            case _:
                pass

        self._logger.info("domain_event", **context)
