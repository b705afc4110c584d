# mypy: disable-error-code="arg-type"
"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscriptions are
wired from EVENT_REGISTRY at first use.
"""

import re
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from userwallet.domain.protocols.event_bus_protocol import EventBusProtocol


def handler_method_name(event_class: type) -> str:
    """``UserCreated`` -> ``handle_user_created``."""
    return "handle_" + re.sub(r"(?<!^)(?=[A-Z])", "_", event_class.__name__).lower()


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    For each event in EVENT_REGISTRY:
        - requires_logging: LoggingEventHandler.handle_event
        - requires_wallet: WalletEventHandler.handle_<event_name>

    The wallet handler writes through its own WalletRepository, built here
    on this bus (the repository needs the bus to publish WalletCreated).

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        RuntimeError: If a registry entry asks for a handler method that
            does not exist.
    """
    from userwallet.application.event_handlers.wallet_event_handler import (
        WalletEventHandler,
    )
    from userwallet.core.container.infrastructure import get_database, get_logger
    from userwallet.domain.events.registry import EVENT_REGISTRY
    from userwallet.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from userwallet.infrastructure.events.in_memory_event_bus import InMemoryEventBus
    from userwallet.infrastructure.persistence.repositories import WalletRepository

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)

    logging_handler = LoggingEventHandler(logger=logger)
    wallet_handler = WalletEventHandler(
        wallet_repo=WalletRepository(get_database(), event_bus, logger),
        logger=logger,
    )

    for metadata in EVENT_REGISTRY:
        event_class = metadata.event_class

        if metadata.requires_logging:
            event_bus.subscribe(event_class, logging_handler.handle_event)

        if metadata.requires_wallet:
            method_name = handler_method_name(event_class)
            handler_method = getattr(wallet_handler, method_name, None)
            if handler_method is None:
                raise RuntimeError(
                    f"Missing required wallet handler\n"
                    f"Event: {event_class.__name__}\n"
                    f"Expected method: WalletEventHandler.{method_name}"
                )
            event_bus.subscribe(event_class, handler_method)

    return event_bus
