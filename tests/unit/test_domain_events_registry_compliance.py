"""Registry compliance tests.

Every domain event class must be in EVENT_REGISTRY, and every handler a
registry entry asks for must exist and be subscribed by the container.
"""

import inspect
from unittest.mock import MagicMock, patch

import pytest

import userwallet.domain.events as events_module
from userwallet.core.container.events import get_event_bus, handler_method_name
from userwallet.domain.events import DomainEvent, UserCreated
from userwallet.domain.events.registry import (
    EVENT_REGISTRY,
    get_all_events,
    get_events_requiring_handler,
)
from userwallet.application.event_handlers.wallet_event_handler import (
    WalletEventHandler,
)


def _declared_event_classes() -> set[type]:
    return {
        obj
        for _, obj in inspect.getmembers(events_module, inspect.isclass)
        if issubclass(obj, DomainEvent) and obj is not DomainEvent
    }


@pytest.mark.unit
class TestEventRegistryCompliance:
    """Registry and declared events stay in sync."""

    def test_every_event_is_registered(self):
        assert _declared_event_classes() == set(get_all_events())

    def test_no_duplicate_entries(self):
        classes = [meta.event_class for meta in EVENT_REGISTRY]
        assert len(classes) == len(set(classes))

    def test_wallet_handler_methods_exist(self):
        for event_class in get_events_requiring_handler("wallet"):
            assert hasattr(WalletEventHandler, handler_method_name(event_class))

    def test_user_created_requires_wallet(self):
        assert get_events_requiring_handler("wallet") == [UserCreated]

    def test_every_event_is_logged(self):
        assert set(get_events_requiring_handler("logging")) == set(get_all_events())

    def test_unknown_handler_type_is_rejected(self):
        with pytest.raises(ValueError):
            get_events_requiring_handler("email")

    def test_handler_method_name(self):
        assert handler_method_name(UserCreated) == "handle_user_created"


@pytest.mark.unit
class TestEventBusWiring:
    """get_event_bus subscribes handlers from the registry."""

    def test_subscriptions_follow_registry(self):
        # Arrange
        get_event_bus.cache_clear()
        fake_bus = MagicMock()

        # Act
        with patch(
            "userwallet.infrastructure.events.in_memory_event_bus.InMemoryEventBus",
            return_value=fake_bus,
        ):
            bus = get_event_bus()
        get_event_bus.cache_clear()

        # Assert
        assert bus is fake_bus
        subscribed = [c.args for c in fake_bus.subscribe.call_args_list]
        logging_subs = [e for e, h in subscribed if h.__name__ == "handle_event"]
        wallet_subs = [e for e, h in subscribed if h.__name__ == "handle_user_created"]
        assert set(logging_subs) == set(get_all_events())
        assert wallet_subs == [UserCreated]
