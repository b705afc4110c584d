"""Unit tests for InMemoryEventBus.

Tests cover:
- Subscribe/publish basic flow
- Handlers run sequentially, in subscription order
- Handler failure doesn't break others (fail-open)
- No handlers registered (no-op)
- Exact type routing
"""

import asyncio
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from userwallet.domain.events import DomainEvent, UserCreated, UserDeleted
from userwallet.infrastructure.events.in_memory_event_bus import InMemoryEventBus


def make_user_created() -> UserCreated:
    return UserCreated(
        aggregate_id=uuid4(),
        email="john@gmail.com",
        country="England",
        postal_code="24312",
        street="Road Avenue",
    )


@pytest.mark.unit
class TestInMemoryEventBus:
    """Test InMemoryEventBus dispatch."""

    @pytest.mark.asyncio
    async def test_subscribe_and_publish_single_handler(self):
        # Arrange
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event = make_user_created()
        event_bus.subscribe(UserCreated, handler)

        # Act
        await event_bus.publish(event)

        # Assert
        assert received == [event]

    @pytest.mark.asyncio
    async def test_handlers_run_one_after_another_in_order(self):
        # Arrange
        event_bus = InMemoryEventBus(logger=MagicMock())
        trace: list[str] = []

        def make_handler(name: str):
            async def handler(event: DomainEvent) -> None:
                trace.append(f"{name}:start")
                await asyncio.sleep(0)
                trace.append(f"{name}:end")

            return handler

        for name in ("first", "second", "third"):
            event_bus.subscribe(UserCreated, make_handler(name))

        # Act
        await event_bus.publish(make_user_created())

        # Assert - no interleaving
        assert trace == [
            "first:start",
            "first:end",
            "second:start",
            "second:end",
            "third:start",
            "third:end",
        ]

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self):
        # Arrange
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        called: list[str] = []

        async def failing_handler(event: DomainEvent) -> None:
            raise RuntimeError("boom")

        async def good_handler(event: DomainEvent) -> None:
            called.append("good")

        event_bus.subscribe(UserCreated, failing_handler)
        event_bus.subscribe(UserCreated, good_handler)
        event = make_user_created()

        # Act - does not raise
        await event_bus.publish(event)

        # Assert
        assert called == ["good"]
        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args[0] == "event_handler_failed"
        assert kwargs["handler_name"] == "failing_handler"
        assert kwargs["event_id"] == str(event.event_id)
        assert kwargs["error_type"] == "RuntimeError"

    @pytest.mark.asyncio
    async def test_publish_without_handlers_is_noop(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        await event_bus.publish(make_user_created())

        mock_logger.debug.assert_not_called()

    @pytest.mark.asyncio
    async def test_routing_is_by_exact_type(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event_bus.subscribe(UserDeleted, handler)

        await event_bus.publish(make_user_created())

        assert received == []
