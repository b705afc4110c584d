"""Integration fixtures: real repositories over a per-test SQLite database."""

from unittest.mock import MagicMock

import pytest

from userwallet.application.event_handlers.wallet_event_handler import (
    WalletEventHandler,
)
from userwallet.domain.events import UserCreated
from userwallet.infrastructure.events.in_memory_event_bus import InMemoryEventBus
from userwallet.infrastructure.persistence.repositories import (
    UserReadRepository,
    UserRepository,
    WalletRepository,
)


@pytest.fixture
def event_bus(mock_logger: MagicMock) -> InMemoryEventBus:
    return InMemoryEventBus(logger=mock_logger)


@pytest.fixture
def user_repo(database, event_bus, mock_logger) -> UserRepository:
    return UserRepository(database, event_bus, mock_logger)


@pytest.fixture
def wallet_repo(database, event_bus, mock_logger) -> WalletRepository:
    return WalletRepository(database, event_bus, mock_logger)


@pytest.fixture
def user_read_repo(database, mock_logger) -> UserReadRepository:
    return UserReadRepository(database, mock_logger)


@pytest.fixture
def wallet_subscribed(event_bus, wallet_repo, mock_logger) -> WalletEventHandler:
    """Open a wallet for every UserCreated, as the container does."""
    handler = WalletEventHandler(wallet_repo=wallet_repo, logger=mock_logger)
    event_bus.subscribe(UserCreated, handler.handle_user_created)
    return handler
