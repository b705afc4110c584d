"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from userwallet.domain.protocols import UserRepository, WalletRepository
"""

from userwallet.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from userwallet.domain.protocols.logger_protocol import LoggerProtocol
from userwallet.domain.protocols.repository_port import RepositoryPort
from userwallet.domain.protocols.user_read_model import (
    UserReadModel,
    UserRecordShape,
)
from userwallet.domain.protocols.user_repository import UserRepository
from userwallet.domain.protocols.wallet_repository import WalletRepository

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "RepositoryPort",
    "UserReadModel",
    "UserRecordShape",
    "UserRepository",
    "WalletRepository",
]
