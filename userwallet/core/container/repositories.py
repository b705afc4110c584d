"""Repository dependency factories (app-scoped).

Repositories resolve their session per call (explicit argument, ambient
transaction, or a fresh pooled session), so one instance serves every
request.
"""

from functools import lru_cache

from userwallet.core.container.events import get_event_bus
from userwallet.core.container.infrastructure import get_database, get_logger
from userwallet.infrastructure.persistence.repositories import (
    UserReadRepository,
    UserRepository,
    WalletRepository,
)


@lru_cache()
def get_user_repository() -> UserRepository:
    return UserRepository(get_database(), get_event_bus(), get_logger())


@lru_cache()
def get_wallet_repository() -> WalletRepository:
    return WalletRepository(get_database(), get_event_bus(), get_logger())


@lru_cache()
def get_user_read_repository() -> UserReadRepository:
    return UserReadRepository(get_database(), get_logger())
