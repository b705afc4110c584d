"""SQLAlchemy repository adapters."""

from userwallet.infrastructure.persistence.repositories.user_read_repository import (
    UserReadRepository,
)
from userwallet.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)
from userwallet.infrastructure.persistence.repositories.wallet_repository import (
    WalletRepository,
)

__all__ = ["UserRepository", "WalletRepository", "UserReadRepository"]
