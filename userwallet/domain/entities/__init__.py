from userwallet.domain.entities.base import AggregateRoot
from userwallet.domain.entities.user import UserEntity
from userwallet.domain.entities.wallet import MAX_BALANCE, WalletEntity

__all__ = ["AggregateRoot", "UserEntity", "WalletEntity", "MAX_BALANCE"]
