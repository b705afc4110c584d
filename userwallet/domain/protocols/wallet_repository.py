"""WalletRepository protocol for wallet persistence."""

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

from userwallet.domain.entities.wallet import WalletEntity
from userwallet.domain.protocols.repository_port import RepositoryPort

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class WalletRepository(RepositoryPort[WalletEntity], Protocol):
    """Wallet repository protocol (port)."""

    async def find_one_by_user_id(
        self, user_id: UUID, *, session: "AsyncSession | None" = None
    ) -> WalletEntity | None:
        ...

    async def update_balance(
        self, wallet: WalletEntity, *, session: "AsyncSession | None" = None
    ) -> bool:
        ...
