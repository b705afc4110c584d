"""WalletRepository - SQLAlchemy implementation of the WalletRepository protocol."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from userwallet.domain.entities.wallet import WalletEntity
from userwallet.infrastructure.persistence.mappers import WalletMapper
from userwallet.infrastructure.persistence.models.wallet import WalletModel
from userwallet.infrastructure.persistence.records import WalletRecord
from userwallet.infrastructure.persistence.repository_base import (
    SqlAlchemyRepositoryBase,
    resolve_session,
)


class WalletRepository(
    SqlAlchemyRepositoryBase[WalletEntity, WalletModel, WalletRecord]
):
    """SQLAlchemy implementation of WalletRepository."""

    model = WalletModel
    mapper = WalletMapper()
    resource_type = "Wallet"

    async def find_one_by_user_id(
        self, user_id: UUID, *, session: AsyncSession | None = None
    ) -> WalletEntity | None:
        async with resolve_session(self._database, session) as active:
            model = await active.scalar(
                select(WalletModel).where(WalletModel.user_id == user_id)
            )
            return self._to_domain(model) if model is not None else None

    async def update_balance(
        self, wallet: WalletEntity, *, session: AsyncSession | None = None
    ) -> bool:
        """Persist the wallet balance and publish WalletBalanceChanged."""
        return await self._update(wallet, session=session)
