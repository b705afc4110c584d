"""Wallet event handler.

Opens a wallet for every new user. Subscribed to UserCreated by the
container (registry entries with ``requires_wallet``).

The handler runs while the user insert's transaction is still open when the
user was created inside ``transaction``/``transaction_scope``; the wallet
insert then resolves the same ambient session, so both rows commit or roll
back together.
"""

from userwallet.domain.entities.wallet import WalletEntity
from userwallet.domain.events.user_events import UserCreated
from userwallet.domain.protocols.logger_protocol import LoggerProtocol
from userwallet.domain.protocols.wallet_repository import WalletRepository


class WalletEventHandler:
    """Creates wallets in response to user events."""

    def __init__(self, wallet_repo: WalletRepository, logger: LoggerProtocol) -> None:
        """Initialize handler.

        Args:
            wallet_repo: Wallet repository for persistence.
            logger: Structured logger.
        """
        self._wallet_repo = wallet_repo
        self._logger = logger

    async def handle_user_created(self, event: UserCreated) -> None:
        wallet = WalletEntity.create(user_id=event.aggregate_id)
        await self._wallet_repo.insert(wallet)
        self._logger.info(
            "wallet_created",
            wallet_id=str(wallet.id),
            user_id=str(event.aggregate_id),
        )
