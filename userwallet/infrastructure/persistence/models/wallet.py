"""Wallet database model."""

from uuid import UUID as PythonUUID

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from userwallet.infrastructure.persistence.base import BaseMutableModel


class WalletModel(BaseMutableModel):
    """Row shape of the ``wallets`` table.

    Fields:
        balance: Integer balance, 0 to 9999999
        user_id: Owning user. Unique, and removed with the user (ON DELETE CASCADE)
    """

    __tablename__ = "wallets"

    balance: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
    )
    user_id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    __table_args__ = (
        CheckConstraint(
            "balance >= 0 AND balance <= 9999999", name="ck_wallets_balance_range"
        ),
    )
