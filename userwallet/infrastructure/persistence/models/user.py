"""User database model."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from userwallet.infrastructure.persistence.base import BaseMutableModel


class UserModel(BaseMutableModel):
    """Row shape of the ``users`` table.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when user was created (from BaseMutableModel)
        updated_at: Timestamp when user last updated (from BaseMutableModel)
        email: Unique normalized email address
        country: Address country
        postal_code: Address postal code
        street: Address street
        role: admin, moderator or guest

    Indexes:
        - uq_users_email: unique (email), the store-level duplicate check
        - idx_users_country: (country) for filtered listings
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Normalized email address",
    )
    country: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    postal_code: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
    )
    street: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="guest",
        server_default="guest",
        comment="admin, moderator or guest",
    )

    __table_args__ = (
        Index("uq_users_email", "email", unique=True),
        Index("idx_users_country", "country"),
    )
