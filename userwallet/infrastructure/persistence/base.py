"""Base model and mixins for all database models.

This module provides:
- BaseModel: Base class for ALL models (provides id, created_at)
- TimestampMixin: Internal mixin that adds updated_at
- BaseMutableModel: Base for mutable models (combines above)

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain aggregates do NOT inherit from this
- Aggregates are mapped to/from models by the mappers module

Architecture:
    BaseModel (id, created_at)
        ↑
        └── BaseMutableModel (+ updated_at via TimestampMixin)
            ├── UserModel
            └── WalletModel

SQLAlchemy's generic Uuid type keeps the models portable between PostgreSQL
(production) and SQLite (tests).
"""

from datetime import datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides common fields that ALL database models need:
    - id: UUID primary key (aggregates bring their own; uuid7 otherwise)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates.

    Use BaseMutableModel instead of mixing TimestampMixin + BaseModel manually.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_dict(self) -> dict[str, Any]:
        """Extend BaseModel.to_dict() to include updated_at."""
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides:
        - id: UUID primary key (from BaseModel)
        - created_at: Timestamp when created (from BaseModel)
        - updated_at: Timestamp when last updated (from TimestampMixin)
    """

    __abstract__ = True
