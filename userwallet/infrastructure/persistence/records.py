"""Typed record schemas for stored rows.

Every row read by a repository passes through one of these models before it
is mapped to an aggregate or returned by a query. Validation fails closed: a
row whose shape does not match (wrong type, out-of-range value, unknown role)
raises ``pydantic.ValidationError`` instead of leaking into the domain.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """Stored user row."""

    model_config = ConfigDict(from_attributes=True, frozen=True, extra="forbid")

    id: UUID
    email: str = Field(..., min_length=3, max_length=255)
    country: str = Field(..., min_length=1, max_length=255)
    postal_code: str = Field(..., min_length=1, max_length=20)
    street: str = Field(..., min_length=1, max_length=255)
    role: Literal["admin", "moderator", "guest"]
    created_at: datetime
    updated_at: datetime


class WalletRecord(BaseModel):
    """Stored wallet row."""

    model_config = ConfigDict(from_attributes=True, frozen=True, extra="forbid")

    id: UUID
    balance: int = Field(..., ge=0, le=9_999_999)
    user_id: UUID
    created_at: datetime
    updated_at: datetime
