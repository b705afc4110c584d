"""User request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

RESTful Endpoints:
    POST   /api/v1/users        - Create user (and wallet)
    GET    /api/v1/users        - List users (paginated, filterable)
    PATCH  /api/v1/users/{id}/address - Change address
    DELETE /api/v1/users/{id}   - Delete user (and wallet)
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Create
# =============================================================================


class UserCreateRequest(BaseModel):
    """Request schema for user creation.

    POST /api/v1/users
    Returns: 201 Created

    Email syntax is checked by the domain (``Email`` value object), so a
    malformed address surfaces as a 400 problem with ``field="email"``.
    """

    email: str = Field(
        ...,
        description="User's email address",
        examples=["john@gmail.com"],
    )
    country: str = Field(..., description="Address country", examples=["England"])
    postal_code: str = Field(..., description="Address postal code", examples=["24312"])
    street: str = Field(..., description="Address street", examples=["Road Avenue"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "john@gmail.com",
                "country": "England",
                "postal_code": "24312",
                "street": "Road Avenue",
            }
        }
    )


class UserCreateResponse(BaseModel):
    """Response schema for user creation (201 Created)."""

    id: UUID = Field(..., description="Created user's ID")


# =============================================================================
# Update address
# =============================================================================


class UserAddressUpdateRequest(BaseModel):
    """Request schema for a partial address change.

    PATCH /api/v1/users/{id}/address
    Returns: 204 No Content

    Omitted fields keep their current value.
    """

    country: str | None = Field(None, description="New country")
    postal_code: str | None = Field(None, description="New postal code")
    street: str | None = Field(None, description="New street")


# =============================================================================
# List
# =============================================================================


class UserResponse(BaseModel):
    """One user as returned by GET /api/v1/users."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(..., description="User unique identifier")
    email: str = Field(..., description="User's email address")
    country: str = Field(..., description="Address country")
    postal_code: str = Field(..., description="Address postal code")
    street: str = Field(..., description="Address street")
    role: str = Field(..., description="User role", examples=["guest"])
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class UserListResponse(BaseModel):
    """Paginated user list.

    Attributes:
        data: Users on this page.
        count: Total users matching the filters, regardless of page.
        limit: Page size used.
        page: Zero-based page number.
    """

    data: list[UserResponse] = Field(..., description="Users on this page")
    count: int = Field(..., description="Total matching users")
    limit: int = Field(..., description="Page size")
    page: int = Field(..., description="Zero-based page number")

    @classmethod
    def from_page(cls, page: Any) -> "UserListResponse":
        """Build the response from a ``Paginated`` page of user records."""
        return cls(
            data=[UserResponse.model_validate(record) for record in page.data],
            count=page.count,
            limit=page.limit,
            page=page.page,
        )
