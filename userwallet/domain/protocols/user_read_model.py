"""Read-side port for user queries.

Query handlers bypass the domain layer and read persistence-shaped records
directly. ``UserRecordShape`` describes the attributes those records expose;
the infrastructure ``UserRecord`` satisfies it structurally.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from userwallet.domain.pagination import Paginated, PaginatedQueryParams


class UserRecordShape(Protocol):
    """Attributes of a stored user row."""

    id: UUID
    email: str
    country: str
    postal_code: str
    street: str
    role: str
    created_at: datetime
    updated_at: datetime


class UserReadModel(Protocol):
    """Filtered, paginated user listing."""

    async def find_users(
        self,
        params: PaginatedQueryParams,
        *,
        country: str | None = None,
        postal_code: str | None = None,
        street: str | None = None,
    ) -> Paginated[UserRecordShape]:
        """Return one page of users matching every given filter.

        ``count`` is the number of matching users across all pages.
        """
        ...
