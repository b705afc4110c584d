"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import TYPE_CHECKING, Protocol

from userwallet.domain.entities.user import UserEntity
from userwallet.domain.protocols.repository_port import RepositoryPort

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class UserRepository(RepositoryPort[UserEntity], Protocol):
    """User repository protocol (port).

    Methods (in addition to RepositoryPort):
        find_one_by_email: Retrieve user by normalized email
        update_address: Persist an address change
        update_role: Persist a role change
    """

    async def find_one_by_email(
        self, email: str, *, session: "AsyncSession | None" = None
    ) -> UserEntity | None:
        """Find user by email address.

        Args:
            email: Email address, compared after normalization.

        Returns:
            UserEntity if found, None otherwise.
        """
        ...

    async def update_address(
        self, user: UserEntity, *, session: "AsyncSession | None" = None
    ) -> bool:
        ...

    async def update_role(
        self, user: UserEntity, *, session: "AsyncSession | None" = None
    ) -> bool:
        ...
