"""UserRepository - SQLAlchemy implementation of the UserRepository protocol.

Adapter for hexagonal architecture. Translates between the UserEntity
aggregate and the ``users`` table through ``UserMapper``.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from userwallet.core.errors import ValidationException
from userwallet.domain.entities.user import UserEntity
from userwallet.domain.value_objects import Email
from userwallet.infrastructure.persistence.mappers import UserMapper
from userwallet.infrastructure.persistence.models.user import UserModel
from userwallet.infrastructure.persistence.records import UserRecord
from userwallet.infrastructure.persistence.repository_base import (
    SqlAlchemyRepositoryBase,
    resolve_session,
)


class UserRepository(SqlAlchemyRepositoryBase[UserEntity, UserModel, UserRecord]):
    """SQLAlchemy implementation of UserRepository.

    Example:
        >>> repo = UserRepository(database, event_bus, logger)
        >>> await repo.insert(UserEntity.create(email=..., address=...))
        >>> user = await repo.find_one_by_email("john@gmail.com")
    """

    model = UserModel
    mapper = UserMapper()
    resource_type = "User"

    async def find_one_by_email(
        self, email: str, *, session: AsyncSession | None = None
    ) -> UserEntity | None:
        """Find user by email address.

        The address is normalized the same way UserEntity.create normalizes
        it. A malformed address matches nobody.
        """
        try:
            normalized = Email(email).value
        except ValidationException:
            return None

        async with resolve_session(self._database, session) as active:
            model = await active.scalar(
                select(UserModel).where(UserModel.email == normalized)
            )
            return self._to_domain(model) if model is not None else None

    async def update_address(
        self, user: UserEntity, *, session: AsyncSession | None = None
    ) -> bool:
        """Persist the user's current address and publish UserAddressUpdated."""
        return await self._update(user, session=session)

    async def update_role(
        self, user: UserEntity, *, session: AsyncSession | None = None
    ) -> bool:
        """Persist the user's current role and publish UserRoleChanged."""
        return await self._update(user, session=session)
