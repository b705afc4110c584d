"""Read-side user queries.

Implements the UserReadModel port. Rows are returned as validated
``UserRecord`` objects; no aggregate is built.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from userwallet.core.request_context import RequestContextService
from userwallet.domain.pagination import Paginated, PaginatedQueryParams
from userwallet.domain.protocols.logger_protocol import LoggerProtocol
from userwallet.infrastructure.persistence.database import Database
from userwallet.infrastructure.persistence.models.user import UserModel
from userwallet.infrastructure.persistence.records import UserRecord
from userwallet.infrastructure.persistence.repository_base import resolve_session


class UserReadRepository:
    """Filtered, paginated listing of stored users."""

    def __init__(self, database: Database, logger: LoggerProtocol) -> None:
        self._database = database
        self._logger = logger

    async def find_users(
        self,
        params: PaginatedQueryParams,
        *,
        country: str | None = None,
        postal_code: str | None = None,
        street: str | None = None,
        session: AsyncSession | None = None,
    ) -> Paginated[UserRecord]:
        """Return one page of users matching every given filter.

        Args:
            params: Page size and zero-based page number.
            country: Exact country match.
            postal_code: Exact postal code match.
            street: Exact street match.
            session: Explicit session to use instead of the resolved one.

        Returns:
            Paginated[UserRecord] where ``count`` covers all pages.
        """
        conditions = []
        if country is not None:
            conditions.append(UserModel.country == country)
        if postal_code is not None:
            conditions.append(UserModel.postal_code == postal_code)
        if street is not None:
            conditions.append(UserModel.street == street)

        self._logger.debug(
            "find_users",
            limit=params.limit,
            page=params.page,
            filter_count=len(conditions),
            request_id=RequestContextService.get_request_id(),
        )

        async with resolve_session(self._database, session) as active:
            count = await active.scalar(
                select(func.count()).select_from(UserModel).where(*conditions)
            )
            models = (
                await active.scalars(
                    select(UserModel)
                    .where(*conditions)
                    .order_by(UserModel.created_at, UserModel.id)
                    .offset(params.offset)
                    .limit(params.limit)
                )
            ).all()

        return Paginated(
            data=[UserRecord.model_validate(model) for model in models],
            count=count or 0,
            limit=params.limit,
            page=params.page,
        )
