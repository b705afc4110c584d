"""FindUsers query handler.

Reads persistence-shaped user records straight from the read model. No
aggregate is built and no event is raised.

Architecture:
- Returns Result[Paginated[UserRecordShape], ApplicationError]
- Page size defaults and bounds are injected (from settings)
"""

from userwallet.application.errors import ApplicationError, ApplicationErrorCode
from userwallet.application.queries.user_queries import FindUsers
from userwallet.core.result import Failure, Result, Success
from userwallet.domain.pagination import Paginated, PaginatedQueryParams
from userwallet.domain.protocols.user_read_model import (
    UserReadModel,
    UserRecordShape,
)


class FindUsersError:
    """FindUsers-specific errors."""

    INVALID_PAGE = "page cannot be negative"
    INVALID_LIMIT = "limit must be between 1 and {max_limit}"


class FindUsersHandler:
    """Handler for FindUsers query."""

    def __init__(
        self,
        read_model: UserReadModel,
        *,
        default_limit: int = 20,
        max_limit: int = 100,
    ) -> None:
        """Initialize handler.

        Args:
            read_model: User read model.
            default_limit: Page size when the query leaves it unset.
            max_limit: Largest page size accepted.
        """
        self._read_model = read_model
        self._default_limit = default_limit
        self._max_limit = max_limit

    async def handle(
        self, query: FindUsers
    ) -> Result[Paginated[UserRecordShape], ApplicationError]:
        limit = self._default_limit if query.limit is None else query.limit
        if query.page < 0:
            return Failure(error=self._invalid(FindUsersError.INVALID_PAGE))
        if not 1 <= limit <= self._max_limit:
            return Failure(
                error=self._invalid(
                    FindUsersError.INVALID_LIMIT.format(max_limit=self._max_limit)
                )
            )

        page = await self._read_model.find_users(
            PaginatedQueryParams(limit=limit, page=query.page),
            country=query.country,
            postal_code=query.postal_code,
            street=query.street,
        )
        return Success(value=page)

    @staticmethod
    def _invalid(message: str) -> ApplicationError:
        return ApplicationError(
            code=ApplicationErrorCode.QUERY_VALIDATION_FAILED,
            message=message,
        )
