"""Generic repository protocol (port).

Every aggregate repository offers the same gateway contract:

- reads never raise for a missing row (``None`` / empty results)
- ``insert`` raises ``ConflictException`` on a unique violation
- ``delete`` returns False for a missing row
- writes publish the aggregate's buffered events after the write
- every call resolves its session as: explicit ``session`` argument, then the
  request's ambient transaction, then a fresh pooled session

This is a Protocol (not ABC) for structural typing.
"""

from collections.abc import Awaitable, Callable, Sequence
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Protocol, TypeVar
from uuid import UUID

from userwallet.domain.pagination import Paginated, PaginatedQueryParams

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

A = TypeVar("A")
T = TypeVar("T")


class RepositoryPort(Protocol[A]):
    """Persistence gateway for one aggregate type."""

    async def find_one_by_id(
        self, entity_id: UUID, *, session: "AsyncSession | None" = None
    ) -> A | None:
        """Find one aggregate by id. Store errors are logged and mapped to None."""
        ...

    async def find_all(self, *, session: "AsyncSession | None" = None) -> list[A]:
        ...

    async def find_all_paginated(
        self,
        params: PaginatedQueryParams,
        *,
        session: "AsyncSession | None" = None,
    ) -> Paginated[A]:
        ...

    async def insert(
        self,
        entities: A | Sequence[A],
        *,
        session: "AsyncSession | None" = None,
    ) -> None:
        """Validate and insert one or many aggregates, then publish their events.

        Raises:
            ValidationException: If an aggregate is invalid (nothing written).
            ConflictException: On a unique constraint violation.
        """
        ...

    async def delete(
        self, entity: A, *, session: "AsyncSession | None" = None
    ) -> bool:
        """Delete by id. False when the row does not exist."""
        ...

    async def transaction(self, handler: Callable[[], Awaitable[T]]) -> T:
        """Run ``handler`` inside the request's single transaction."""
        ...

    def transaction_scope(self) -> AbstractAsyncContextManager["AsyncSession"]:
        """Context manager form of ``transaction``."""
        ...
