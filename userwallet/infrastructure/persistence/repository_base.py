"""Transactional repository base.

``SqlAlchemyRepositoryBase`` wraps SQLAlchemy calls with aggregate validation,
domain-event publishing, and per-request transaction propagation.

Session resolution (every read and write):
    1. the ``session`` argument, when the caller threads one explicitly
    2. the request's ambient transaction (``RequestContextService``)
    3. a fresh pooled session from ``Database.get_session`` (commits on exit)

Event publishing:
    After a successful write the repository drains each aggregate's buffer
    and publishes the events in order, aggregate by aggregate. With a fresh
    session this happens after commit. Inside an ambient transaction it
    happens before commit, so subscribers that write through a repository
    join the same transaction. Delivery is in-process and at most once: a
    crash between commit and publish drops the events.

Transactions:
    ``transaction_scope`` opens a database transaction only when the request
    has none, registers it as ambient, and clears it on exit. Nested scopes
    reuse the outer session, so one request-scope nesting tree never holds
    more than one physical transaction.
"""

from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import ValidationError as RecordValidationError
from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from userwallet.core.enums import ErrorCode
from userwallet.core.errors import (
    ConflictError,
    ConflictException,
    ValidationException,
)
from userwallet.core.request_context import RequestContextService
from userwallet.domain.entities.base import AggregateRoot
from userwallet.domain.pagination import Paginated, PaginatedQueryParams
from userwallet.domain.protocols.event_bus_protocol import EventBusProtocol
from userwallet.domain.protocols.logger_protocol import LoggerProtocol
from userwallet.infrastructure.persistence.base import BaseModel
from userwallet.infrastructure.persistence.database import Database
from userwallet.infrastructure.persistence.mappers import Mapper

A = TypeVar("A", bound=AggregateRoot)
M = TypeVar("M", bound=BaseModel)
R = TypeVar("R")
T = TypeVar("T")

UNIQUE_VIOLATION_SQLSTATE = "23505"
SQLITE_UNIQUE_VIOLATION = "UNIQUE constraint failed"


def is_unique_violation(error: IntegrityError) -> bool:
    """True when the store rejected a write for a duplicate key."""
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == UNIQUE_VIOLATION_SQLSTATE:
        return True
    return SQLITE_UNIQUE_VIOLATION in str(orig)


def violated_constraint(error: IntegrityError) -> str | None:
    """Best-effort name of the violated constraint or column.

    PostgreSQL (asyncpg) reports the constraint name on the driver exception;
    SQLite only includes the columns in the message.
    """
    orig = error.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return str(name)
    message = str(orig)
    if SQLITE_UNIQUE_VIOLATION in message:
        return message.split(SQLITE_UNIQUE_VIOLATION, 1)[1].lstrip(": ").strip() or None
    return None


@asynccontextmanager
async def resolve_session(
    database: Database, session: AsyncSession | None = None
) -> AsyncIterator[AsyncSession]:
    """Yield the session a repository call should use.

    Only a fresh session is committed and closed here. Explicit and ambient
    sessions belong to whoever opened them.
    """
    if session is not None:
        yield session
        return
    ambient = RequestContextService.get_transaction_connection()
    if ambient is not None:
        yield ambient
        return
    async with database.get_session() as fresh:
        yield fresh


class SqlAlchemyRepositoryBase(Generic[A, M, R]):
    """Generic CRUD + pagination + transactions for one aggregate type.

    Subclasses set ``model``, ``mapper`` and ``resource_type``.

    Attributes:
        model: ORM model class backing the aggregate.
        mapper: Aggregate/model/record translation.
        resource_type: Name used in conflict errors ("User", "Wallet").
    """

    model: type[M]
    mapper: Mapper[A, M, Any]
    resource_type: str = "Resource"

    def __init__(
        self,
        database: Database,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize repository with its collaborators.

        Args:
            database: Session and transaction source.
            event_bus: Receives events drained from written aggregates.
            logger: Structured logger.
        """
        self._database = database
        self._event_bus = event_bus
        self._logger = logger

    @property
    def table_name(self) -> str:
        return str(self.model.__tablename__)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def find_one_by_id(
        self, entity_id: UUID, *, session: AsyncSession | None = None
    ) -> A | None:
        """Find one aggregate by id.

        Never raises: store errors and rows that fail record validation are
        logged and reported as "not found".
        """
        try:
            async with resolve_session(self._database, session) as active:
                model = await active.get(self.model, entity_id)
                return self._to_domain(model) if model is not None else None
        except (SQLAlchemyError, RecordValidationError, ValidationException) as e:
            self._logger.error(
                "find_one_by_id_failed",
                error=e,
                table=self.table_name,
                entity_id=str(entity_id),
                request_id=RequestContextService.get_request_id(),
            )
            return None

    async def find_all(self, *, session: AsyncSession | None = None) -> list[A]:
        async with resolve_session(self._database, session) as active:
            models = (await active.scalars(self._ordered_select())).all()
            return [self._to_domain(model) for model in models]

    async def find_all_paginated(
        self,
        params: PaginatedQueryParams,
        *,
        session: AsyncSession | None = None,
    ) -> Paginated[A]:
        """Return one page of aggregates plus the total row count."""
        async with resolve_session(self._database, session) as active:
            count = await active.scalar(select(func.count()).select_from(self.model))
            models = (
                await active.scalars(
                    self._ordered_select().offset(params.offset).limit(params.limit)
                )
            ).all()
            return Paginated(
                data=[self._to_domain(model) for model in models],
                count=count or 0,
                limit=params.limit,
                page=params.page,
            )

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def insert(
        self,
        entities: A | Sequence[A],
        *,
        session: AsyncSession | None = None,
    ) -> None:
        """Validate and insert one or many aggregates, then publish their events.

        Raises:
            ValidationException: If any aggregate is invalid. Nothing is written.
            ConflictException: On a unique constraint violation.
        """
        items = list(entities) if isinstance(entities, Sequence) else [entities]
        if not items:
            return
        for entity in items:
            entity.validate()

        self._log_write("insert", len(items))
        try:
            async with resolve_session(self._database, session) as active:
                active.add_all([self.mapper.to_model(entity) for entity in items])
                await active.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise self._conflict(e) from e
            raise

        await self._publish_events(items)

    async def delete(
        self, entity: A, *, session: AsyncSession | None = None
    ) -> bool:
        """Delete the aggregate's row.

        Returns:
            False when no row existed (nothing published), True otherwise.
        """
        entity.validate()
        self._log_write("delete", 1)
        async with resolve_session(self._database, session) as active:
            result = await active.execute(
                delete(self.model)
                .where(self.model.id == entity.id)
                .execution_options(synchronize_session=False)
            )
            deleted = bool(result.rowcount)

        if not deleted:
            return False
        await self._publish_events([entity])
        return True

    async def _update(
        self, entity: A, *, session: AsyncSession | None = None
    ) -> bool:
        """Write the aggregate's current state over its row, then publish.

        Concrete repositories expose this through named operations
        (``update_address``, ``update_balance``).

        Returns:
            False when no row existed (nothing published), True otherwise.

        Raises:
            ValidationException: If the aggregate is invalid.
            ConflictException: On a unique constraint violation.
        """
        entity.validate()
        self._log_write("update", 1)
        try:
            async with resolve_session(self._database, session) as active:
                result = await active.execute(
                    update(self.model)
                    .where(self.model.id == entity.id)
                    .values(**self.mapper.to_values(entity))
                    .execution_options(synchronize_session=False)
                )
                updated = bool(result.rowcount)
        except IntegrityError as e:
            if is_unique_violation(e):
                raise self._conflict(e) from e
            raise

        if not updated:
            return False
        await self._publish_events([entity])
        return True

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    @asynccontextmanager
    async def transaction_scope(self) -> AsyncIterator[AsyncSession]:
        """Join the request's transaction, or open and register one.

        Only the scope that opened the transaction commits it, rolls it back
        and clears the ambient registration.

        Yields:
            AsyncSession: The session every nested repository call will use.
        """
        ambient = RequestContextService.get_transaction_connection()
        if ambient is not None:
            yield ambient
            return

        request_id = RequestContextService.get_request_id()
        async with self._database.transaction() as session:
            token = RequestContextService.set_transaction_connection(session)
            self._logger.debug("transaction_started", request_id=request_id)
            try:
                yield session
            except Exception as e:
                self._logger.debug(
                    "transaction_aborted",
                    request_id=request_id,
                    error_type=type(e).__name__,
                )
                raise
            finally:
                RequestContextService.clear_transaction_connection(token)
        self._logger.debug("transaction_committed", request_id=request_id)

    async def transaction(self, handler: Callable[[], Awaitable[T]]) -> T:
        """Run ``handler`` inside the request's single transaction.

        Args:
            handler: Zero-argument coroutine function.

        Returns:
            Whatever ``handler`` returns.
        """
        async with self.transaction_scope():
            return await handler()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ordered_select(self) -> Any:
        return select(self.model).order_by(self.model.created_at, self.model.id)

    def _to_domain(self, model: M) -> A:
        return self.mapper.to_domain(self.mapper.to_record(model))

    def _conflict(self, error: IntegrityError) -> ConflictException:
        constraint = violated_constraint(error)
        return ConflictException(
            ConflictError(
                code=ErrorCode.RESOURCE_CONFLICT,
                message="Record already exists",
                resource_type=self.resource_type,
                conflicting_field=constraint,
                details={"constraint": constraint} if constraint else None,
            )
        )

    def _log_write(self, operation: str, count: int) -> None:
        self._logger.debug(
            "repository_write",
            operation=operation,
            table=self.table_name,
            entity_count=count,
            request_id=RequestContextService.get_request_id(),
        )

    async def _publish_events(self, entities: Sequence[A]) -> None:
        for entity in entities:
            for event in entity.pull_events():
                await self._event_bus.publish(event)
