"""Request-scoped context (request id + ambient transaction session).

Each logical request gets its own ``AppRequestContext`` stored in a
``ContextVar``. asyncio copies the current context into every task it creates,
so the binding follows the request across ``await`` points and is never visible
to requests running concurrently.

The ambient transaction session lives in a separate ``ContextVar`` and is only
ever changed with ``set``/``reset``. Tasks spawned from one context therefore
start with the parent's session but cannot register or clear one for each
other.

The repository layer reads the ambient session from here to decide whether a
call joins an open transaction or uses a fresh pooled session.

Usage:
    async with request_scope():
        RequestContextService.get_request_id()  # fresh uuid4 hex
        await handler.handle(command)
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import uuid4

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


@dataclass(frozen=True, slots=True)
class AppRequestContext:
    """Per-request state.

    Attributes:
        request_id: Correlation id included in repository log lines.
    """

    request_id: str

    @property
    def transaction_session(self) -> AsyncSession | None:
        """Session of the outermost open transaction in the current context."""
        return _transaction_session.get()


_request_context: ContextVar[AppRequestContext | None] = ContextVar(
    "request_context", default=None
)
_transaction_session: ContextVar[AsyncSession | None] = ContextVar(
    "transaction_session", default=None
)


def _new_request_id() -> str:
    return uuid4().hex


class RequestContextService:
    """Accessors for the context bound to the current logical request."""

    @staticmethod
    def get_context() -> AppRequestContext:
        """Return the bound context.

        Outside ``request_scope`` nothing is bound and an unbound context with
        a fresh request id is returned on every call; the caller's
        ``contextvars.Context`` is left untouched.
        """
        context = _request_context.get()
        if context is None:
            return AppRequestContext(request_id=_new_request_id())
        return context

    @staticmethod
    def set_request_id(request_id: str) -> None:
        _request_context.set(AppRequestContext(request_id=request_id))

    @staticmethod
    def get_request_id() -> str:
        return RequestContextService.get_context().request_id

    @staticmethod
    def set_transaction_connection(session: AsyncSession) -> Token:
        """Register ``session`` as ambient in the current context.

        Returns:
            Token: Pass to ``clear_transaction_connection`` to restore the
            previous registration.
        """
        return _transaction_session.set(session)

    @staticmethod
    def get_transaction_connection() -> AsyncSession | None:
        return _transaction_session.get()

    @staticmethod
    def clear_transaction_connection(token: Token | None = None) -> None:
        """Drop the ambient session in the current context only."""
        if token is None:
            _transaction_session.set(None)
        else:
            _transaction_session.reset(token)


@asynccontextmanager
async def request_scope(request_id: str | None = None) -> AsyncIterator[AppRequestContext]:
    """Bind a fresh context for one logical request.

    The request starts with no ambient transaction. The previous bindings
    (usually none) are restored on exit, even on failure.

    Args:
        request_id: Correlation id to use. A new uuid4 hex when omitted.

    Yields:
        AppRequestContext: The context bound for the duration of the block.
    """
    context = AppRequestContext(request_id=request_id or _new_request_id())
    context_token = _request_context.set(context)
    session_token = _transaction_session.set(None)
    try:
        yield context
    finally:
        _transaction_session.reset(session_token)
        _request_context.reset(context_token)
