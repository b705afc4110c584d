"""Unit tests for the request-scoped context.

Tests cover:
- request_scope binds a fresh context and restores the previous one
- Concurrent request scopes each see their own request id and transaction
- Unbound access outside any scope never shares state between tasks
"""

import asyncio

import pytest

from userwallet.core.request_context import RequestContextService, request_scope


@pytest.mark.unit
class TestRequestScope:
    """Test request_scope binding."""

    @pytest.mark.asyncio
    async def test_scope_uses_given_request_id(self):
        async with request_scope("req-1") as context:
            assert context.request_id == "req-1"
            assert RequestContextService.get_request_id() == "req-1"
            assert RequestContextService.get_transaction_connection() is None

    @pytest.mark.asyncio
    async def test_scope_generates_request_id_when_omitted(self):
        async with request_scope() as context:
            assert len(context.request_id) == 32

    @pytest.mark.asyncio
    async def test_scope_restores_previous_context_on_exit(self):
        # Arrange
        RequestContextService.set_request_id("outer")

        # Act
        async with request_scope("inner"):
            RequestContextService.set_transaction_connection(object())  # type: ignore[arg-type]

        # Assert
        assert RequestContextService.get_request_id() == "outer"
        assert RequestContextService.get_transaction_connection() is None

    @pytest.mark.asyncio
    async def test_scope_is_reset_when_body_raises(self):
        RequestContextService.set_request_id("outer")

        with pytest.raises(RuntimeError):
            async with request_scope("inner"):
                raise RuntimeError("boom")

        assert RequestContextService.get_request_id() == "outer"


@pytest.mark.unit
class TestConcurrentRequests:
    """Concurrent request scopes are isolated."""

    @pytest.mark.asyncio
    async def test_concurrent_scopes_see_their_own_state(self):
        # Arrange
        seen: dict[str, tuple[str, object]] = {}

        async def request(name: str, delay: float) -> None:
            handle = object()
            async with request_scope(name):
                RequestContextService.set_transaction_connection(handle)  # type: ignore[arg-type]
                await asyncio.sleep(delay)
                seen[name] = (
                    RequestContextService.get_request_id(),
                    RequestContextService.get_transaction_connection() is handle,
                )

        # Act - interleave the two requests
        await asyncio.gather(request("a", 0.02), request("b", 0.01))

        # Assert
        assert seen == {"a": ("a", True), "b": ("b", True)}

    @pytest.mark.asyncio
    async def test_clear_only_affects_current_request(self):
        handle = object()
        cleared = asyncio.Event()

        async def clearing_request() -> None:
            async with request_scope("clearer"):
                RequestContextService.set_transaction_connection(object())  # type: ignore[arg-type]
                RequestContextService.clear_transaction_connection()
                cleared.set()

        async def holding_request() -> bool:
            async with request_scope("holder"):
                RequestContextService.set_transaction_connection(handle)  # type: ignore[arg-type]
                await cleared.wait()
                return RequestContextService.get_transaction_connection() is handle

        _, still_held = await asyncio.gather(clearing_request(), holding_request())

        assert still_held is True


@pytest.mark.unit
class TestUnboundContext:
    """Access outside request_scope."""

    @pytest.mark.asyncio
    async def test_unbound_access_does_not_bind_a_context(self):
        first = RequestContextService.get_request_id()
        second = RequestContextService.get_request_id()

        assert first != second
        assert RequestContextService.get_transaction_connection() is None

    @pytest.mark.asyncio
    async def test_sibling_tasks_register_their_own_session(self):
        # Arrange - parent touched the context before spawning tasks
        RequestContextService.get_request_id()
        RequestContextService.set_request_id("parent")
        started = asyncio.Event()

        async def job(first: bool) -> bool:
            handle = object()
            token = RequestContextService.set_transaction_connection(handle)  # type: ignore[arg-type]
            try:
                if first:
                    started.set()
                    await asyncio.sleep(0.02)
                else:
                    await started.wait()
                return RequestContextService.get_transaction_connection() is handle
            finally:
                RequestContextService.clear_transaction_connection(token)

        # Act
        results = await asyncio.gather(job(True), job(False))

        # Assert
        assert results == [True, True]
        assert RequestContextService.get_request_id() == "parent"
        assert RequestContextService.get_transaction_connection() is None
