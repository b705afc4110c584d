"""Unit tests for RequestContextMiddleware on a minimal app."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from userwallet.core.request_context import RequestContextService
from userwallet.presentation.api.middleware.request_context_middleware import (
    RequestContextMiddleware,
)


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    app.add_middleware(RequestContextMiddleware)

    @app.get("/context")
    async def context() -> dict[str, object]:
        return {
            "request_id": RequestContextService.get_request_id(),
            "has_transaction": RequestContextService.get_transaction_connection()
            is not None,
        }

    return TestClient(app)


@pytest.mark.unit
class TestRequestContextMiddleware:
    """Test request id propagation."""

    def test_generates_request_id(self, client):
        response = client.get("/context")

        request_id = response.headers["X-Request-Id"]
        assert len(request_id) == 32
        assert response.json() == {"request_id": request_id, "has_transaction": False}

    def test_honors_incoming_request_id(self, client):
        response = client.get("/context", headers={"X-Request-Id": "abc-123"})

        assert response.headers["X-Request-Id"] == "abc-123"
        assert response.json()["request_id"] == "abc-123"

    def test_each_request_gets_its_own_id(self, client):
        first = client.get("/context").headers["X-Request-Id"]
        second = client.get("/context").headers["X-Request-Id"]

        assert first != second
