"""API test fixtures.

The real app runs against the session-wide SQLite database configured in the
root conftest (tables created at startup because DB_AUTO_CREATE is set).
Tests use unique emails and countries, so they never see each other's rows.
"""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from userwallet.main import app


@pytest.fixture
def client():
    """TestClient with lifespan (startup creates tables, shutdown disposes)."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def unique() -> str:
    return uuid4().hex[:12]


@pytest.fixture
def user_payload(unique):
    return {
        "email": f"user-{unique}@gmail.com",
        "country": f"Country-{unique}",
        "postal_code": "24312",
        "street": "Road Avenue",
    }
