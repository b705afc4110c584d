"""Pytest configuration.

The environment is pointed at a throwaway SQLite database BEFORE any
``userwallet`` module is imported: settings are loaded once per process.

Fixtures:
    database: Fresh SQLite database per test, tables created
    mock_logger: MagicMock standing in for LoggerProtocol
"""

import inspect
import os
import tempfile
from pathlib import Path

_TEST_DIR = Path(tempfile.mkdtemp(prefix="userwallet-tests-"))

os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR / 'app.db'}"
os.environ["DB_AUTO_CREATE"] = "true"
os.environ["LOG_LEVEL"] = "DEBUG"

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from userwallet.infrastructure.persistence.database import Database  # noqa: E402


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; assert on ``.debug/.info/.warning/.error`` calls."""
    return MagicMock()


@pytest_asyncio.fixture
async def database(tmp_path):
    """Isolated SQLite database with all tables created.

    Foreign keys are enforced (the wallet cascade relies on them).
    """
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()
    yield db
    await db.close()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: API tests through the FastAPI app")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
