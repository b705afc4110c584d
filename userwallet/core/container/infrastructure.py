"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL in production, SQLite in tests)
- Logging (structlog console adapter)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from userwallet.core.config import get_settings
from userwallet.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from userwallet.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns:
        Database manager instance with its connection pool.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from userwallet.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
