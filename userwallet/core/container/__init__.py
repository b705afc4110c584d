"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from userwallet.core.container import get_logger, get_user_repository, ...

The container is organized into modules by concern:
- infrastructure: Core services (database, logging)
- events: Event bus and subscriptions
- repositories: Repository factories
- handlers: Command/query handler factories

Every factory is an ``lru_cache`` singleton (app-scoped). Repositories hold
no per-request state: the request's transaction lives in the request context.
"""

from userwallet.core.container.events import get_event_bus
from userwallet.core.container.handlers import (
    get_create_user_handler,
    get_delete_user_handler,
    get_find_users_handler,
    get_update_user_address_handler,
)
from userwallet.core.container.infrastructure import get_database, get_logger
from userwallet.core.container.repositories import (
    get_user_read_repository,
    get_user_repository,
    get_wallet_repository,
)

__all__ = [
    "get_database",
    "get_logger",
    "get_event_bus",
    "get_user_repository",
    "get_wallet_repository",
    "get_user_read_repository",
    "get_create_user_handler",
    "get_delete_user_handler",
    "get_update_user_address_handler",
    "get_find_users_handler",
]
