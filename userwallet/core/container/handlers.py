"""Command and query handler factories (app-scoped).

Usage:
    # Presentation Layer (FastAPI Depends)
    handler: CreateUserHandler = Depends(get_create_user_handler)

    # CLI
    result = await get_create_user_handler().handle(command)
"""

from functools import lru_cache

from userwallet.application.commands.handlers.create_user_handler import (
    CreateUserHandler,
)
from userwallet.application.commands.handlers.delete_user_handler import (
    DeleteUserHandler,
)
from userwallet.application.commands.handlers.update_user_address_handler import (
    UpdateUserAddressHandler,
)
from userwallet.application.queries.handlers.find_users_handler import (
    FindUsersHandler,
)
from userwallet.core.config import get_settings
from userwallet.core.container.infrastructure import get_logger
from userwallet.core.container.repositories import (
    get_user_read_repository,
    get_user_repository,
)


@lru_cache()
def get_create_user_handler() -> CreateUserHandler:
    return CreateUserHandler(user_repo=get_user_repository(), logger=get_logger())


@lru_cache()
def get_delete_user_handler() -> DeleteUserHandler:
    return DeleteUserHandler(user_repo=get_user_repository(), logger=get_logger())


@lru_cache()
def get_update_user_address_handler() -> UpdateUserAddressHandler:
    return UpdateUserAddressHandler(user_repo=get_user_repository())


@lru_cache()
def get_find_users_handler() -> FindUsersHandler:
    settings = get_settings()
    return FindUsersHandler(
        get_user_read_repository(),
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )
