"""Users resource router.

RESTful endpoints for user management. Every user owns exactly one wallet:
it is opened in the same transaction as the user and removed with it.

Endpoints:
    POST   /api/v1/users        - Create user
    GET    /api/v1/users        - List users (paginated, filterable)
    PATCH  /api/v1/users/{id}/address - Change address
    DELETE /api/v1/users/{id}   - Delete user
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse, Response

from userwallet.application.commands.handlers.create_user_handler import (
    CreateUserHandler,
)
from userwallet.application.commands.handlers.delete_user_handler import (
    DeleteUserHandler,
)
from userwallet.application.commands.handlers.update_user_address_handler import (
    UpdateUserAddressHandler,
)
from userwallet.application.commands.user_commands import (
    CreateUser,
    DeleteUser,
    UpdateUserAddress,
)
from userwallet.application.errors import ApplicationError, ApplicationErrorCode
from userwallet.application.queries.handlers.find_users_handler import (
    FindUsersHandler,
)
from userwallet.application.queries.user_queries import FindUsers
from userwallet.core.container import (
    get_create_user_handler,
    get_delete_user_handler,
    get_find_users_handler,
    get_update_user_address_handler,
)
from userwallet.core.result import Failure, Success
from userwallet.domain.errors import UserError
from userwallet.presentation.api.middleware.request_context_middleware import (
    get_request_id,
)
from userwallet.presentation.api.v1.errors import ErrorResponseBuilder
from userwallet.presentation.api.v1.errors.problem_details import ProblemDetails
from userwallet.schemas.user_schemas import (
    UserAddressUpdateRequest,
    UserCreateRequest,
    UserCreateResponse,
    UserListResponse,
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserCreateResponse,
    responses={
        400: {"description": "Invalid email or address", "model": ProblemDetails},
        409: {"description": "Email already registered", "model": ProblemDetails},
    },
    summary="Create user",
    description="Create a user and open an empty wallet for it.",
)
async def create_user(
    request: Request,
    data: UserCreateRequest,
    handler: CreateUserHandler = Depends(get_create_user_handler),
) -> UserCreateResponse | JSONResponse:
    """Create a new user.

    POST /api/v1/users → 201 Created

    Args:
        request: FastAPI request object.
        data: Email and address.
        handler: CreateUser handler (injected).

    Returns:
        UserCreateResponse on success (201 Created).
        JSONResponse with error on failure (400/409).
    """
    command = CreateUser(
        email=data.email,
        country=data.country,
        postal_code=data.postal_code,
        street=data.street,
    )

    result = await handler.handle(command)

    match result:
        case Success(value=user_id):
            return UserCreateResponse(id=user_id)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                request_id=get_request_id(),
            )


@router.get(
    "",
    response_model=UserListResponse,
    responses={400: {"description": "Invalid page or limit", "model": ProblemDetails}},
    summary="List users",
    description="Page through users, optionally filtered by address fields.",
)
async def list_users(
    request: Request,
    page: Annotated[int, Query(description="Zero-based page number")] = 0,
    limit: Annotated[int | None, Query(description="Page size")] = None,
    country: Annotated[str | None, Query(description="Exact country")] = None,
    postal_code: Annotated[str | None, Query(description="Exact postal code")] = None,
    street: Annotated[str | None, Query(description="Exact street")] = None,
    handler: FindUsersHandler = Depends(get_find_users_handler),
) -> UserListResponse | JSONResponse:
    """List users.

    GET /api/v1/users → 200 OK
    """
    query = FindUsers(
        page=page,
        limit=limit,
        country=country,
        postal_code=postal_code,
        street=street,
    )

    result = await handler.handle(query)

    match result:
        case Success(value=users):
            return UserListResponse.from_page(users)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                request_id=get_request_id(),
            )


def _parse_user_id(user_id: str) -> UUID | None:
    """Parse a path id; a malformed id cannot name an existing user."""
    try:
        return UUID(user_id)
    except ValueError:
        return None


def _user_not_found(request: Request) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(
        error=ApplicationError(
            code=ApplicationErrorCode.NOT_FOUND,
            message=UserError.USER_NOT_FOUND,
        ),
        request=request,
        request_id=get_request_id(),
    )


@router.patch(
    "/{user_id}/address",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        400: {"description": "Invalid address", "model": ProblemDetails},
        404: {"description": "User not found", "model": ProblemDetails},
    },
    summary="Change address",
    description="Change part or all of a user's address.",
)
async def update_user_address(
    request: Request,
    user_id: str,
    data: UserAddressUpdateRequest,
    handler: UpdateUserAddressHandler = Depends(get_update_user_address_handler),
) -> Response:
    """Change a user's address.

    PATCH /api/v1/users/{user_id}/address → 204 No Content
    """
    parsed_id = _parse_user_id(user_id)
    if parsed_id is None:
        return _user_not_found(request)

    result = await handler.handle(
        UpdateUserAddress(
            user_id=parsed_id,
            country=data.country,
            postal_code=data.postal_code,
            street=data.street,
        )
    )

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                request_id=get_request_id(),
            )


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "User not found", "model": ProblemDetails}},
    summary="Delete user",
    description="Delete a user. The user's wallet is removed with it.",
)
async def delete_user(
    request: Request,
    user_id: str,
    handler: DeleteUserHandler = Depends(get_delete_user_handler),
) -> Response:
    """Delete a user.

    DELETE /api/v1/users/{user_id} → 204 No Content

    A malformed id is reported as 404 rather than as a validation failure.
    """
    parsed_id = _parse_user_id(user_id)
    if parsed_id is None:
        return _user_not_found(request)

    result = await handler.handle(DeleteUser(user_id=parsed_id))

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                request_id=get_request_id(),
            )
