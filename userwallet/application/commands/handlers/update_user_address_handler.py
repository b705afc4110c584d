"""UpdateUserAddress command handler."""

from userwallet.application.commands.user_commands import UpdateUserAddress
from userwallet.application.errors import ApplicationError, ApplicationErrorCode
from userwallet.core.enums import ErrorCode
from userwallet.core.errors import NotFoundError, ValidationException
from userwallet.core.result import Failure, Result, Success
from userwallet.domain.errors import UserError
from userwallet.domain.protocols.user_repository import UserRepository


class UpdateUserAddressHandler:
    """Handler for UpdateUserAddress command.

    Returns Success(None), Failure(NOT_FOUND) for an unknown user, or
    Failure(COMMAND_VALIDATION_FAILED) when the new address is invalid.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, cmd: UpdateUserAddress) -> Result[None, ApplicationError]:
        async def update_address() -> Result[None, ApplicationError]:
            user = await self._user_repo.find_one_by_id(cmd.user_id)
            if user is None:
                return Failure(
                    error=ApplicationError(
                        code=ApplicationErrorCode.NOT_FOUND,
                        message=UserError.USER_NOT_FOUND,
                        domain_error=NotFoundError(
                            code=ErrorCode.USER_NOT_FOUND,
                            message=UserError.USER_NOT_FOUND,
                            resource_type="User",
                            resource_id=str(cmd.user_id),
                        ),
                    )
                )
            try:
                user.update_address(
                    country=cmd.country,
                    postal_code=cmd.postal_code,
                    street=cmd.street,
                )
            except ValidationException as e:
                return Failure(
                    error=ApplicationError(
                        code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                        message=e.error.message,
                        domain_error=e.error,
                    )
                )
            await self._user_repo.update_address(user)
            return Success(value=None)

        return await self._user_repo.transaction(update_address)
