"""DeleteUser command handler.

Loads the user, marks it deleted (enqueues UserDeleted) and deletes the row.
The wallet row goes with it through the store's ON DELETE CASCADE.
"""

from userwallet.application.commands.user_commands import DeleteUser
from userwallet.application.errors import ApplicationError, ApplicationErrorCode
from userwallet.core.enums import ErrorCode
from userwallet.core.errors import NotFoundError
from userwallet.core.result import Failure, Result, Success
from userwallet.domain.errors import UserError
from userwallet.domain.protocols.logger_protocol import LoggerProtocol
from userwallet.domain.protocols.user_repository import UserRepository


class DeleteUserHandler:
    """Handler for DeleteUser command."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: DeleteUser) -> Result[bool, ApplicationError]:
        """Handle DeleteUser command.

        Returns:
            Success(True) when the user was deleted.
            Failure(NOT_FOUND) when no such user exists.
        """

        async def delete_user() -> bool:
            user = await self._user_repo.find_one_by_id(cmd.user_id)
            if user is None:
                return False
            user.delete()
            return await self._user_repo.delete(user)

        deleted = await self._user_repo.transaction(delete_user)
        if not deleted:
            return Failure(error=self._not_found(cmd))

        self._logger.info("user_deleted", user_id=str(cmd.user_id))
        return Success(value=True)

    @staticmethod
    def _not_found(cmd: DeleteUser) -> ApplicationError:
        return ApplicationError(
            code=ApplicationErrorCode.NOT_FOUND,
            message=UserError.USER_NOT_FOUND,
            domain_error=NotFoundError(
                code=ErrorCode.USER_NOT_FOUND,
                message=UserError.USER_NOT_FOUND,
                resource_type="User",
                resource_id=str(cmd.user_id),
            ),
        )
