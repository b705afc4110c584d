"""CreateUser command handler.

Flow:
1. Build the UserEntity aggregate (validates email and address,
   enqueues UserCreated)
2. Open the request's transaction and insert the user
3. The repository publishes UserCreated inside that transaction;
   WalletEventHandler inserts the wallet through the same session
4. Return Success(user_id)

On failure:
- Invalid input: Failure(COMMAND_VALIDATION_FAILED), nothing written
- Duplicate email: Failure(CONFLICT), transaction rolled back (no wallet either)

Architecture:
- Application layer ONLY imports from domain and core
- Repositories are injected via protocols
"""

from uuid import UUID

from userwallet.application.commands.user_commands import CreateUser
from userwallet.application.errors import ApplicationError, ApplicationErrorCode
from userwallet.core.errors import ConflictException, ValidationException
from userwallet.core.result import Failure, Result, Success
from userwallet.domain.entities.user import UserEntity
from userwallet.domain.errors import UserError
from userwallet.domain.protocols.logger_protocol import LoggerProtocol
from userwallet.domain.protocols.user_repository import UserRepository
from userwallet.domain.value_objects import Address


class CreateUserHandler:
    """Handler for CreateUser command."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: CreateUser) -> Result[UUID, ApplicationError]:
        """Handle CreateUser command.

        Args:
            cmd: CreateUser command.

        Returns:
            Success(user_id) when the user (and wallet) were stored.
            Failure(ApplicationError) on invalid input or duplicate email.
        """
        try:
            user = UserEntity.create(
                email=cmd.email,
                address=Address(
                    country=cmd.country,
                    postal_code=cmd.postal_code,
                    street=cmd.street,
                ),
            )
        except ValidationException as e:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    message=e.error.message,
                    domain_error=e.error,
                )
            )

        async def insert_user() -> None:
            await self._user_repo.insert(user)

        try:
            await self._user_repo.transaction(insert_user)
        except ConflictException as e:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.CONFLICT,
                    message=UserError.EMAIL_ALREADY_EXISTS,
                    domain_error=e.error,
                )
            )

        self._logger.info("user_created", user_id=str(user.id))
        return Success(value=user.id)
