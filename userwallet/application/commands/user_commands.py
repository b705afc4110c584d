"""User commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateUser:
    """Create a new user. A wallet is opened for the user in the same transaction.

    Attributes:
        email: Email address (validated by the aggregate).
        country: Address country.
        postal_code: Address postal code.
        street: Address street.

    Example:
        >>> command = CreateUser(
        ...     email="john@gmail.com",
        ...     country="England",
        ...     postal_code="24312",
        ...     street="Road Avenue",
        ... )
        >>> result = await handler.handle(command)
    """

    email: str
    country: str
    postal_code: str
    street: str


@dataclass(frozen=True, kw_only=True)
class DeleteUser:
    """Delete a user. The store removes the user's wallet with it.

    Attributes:
        user_id: User to delete.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class UpdateUserAddress:
    """Change part or all of a user's address.

    Attributes:
        user_id: User to update.
        country: New country, or None to keep the current one.
        postal_code: New postal code, or None to keep the current one.
        street: New street, or None to keep the current one.
    """

    user_id: UUID
    country: str | None = None
    postal_code: str | None = None
    street: str | None = None
