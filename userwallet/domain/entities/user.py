"""User aggregate.

Pure business logic, no framework dependencies.

Business Rules:
    - Email is validated and normalized on creation
    - New users start with the ``guest`` role
    - Address changes produce a new Address value object
    - Every mutation re-validates the whole aggregate
"""

from dataclasses import dataclass

from userwallet.core.enums import ErrorCode
from userwallet.core.errors import ValidationError, ValidationException
from userwallet.domain.entities.base import AggregateRoot
from userwallet.domain.enums import UserRole
from userwallet.domain.events.user_events import (
    UserAddressUpdated,
    UserCreated,
    UserDeleted,
    UserRoleChanged,
)
from userwallet.domain.value_objects import Address, Email


@dataclass(kw_only=True)
class UserEntity(AggregateRoot):
    """User aggregate root.

    Attributes:
        email: Normalized email address (unique in the store).
        address: Postal address value object.
        role: Current role.

    Example:
        >>> user = UserEntity.create(
        ...     email="john@gmail.com",
        ...     address=Address(country="England", postal_code="24312", street="Road Avenue"),
        ... )
        >>> user.role
        <UserRole.GUEST: 'guest'>
        >>> [type(e).__name__ for e in user.pending_events]
        ['UserCreated']
    """

    email: str
    address: Address
    role: UserRole = UserRole.GUEST

    @classmethod
    def create(cls, *, email: str, address: Address) -> "UserEntity":
        """Create a new guest user and enqueue UserCreated.

        Raises:
            ValidationException: If email or address is invalid.
        """
        user = cls(email=Email(email).value, address=address)
        user.validate()
        user.add_event(
            UserCreated(
                aggregate_id=user.id,
                email=user.email,
                country=address.country,
                postal_code=address.postal_code,
                street=address.street,
            )
        )
        return user

    def validate(self) -> None:
        Email(self.email)
        if not isinstance(self.address, Address):
            raise ValidationException(
                ValidationError(
                    code=ErrorCode.INVALID_ADDRESS,
                    message="User address is required",
                    field="address",
                )
            )
        if not UserRole.is_valid(self.role):
            raise ValidationException(
                ValidationError(
                    code=ErrorCode.INVALID_ROLE,
                    message=f"Unknown role: {self.role}",
                    field="role",
                )
            )

    def make_admin(self) -> None:
        self._change_role(UserRole.ADMIN)

    def make_moderator(self) -> None:
        self._change_role(UserRole.MODERATOR)

    def update_address(
        self,
        *,
        country: str | None = None,
        postal_code: str | None = None,
        street: str | None = None,
    ) -> None:
        """Replace the address, keeping parts that are not given.

        Raises:
            ValidationException: If the resulting address is invalid. The
                aggregate is left unchanged in that case.
        """
        self.address = self.address.with_changes(
            country=country, postal_code=postal_code, street=street
        )
        self.validate()
        self._touch()
        self.add_event(
            UserAddressUpdated(
                aggregate_id=self.id,
                country=self.address.country,
                postal_code=self.address.postal_code,
                street=self.address.street,
            )
        )

    def delete(self) -> None:
        """Mark the user for deletion. The repository performs the delete."""
        self.add_event(UserDeleted(aggregate_id=self.id))

    def _change_role(self, new_role: UserRole) -> None:
        old_role = self.role
        self.role = new_role
        self.validate()
        self._touch()
        self.add_event(
            UserRoleChanged(
                aggregate_id=self.id,
                old_role=UserRole(old_role).value,
                new_role=new_role.value,
            )
        )
