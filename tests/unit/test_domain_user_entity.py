"""Unit tests for the UserEntity aggregate and its value objects.

Tests cover:
- Factory: validation, normalization, UserCreated queued
- Address: length limits, with_changes returns a new instance
- Role changes and address updates queue events in order
- Identity immutability
- pull_events drains the buffer
"""

import pytest

from userwallet.core.enums import ErrorCode
from userwallet.core.errors import ValidationException
from userwallet.domain.entities.user import UserEntity
from userwallet.domain.enums import UserRole
from userwallet.domain.events import (
    UserAddressUpdated,
    UserCreated,
    UserDeleted,
    UserRoleChanged,
)
from userwallet.domain.value_objects import Address, Email


def make_address(**overrides) -> Address:
    values = {"country": "England", "postal_code": "24312", "street": "Road Avenue"}
    values.update(overrides)
    return Address(**values)


@pytest.mark.unit
class TestUserCreate:
    """Test UserEntity.create factory."""

    def test_create_queues_exactly_one_created_event(self):
        # Act
        user = UserEntity.create(email="john@gmail.com", address=make_address())

        # Assert
        events = user.pending_events
        assert len(events) == 1
        assert isinstance(events[0], UserCreated)
        assert events[0].aggregate_id == user.id
        assert events[0].email == "john@gmail.com"
        assert events[0].sequence == 1

    def test_create_defaults_to_guest_role(self):
        user = UserEntity.create(email="john@gmail.com", address=make_address())

        assert user.role == UserRole.GUEST

    def test_create_normalizes_email_domain(self):
        user = UserEntity.create(email="John@GMAIL.com", address=make_address())

        assert user.email == "John@gmail.com"

    def test_create_with_invalid_email_raises_validation_exception(self):
        # Act & Assert
        with pytest.raises(ValidationException) as exc_info:
            UserEntity.create(email="not-an-email", address=make_address())

        assert exc_info.value.error.code == ErrorCode.INVALID_EMAIL
        assert exc_info.value.error.field == "email"

    def test_validation_exception_is_a_value_error(self):
        with pytest.raises(ValueError):
            Email("missing-at-sign.com")


@pytest.mark.unit
class TestAddress:
    """Test Address value object."""

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"country": ""}, "country"),
            ({"postal_code": "1" * 21}, "postal_code"),
            ({"street": "x" * 256}, "street"),
        ],
    )
    def test_invalid_parts_are_rejected(self, overrides, field):
        with pytest.raises(ValidationException) as exc_info:
            make_address(**overrides)

        assert exc_info.value.error.code == ErrorCode.INVALID_ADDRESS
        assert exc_info.value.error.field == field

    def test_with_changes_returns_new_instance(self):
        # Arrange
        home = make_address(street="Grand Avenue")

        # Act
        moved = home.with_changes(street="Road Avenue")

        # Assert
        assert home.street == "Grand Avenue"
        assert moved.street == "Road Avenue"
        assert moved.country == home.country
        assert moved is not home

    def test_address_is_immutable(self):
        address = make_address()

        with pytest.raises(AttributeError):
            address.street = "Elsewhere"  # type: ignore[misc]


@pytest.mark.unit
class TestUserMutations:
    """Test role and address changes."""

    def test_make_admin_queues_role_changed(self):
        # Arrange
        user = UserEntity.create(email="john@gmail.com", address=make_address())
        user.pull_events()

        # Act
        user.make_admin()

        # Assert
        (event,) = user.pending_events
        assert isinstance(event, UserRoleChanged)
        assert event.old_role == "guest"
        assert event.new_role == "admin"
        assert user.role == UserRole.ADMIN

    def test_events_are_sequenced_in_occurrence_order(self):
        user = UserEntity.create(email="john@gmail.com", address=make_address())
        user.make_moderator()
        user.update_address(postal_code="99999")
        user.delete()

        events = user.pull_events()

        assert [type(e) for e in events] == [
            UserCreated,
            UserRoleChanged,
            UserAddressUpdated,
            UserDeleted,
        ]
        assert [e.sequence for e in events] == [1, 2, 3, 4]

    def test_update_address_keeps_unspecified_parts(self):
        user = UserEntity.create(email="john@gmail.com", address=make_address())

        user.update_address(street="Grand Avenue")

        assert user.address == make_address(street="Grand Avenue")

    def test_invalid_address_update_leaves_user_unchanged(self):
        # Arrange
        user = UserEntity.create(email="john@gmail.com", address=make_address())
        user.pull_events()

        # Act
        with pytest.raises(ValidationException):
            user.update_address(country="")

        # Assert
        assert user.address == make_address()
        assert user.pending_events == ()


@pytest.mark.unit
class TestAggregateRoot:
    """Test behavior inherited from AggregateRoot."""

    def test_identity_cannot_be_reassigned(self):
        user = UserEntity.create(email="john@gmail.com", address=make_address())
        other = UserEntity.create(email="jane@gmail.com", address=make_address())

        with pytest.raises(AttributeError):
            user.id = other.id

    def test_pull_events_drains_buffer(self):
        user = UserEntity.create(email="john@gmail.com", address=make_address())

        first = user.pull_events()
        second = user.pull_events()

        assert len(first) == 1
        assert second == []
