"""User roles.

Role Hierarchy:
    admin > moderator > guest

New users start as ``guest``. Promotion happens through the named operations
on ``UserEntity`` (``make_admin``, ``make_moderator``).
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles.

    String Enum:
        Inherits from str for easy serialization into the ``users.role`` column.
    """

    ADMIN = "admin"
    MODERATOR = "moderator"
    GUEST = "guest"

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings."""
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, role: str) -> bool:
        """Check if a string is a valid role value."""
        return role in cls.values()
