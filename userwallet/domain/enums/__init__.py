from userwallet.domain.enums.user_role import UserRole

__all__ = ["UserRole"]
