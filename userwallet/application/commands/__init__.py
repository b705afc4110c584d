from userwallet.application.commands.user_commands import (
    CreateUser,
    DeleteUser,
    UpdateUserAddress,
)

__all__ = ["CreateUser", "DeleteUser", "UpdateUserAddress"]
