from userwallet.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)

__all__ = ["ApplicationError", "ApplicationErrorCode"]
