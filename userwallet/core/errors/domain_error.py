"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for application errors that flow through the
system as data (Result types). Where an operation has to abort instead of
returning (aggregate construction, repository writes) the error is wrapped in
one of the exceptions from ``userwallet.core.errors.exceptions``.

Usage:
    from userwallet.core.errors import DomainError
    from userwallet.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from userwallet.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
