"""Application layer error types.

This module defines application-level errors that wrap domain errors and add
application-specific context (CQRS command/query execution failures).

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from userwallet.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    The presentation layer maps each code to a transport status (HTTP status,
    CLI exit code).
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_VALIDATION_FAILED = "query_validation_failed"
    QUERY_FAILED = "query_failed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CONFLICT,
        ...     message="User already exists",
        ...     domain_error=conflict_error,
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None
