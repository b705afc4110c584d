"""Common error classes used across all domains and layers.

Error Types:
- ValidationError: Aggregate or value object invariant violated
- NotFoundError: Resource not found
- ConflictError: Uniqueness violation reported by the store

Usage:
    from userwallet.core.errors import ValidationError
    from userwallet.core.enums import ErrorCode

    error = ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Invalid email format",
        field="email",
    )
"""

from dataclasses import dataclass

from userwallet.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (User, Wallet).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate key).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Constraint or column that was violated.
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None
