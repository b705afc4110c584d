"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from userwallet.core.errors import DomainError, ValidationError, NotFoundError
"""

from userwallet.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from userwallet.core.errors.domain_error import DomainError
from userwallet.core.errors.exceptions import (
    ConflictException,
    DomainException,
    ValidationException,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "DomainException",
    "ValidationException",
    "ConflictException",
]
