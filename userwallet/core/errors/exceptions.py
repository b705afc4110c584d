"""Raised forms of domain errors.

Aggregates raise ``ValidationException`` from factories and mutators, and
repositories raise ``ConflictException`` on unique violations. Handlers catch
both and convert them back to ``Failure(...)`` values, so nothing above the
application layer sees them.
"""

from userwallet.core.errors.common_errors import ConflictError, ValidationError
from userwallet.core.errors.domain_error import DomainError


class DomainException(Exception):
    """Exception carrying a DomainError."""

    def __init__(self, error: DomainError) -> None:
        """Initialize with the wrapped error.

        Args:
            error: Domain error describing the failure.
        """
        super().__init__(str(error))
        self.error = error


class ValidationException(DomainException, ValueError):
    """Raised when an aggregate or value object fails validation."""

    error: ValidationError

    def __init__(self, error: ValidationError) -> None:
        super().__init__(error)


class ConflictException(DomainException):
    """Raised when a write violates a uniqueness constraint."""

    error: ConflictError

    def __init__(self, error: ConflictError) -> None:
        super().__init__(error)
