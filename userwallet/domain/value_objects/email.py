"""Email value object with validation.

Immutable value object that validates email format.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from userwallet.core.enums import ErrorCode
from userwallet.core.errors import ValidationError, ValidationException


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Uses email-validator library for RFC-compliant validation.

    Attributes:
        value: The email address string (validated, normalized)

    Raises:
        ValidationException: If email format is invalid

    Example:
        >>> str(Email("User@Example.com"))
        'User@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate email format after initialization.

        Raises:
            ValidationException: If email format is invalid.
        """
        try:
            # No deliverability check: validation must not touch the network
            validated = validate_email(self.value, check_deliverability=False)
            # Use object.__setattr__ because dataclass is frozen
            object.__setattr__(self, "value", validated.normalized)
        except EmailNotValidError as e:
            raise ValidationException(
                ValidationError(
                    code=ErrorCode.INVALID_EMAIL,
                    message=f"Invalid email: {e}",
                    field="email",
                )
            ) from e

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
