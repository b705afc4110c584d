"""Address value object.

Immutable grouping of country, postal code and street. Any change produces a
new instance through ``with_changes``.
"""

from dataclasses import dataclass, replace

from userwallet.core.enums import ErrorCode
from userwallet.core.errors import ValidationError, ValidationException

COUNTRY_MAX_LENGTH = 255
POSTAL_CODE_MAX_LENGTH = 20
STREET_MAX_LENGTH = 255


def _check_length(field: str, value: str, max_length: int) -> None:
    if not isinstance(value, str) or not 1 <= len(value) <= max_length:
        raise ValidationException(
            ValidationError(
                code=ErrorCode.INVALID_ADDRESS,
                message=f"{field} must be between 1 and {max_length} characters",
                field=field,
            )
        )


@dataclass(frozen=True, slots=True)
class Address:
    """Postal address.

    Attributes:
        country: 1-255 characters.
        postal_code: 1-20 characters.
        street: 1-255 characters.

    Raises:
        ValidationException: If any part is empty or too long.

    Example:
        >>> home = Address(country="England", postal_code="28566", street="Grand Avenue")
        >>> moved = home.with_changes(street="Road Avenue")
        >>> home.street, moved.street
        ('Grand Avenue', 'Road Avenue')
    """

    country: str
    postal_code: str
    street: str

    def __post_init__(self) -> None:
        _check_length("country", self.country, COUNTRY_MAX_LENGTH)
        _check_length("postal_code", self.postal_code, POSTAL_CODE_MAX_LENGTH)
        _check_length("street", self.street, STREET_MAX_LENGTH)

    def with_changes(
        self,
        *,
        country: str | None = None,
        postal_code: str | None = None,
        street: str | None = None,
    ) -> "Address":
        """Return a new address with the given parts replaced.

        Parts left as None keep their current value. The result is validated
        like any other Address.
        """
        return replace(
            self,
            country=self.country if country is None else country,
            postal_code=self.postal_code if postal_code is None else postal_code,
            street=self.street if street is None else street,
        )
