"""User queries (CQRS read operations).

Queries represent requests for data without side effects.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class FindUsers:
    """List users, optionally filtered by address parts.

    Attributes:
        page: Zero-based page number.
        limit: Page size. None uses the configured default.
        country: Exact country match.
        postal_code: Exact postal code match.
        street: Exact street match.
    """

    page: int = 0
    limit: int | None = None
    country: str | None = None
    postal_code: str | None = None
    street: str | None = None
