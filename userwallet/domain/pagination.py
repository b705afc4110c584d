"""Pagination types shared by repositories and query handlers."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class PaginatedQueryParams:
    """Page request.

    Attributes:
        limit: Page size (at least 1).
        page: Zero-based page number.
    """

    limit: int = 20
    page: int = 0

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError("limit must be at least 1")
        if self.page < 0:
            raise ValueError("page cannot be negative")

    @property
    def offset(self) -> int:
        return self.page * self.limit


@dataclass(frozen=True, slots=True, kw_only=True)
class Paginated(Generic[T]):
    """One page of results.

    Attributes:
        data: Items on this page.
        count: Total matching items, regardless of page.
        limit: Page size that was requested.
        page: Zero-based page number that was requested.
    """

    data: list[T]
    count: int
    limit: int
    page: int
