"""Aggregate root base.

An aggregate owns an identity, timestamps, and an ordered buffer of domain
events produced by its own mutations. The aggregate decides *what* happened;
the repository drains the buffer with ``pull_events`` and decides *when* the
events become visible, which is after the write.
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from userwallet.domain.events.base_event import DomainEvent


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(kw_only=True)
class AggregateRoot:
    """Base class for aggregates.

    Subclasses add their properties as dataclass fields, override
    ``validate`` and enqueue events with ``add_event`` from their factory and
    mutation methods. Aggregates never publish their own events.

    Attributes:
        id: Identity (UUID v7). Cannot be reassigned once set.
        created_at: Creation timestamp (UTC).
        updated_at: Last mutation timestamp (UTC).
    """

    id: UUID = field(default_factory=uuid7)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    _events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )
    _event_sequence: int = field(default=0, init=False, repr=False, compare=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Aggregate identity is immutable")
        super().__setattr__(name, value)

    def validate(self) -> None:
        """Check the whole property bag.

        Raises:
            ValidationException: If an invariant does not hold.
        """

    def add_event(self, event: DomainEvent) -> None:
        """Append an event to the buffer, stamping its sequence number."""
        self._event_sequence += 1
        self._events.append(replace(event, sequence=self._event_sequence))

    def pull_events(self) -> list[DomainEvent]:
        """Drain and return buffered events in the order they were added.

        Only the persistence layer calls this.
        """
        events, self._events = self._events, []
        return events

    @property
    def pending_events(self) -> tuple[DomainEvent, ...]:
        """Read-only view of the buffer (for tests and diagnostics)."""
        return tuple(self._events)

    def _touch(self) -> None:
        self.updated_at = utc_now()
