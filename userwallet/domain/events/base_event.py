"""Base domain event class.

Domain events represent "things that happened" to one aggregate and are always
named in past tense (e.g., UserCreated, WalletBalanceChanged).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC)
    - aggregate_id of the aggregate that raised the event
    - sequence: position within the aggregate's event buffer, stamped by
      ``AggregateRoot.add_event``

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    >>> class UserCreated(DomainEvent):
    ...     email: str
    >>>
    >>> event = UserCreated(aggregate_id=uuid4(), email="test@example.com")
    >>> event.sequence  # 0 until buffered by an aggregate
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (UserCreated, NOT CreateUser)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)
        5. Carry only the data subscribers need (ids and changed fields)

    Attributes:
        aggregate_id: Identity of the aggregate that produced the event.
        sequence: Occurrence order within that aggregate (1-based once buffered).
        event_id: Unique identifier for this event instance.
        occurred_at: Timestamp when the event occurred (UTC).
    """

    aggregate_id: UUID
    sequence: int = 0
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
