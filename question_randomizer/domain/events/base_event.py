"""Base domain event class.

Domain events record "things that happened" and are named in past tense.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID v7) for tracking
    - occurred_at timestamp (UTC) for ordering

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    ... class CategoryDeletedEvent(DomainEvent):
    ...     category_id: str
    ...     user_id: str
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        event_id: Unique identifier for this event instance.
        occurred_at: When the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
