"""Domain events."""

from question_randomizer.domain.events.base_event import DomainEvent
from question_randomizer.domain.events.question_bank_events import (
    CategoryDeletedEvent,
    QualificationDeletedEvent,
)

__all__ = [
    "CategoryDeletedEvent",
    "DomainEvent",
    "QualificationDeletedEvent",
]
