"""Event bus adapters."""

from question_randomizer.infrastructure.events.in_memory_event_bus import (
    InMemoryEventBus,
)

__all__ = ["InMemoryEventBus"]
