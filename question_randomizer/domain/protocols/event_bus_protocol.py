"""Event bus protocol (port) for domain events.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Infrastructure provides InMemoryEventBus
    - Container (core/container/events.py) wires subscriptions at startup

Delivery contract:
    1. Handlers for an event type run one at a time, in the order they
       were subscribed.
    2. A failing handler stops delivery. Later handlers are skipped and
       the exception propagates to the publisher.
    3. Publishing happens inside the originating request, after the
       write that caused the event has been committed. A handler failure
       never undoes that write.

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(CategoryDeletedEvent, cleanup.handle_category_deleted)
    >>> await event_bus.publish(CategoryDeletedEvent(category_id=cid, user_id=uid))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from question_randomizer.domain.events.base_event import DomainEvent

# Async callable receiving the event. Returns nothing, raises on failure.
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations."""

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register a handler for an exact event type.

        Args:
            event_type: Event class to handle (no subclass matching).
            handler: Async callable invoked with the event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event to its handlers sequentially, in registration order.

        Args:
            event: Event instance to deliver.

        Raises:
            Exception: Whatever the first failing handler raised.
        """
        ...
