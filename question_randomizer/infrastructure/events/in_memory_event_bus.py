"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based registry. Events are
delivered inside the publishing request, so the caller's response waits
for every handler.

Architecture:
    - Dictionary-based handler registry (event_type → ordered list of handlers)
    - Sequential delivery in subscription order
    - Fail-fast: the first handler exception stops delivery and propagates

Usage:
    >>> @lru_cache()
    ... def get_event_bus() -> EventBusProtocol:
    ...     return InMemoryEventBus(logger=get_logger())
    >>>
    >>> event_bus.subscribe(CategoryDeletedEvent, cleanup.handle_category_deleted)
    >>> await event_bus.publish(CategoryDeletedEvent(category_id=cid, user_id=uid))
"""

from collections import defaultdict

from question_randomizer.domain.events.base_event import DomainEvent
from question_randomizer.domain.protocols.event_bus_protocol import EventHandler
from question_randomizer.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with ordered, fail-fast delivery.

    Not thread-safe: subscriptions happen once at startup, publishing
    happens from async request handlers on a single loop.

    Attributes:
        _handlers: Event type → handlers in subscription order.
        _logger: Logger for publishing and handler failures.

    Example:
        >>> bus = InMemoryEventBus(logger=logger)
        >>> bus.subscribe(CategoryDeletedEvent, clear_question_categories)
        >>> bus.subscribe(CategoryDeletedEvent, audit_category_deleted)
        >>>
        >>> # clear_question_categories runs first; if it raises,
        >>> # audit_category_deleted is skipped and the error reaches the caller.
        >>> await bus.publish(event)
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for event publishing (debug) and handler
                failures (error).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register an event handler for an exact event type.

        Args:
            event_type: Class of event to handle. No inheritance matching.
            handler: Async callable invoked with the event.
        """
        self._handlers[event_type].append(handler)

    def handlers_for(self, event_type: type[DomainEvent]) -> list[EventHandler]:
        """Return a copy of the handlers subscribed to ``event_type``, in order."""
        return list(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to its handlers one after another.

        No handlers means no-op. A handler exception is logged and
        re-raised; handlers after it do not run and work already done by
        earlier handlers (or by the publisher) is not undone.

        Args:
            event: Domain event to publish.

        Raises:
            Exception: The first exception raised by a handler.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        for position, handler in enumerate(handlers):
            try:
                await handler(event)
            except Exception as e:
                self._logger.error(
                    "event_handler_failed",
                    error=e,
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handler, "__qualname__", repr(handler)),
                    skipped_handlers=len(handlers) - position - 1,
                )
                raise
