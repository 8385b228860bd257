"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscriptions
are declared here, once, in the order they must run.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from question_randomizer.domain.protocols.event_bus_protocol import (
        EventBusProtocol,
    )


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Subscriptions:
        - CategoryDeletedEvent -> clear category_id on the user's questions
        - QualificationDeletedEvent -> clear qualification_id on the user's questions

    Returns:
        Event bus implementing EventBusProtocol.
    """
    from question_randomizer.application.event_handlers.question_reference_cleanup_handler import (
        QuestionReferenceCleanupHandler,
    )
    from question_randomizer.core.container.infrastructure import (
        get_database,
        get_logger,
    )
    from question_randomizer.domain.events import (
        CategoryDeletedEvent,
        QualificationDeletedEvent,
    )
    from question_randomizer.infrastructure.events.in_memory_event_bus import (
        InMemoryEventBus,
    )

    event_bus = InMemoryEventBus(logger=get_logger())

    cleanup_handler = QuestionReferenceCleanupHandler(
        database=get_database(),
        logger=get_logger(),
    )
    event_bus.subscribe(CategoryDeletedEvent, cleanup_handler.handle_category_deleted)
    event_bus.subscribe(
        QualificationDeletedEvent, cleanup_handler.handle_qualification_deleted
    )

    return event_bus
