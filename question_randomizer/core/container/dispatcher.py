"""Dispatcher dependency factory."""

from functools import lru_cache

from question_randomizer.application.cqrs import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
    Dispatcher,
)
from question_randomizer.application.cqrs.computed_views import (
    get_declared_commands,
    get_declared_queries,
)
from question_randomizer.core.container.events import get_event_bus
from question_randomizer.core.container.infrastructure import get_logger


@lru_cache()
def get_dispatcher() -> Dispatcher:
    """Get dispatcher singleton (app-scoped).

    Built from the static command/query registries. Called from the
    application lifespan so a broken registry stops startup.

    Raises:
        ConfigurationError: If any declared request has zero or several
            registered handlers.
    """
    return Dispatcher(
        commands=COMMAND_REGISTRY,
        queries=QUERY_REGISTRY,
        event_bus=get_event_bus(),
        logger=get_logger(),
        declared=[*get_declared_commands(), *get_declared_queries()],
    )
