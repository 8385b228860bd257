"""Container module - Centralized dependency injection.

The container is organized into modules by concern:
- infrastructure: database, logging, token validation
- events: event bus and subscriptions
- dispatcher: CQRS dispatcher built from the static registries
- handler_factory: request-scoped handler auto-wiring
"""

from question_randomizer.core.container.dispatcher import get_dispatcher
from question_randomizer.core.container.events import get_event_bus
from question_randomizer.core.container.handler_factory import create_handler
from question_randomizer.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_identity_service,
    get_logger,
)

__all__ = [
    "create_handler",
    "get_database",
    "get_db_session",
    "get_dispatcher",
    "get_event_bus",
    "get_identity_service",
    "get_logger",
]
