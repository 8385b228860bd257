"""CQRS registry and dispatch.

Usage:
    from question_randomizer.application.cqrs import COMMAND_REGISTRY, Dispatcher
"""

from question_randomizer.application.cqrs.dispatcher import (
    Dispatcher,
    HandlerResolver,
    Mediator,
)
from question_randomizer.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)
from question_randomizer.application.cqrs.registry import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
)

__all__ = [
    "COMMAND_REGISTRY",
    "CQRSCategory",
    "CommandMetadata",
    "Dispatcher",
    "HandlerResolver",
    "Mediator",
    "QUERY_REGISTRY",
    "QueryMetadata",
]
