"""CQRS Registry Computed Views and Helper Functions.

Utility functions for introspecting the CQRS registry. The consistency
check here is what the dispatcher runs at startup.
"""

from collections import Counter
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from question_randomizer.application.cqrs.metadata import (
        CommandMetadata,
        CQRSCategory,
        QueryMetadata,
    )


def get_declared_commands() -> list[type]:
    """Every command the application accepts (``commands.__all__``)."""
    from question_randomizer.application import commands

    return [getattr(commands, name) for name in commands.__all__]


def get_declared_queries() -> list[type]:
    """Every query the application accepts (``queries.__all__``)."""
    from question_randomizer.application import queries

    return [getattr(queries, name) for name in queries.__all__]


def get_command_metadata(command_class: type) -> "CommandMetadata | None":
    """Get metadata for a specific command class.

    Args:
        command_class: The command class to look up.

    Returns:
        CommandMetadata if found, None otherwise.
    """
    from question_randomizer.application.cqrs.registry import COMMAND_REGISTRY

    for meta in COMMAND_REGISTRY:
        if meta.command_class is command_class:
            return meta
    return None


def get_query_metadata(query_class: type) -> "QueryMetadata | None":
    """Get metadata for a specific query class."""
    from question_randomizer.application.cqrs.registry import QUERY_REGISTRY

    for meta in QUERY_REGISTRY:
        if meta.query_class is query_class:
            return meta
    return None


def get_commands_by_category(category: "CQRSCategory") -> list["CommandMetadata"]:
    """Get all commands in a category."""
    from question_randomizer.application.cqrs.registry import COMMAND_REGISTRY

    return [meta for meta in COMMAND_REGISTRY if meta.category == category]


def get_commands_emitting_events() -> list["CommandMetadata"]:
    """Get commands that publish domain events."""
    from question_randomizer.application.cqrs.registry import COMMAND_REGISTRY

    return [meta for meta in COMMAND_REGISTRY if meta.emits_events]


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Registry counts, for documentation and sanity tests.

    Example:
        >>> stats = get_statistics()
        >>> stats["total_commands"]
        31
    """
    from question_randomizer.application.cqrs.registry import (
        COMMAND_REGISTRY,
        QUERY_REGISTRY,
    )

    commands_by_category = Counter(meta.category.value for meta in COMMAND_REGISTRY)
    queries_by_category = Counter(meta.category.value for meta in QUERY_REGISTRY)

    return {
        "total_commands": len(COMMAND_REGISTRY),
        "total_queries": len(QUERY_REGISTRY),
        "commands_with_validators": sum(
            1 for meta in COMMAND_REGISTRY if meta.validator_class is not None
        ),
        "commands_emitting_events": sum(
            1 for meta in COMMAND_REGISTRY if meta.emits_events
        ),
        "commands_by_category": dict(commands_by_category),
        "queries_by_category": dict(queries_by_category),
    }


def validate_registry_consistency(
    entries: "Iterable[CommandMetadata | QueryMetadata]",
    declared: Iterable[type] = (),
) -> list[str]:
    """Validate registry entries against the declared request types.

    Args:
        entries: Command and query metadata to check.
        declared: Request types that must each have exactly one entry.

    Returns:
        List of error messages. Empty if registry is consistent.
    """
    from question_randomizer.application.validators.rules import Validator

    entries = list(entries)
    errors: list[str] = []

    counts = Counter(meta.request_class for meta in entries)
    for request_class, count in counts.items():
        if count > 1:
            errors.append(
                f"{request_class.__name__} has {count} registered handlers"
            )

    for request_class in declared:
        if request_class not in counts:
            errors.append(f"{request_class.__name__} has no registered handler")

    for meta in entries:
        if not callable(getattr(meta.handler_class, "handle", None)):
            errors.append(
                f"Handler {meta.handler_class.__name__} missing handle() method"
            )
        if meta.validator_class is not None and not issubclass(
            meta.validator_class, Validator
        ):
            errors.append(
                f"Validator {meta.validator_class.__name__} for "
                f"{meta.request_class.__name__} is not a Validator"
            )

    return errors
