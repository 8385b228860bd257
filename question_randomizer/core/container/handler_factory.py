"""Handler Factory - Auto-wire handler dependencies from type hints.

Handlers are created per request. Their ``__init__`` annotations decide
what gets injected:

- ``*Repository`` types: repository built on the request's session
- ``CurrentUserProtocol``: the request's current-user accessor
- other ``*Protocol`` types: app-scoped singletons from the container

Usage:
    resolver = partial(create_handler, session=session, current_user=user)
    handler = await resolver(CreateCategoryHandler)
"""

import inspect
from typing import Any, TypeVar, get_type_hints

from sqlalchemy.ext.asyncio import AsyncSession

from question_randomizer.domain.protocols.current_user_protocol import (
    CurrentUserProtocol,
)

T = TypeVar("T")


# =============================================================================
# Dependency Type Mappings
# =============================================================================

# Repository types that need session injection
REPOSITORY_TYPES: set[str] = {
    "CategoryRepository",
    "QualificationRepository",
    "QuestionRepository",
    "ConversationRepository",
    "MessageRepository",
    "RandomizationRepository",
    "SelectedCategoryRepository",
    "UsedQuestionRepository",
    "PostponedQuestionRepository",
}

# Request-scoped protocol types supplied by the caller
REQUEST_SCOPED_TYPES: set[str] = {
    "CurrentUserProtocol",
}

# Service/protocol types that are app-scoped singletons
SINGLETON_TYPES: set[str] = {
    "EventBusProtocol",
    "LoggerProtocol",
}


def get_type_name(annotation: Any) -> str:
    """Extract type name from annotation.

    Handles both class types and string forward references.

    Args:
        annotation: Type annotation (class or string).

    Returns:
        Type name as string.
    """
    if annotation is None:
        return "None"

    # Optional[X] / X | None: use the first non-None member
    args = getattr(annotation, "__args__", None)
    if args:
        for arg in args:
            if arg is not type(None):
                return get_type_name(arg)
        return "None"

    if isinstance(annotation, type):
        return annotation.__name__

    if isinstance(annotation, str):
        return annotation.split(".")[-1]

    return str(annotation).split(".")[-1].rstrip("'>")


def analyze_handler_dependencies(handler_class: type) -> dict[str, dict[str, Any]]:
    """Analyze handler __init__ to discover dependencies.

    Args:
        handler_class: Handler class to analyze.

    Returns:
        Dict mapping parameter names to dependency info dicts.
        Each info dict contains keys: type_name (str), is_optional (bool).
    """
    init_method = getattr(handler_class, "__init__", None)
    if init_method is None:
        return {}
    try:
        hints = get_type_hints(init_method)
    except NameError:
        # Unresolvable forward reference: fall back to raw annotations
        sig = inspect.signature(init_method)
        hints = {
            name: param.annotation
            for name, param in sig.parameters.items()
            if name != "self" and param.annotation is not inspect.Parameter.empty
        }

    hints.pop("return", None)

    dependencies: dict[str, dict[str, Any]] = {}
    for param_name, annotation in hints.items():
        if param_name == "self":
            continue
        args = getattr(annotation, "__args__", ())
        dependencies[param_name] = {
            "type_name": get_type_name(annotation),
            "is_optional": type(None) in args,
        }
    return dependencies


def _get_repository_instance(type_name: str, session: AsyncSession) -> Any:
    """Create repository instance with session.

    Raises:
        ValueError: If repository type not found.
    """
    # Import repositories lazily to avoid circular imports
    from question_randomizer.infrastructure.persistence.repositories import (
        CategoryRepository,
        ConversationRepository,
        MessageRepository,
        PostponedQuestionRepository,
        QualificationRepository,
        QuestionRepository,
        RandomizationRepository,
        SelectedCategoryRepository,
        UsedQuestionRepository,
    )

    repo_classes: dict[str, type] = {
        "CategoryRepository": CategoryRepository,
        "QualificationRepository": QualificationRepository,
        "QuestionRepository": QuestionRepository,
        "ConversationRepository": ConversationRepository,
        "MessageRepository": MessageRepository,
        "RandomizationRepository": RandomizationRepository,
        "SelectedCategoryRepository": SelectedCategoryRepository,
        "UsedQuestionRepository": UsedQuestionRepository,
        "PostponedQuestionRepository": PostponedQuestionRepository,
    }

    if type_name not in repo_classes:
        raise ValueError(f"Unknown repository type: {type_name}")

    return repo_classes[type_name](session=session)


def _get_singleton_instance(type_name: str) -> Any:
    """Get singleton service instance from container.

    Raises:
        ValueError: If singleton type not found.
    """
    from question_randomizer.core.container.events import get_event_bus
    from question_randomizer.core.container.infrastructure import get_logger

    singleton_factories: dict[str, Any] = {
        "EventBusProtocol": get_event_bus,
        "LoggerProtocol": get_logger,
    }

    if type_name not in singleton_factories:
        raise ValueError(f"Unknown singleton type: {type_name}")

    return singleton_factories[type_name]()


async def create_handler(
    handler_class: type[T],
    *,
    session: AsyncSession,
    current_user: CurrentUserProtocol,
    **overrides: Any,
) -> T:
    """Create handler instance with auto-wired dependencies.

    Args:
        handler_class: Handler class to instantiate.
        session: Database session for repositories.
        current_user: Current-user accessor for the request.
        **overrides: Explicit dependency overrides, by parameter name.

    Returns:
        Handler instance with injected dependencies.

    Raises:
        ValueError: If a dependency cannot be resolved.

    Example:
        >>> handler = await create_handler(
        ...     CreateCategoryHandler, session=session, current_user=user
        ... )
        >>> result = await handler.handle(command)
    """
    dependencies = analyze_handler_dependencies(handler_class)
    resolved: dict[str, Any] = {}

    for param_name, dep_info in dependencies.items():
        type_name = dep_info["type_name"]

        if param_name in overrides:
            resolved[param_name] = overrides[param_name]
        elif type_name in REPOSITORY_TYPES:
            resolved[param_name] = _get_repository_instance(type_name, session)
        elif type_name in REQUEST_SCOPED_TYPES:
            resolved[param_name] = current_user
        elif type_name in SINGLETON_TYPES:
            resolved[param_name] = _get_singleton_instance(type_name)
        elif dep_info["is_optional"]:
            resolved[param_name] = None
        else:
            raise ValueError(
                f"Cannot resolve dependency '{param_name}' "
                f"of type '{type_name}' for {handler_class.__name__}"
            )

    return handler_class(**resolved)


def get_supported_dependencies() -> dict[str, list[str]]:
    """Get list of supported dependency types.

    Returns:
        Dict with 'repositories', 'request_scoped' and 'singletons' lists.
    """
    return {
        "repositories": sorted(REPOSITORY_TYPES),
        "request_scoped": sorted(REQUEST_SCOPED_TYPES),
        "singletons": sorted(SINGLETON_TYPES),
    }
