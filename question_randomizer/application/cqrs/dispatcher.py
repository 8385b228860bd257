"""Request dispatcher (mediator).

The ``Dispatcher`` is app-scoped. It is built once from the static
registries and refuses to start when the wiring is inconsistent. Each HTTP
request then gets a ``Mediator`` that pairs the dispatcher with a
request-scoped handler resolver (database session, current user).

Flow of ``send``:
1. Look up the single registry entry for ``type(request)``
2. Run the entry's validator; violations short-circuit as
   RequestValidationError and the handler is never built
3. Build the handler through the resolver and await ``handle(request)``

``publish`` hands events to the event bus: subscribers run one after
another in registration order and the first failure propagates.
"""

from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeAlias

from question_randomizer.application.cqrs.computed_views import (
    validate_registry_consistency,
)
from question_randomizer.application.cqrs.metadata import (
    CommandMetadata,
    QueryMetadata,
)
from question_randomizer.application.validators.rules import Validator
from question_randomizer.core.enums import ErrorCode
from question_randomizer.core.errors import (
    ConfigurationError,
    DomainError,
    RequestValidationError,
)
from question_randomizer.core.result import Failure, Result, Success
from question_randomizer.domain.events import DomainEvent
from question_randomizer.domain.protocols import EventBusProtocol, LoggerProtocol

HandlerResolver: TypeAlias = Callable[[type], Awaitable[Any]]


class Dispatcher:
    """Routes commands and queries to their registered handler.

    Args:
        commands: Command registry entries.
        queries: Query registry entries.
        event_bus: Bus used by ``publish``.
        logger: Structured logger.
        declared: Request types that must each have exactly one entry.

    Raises:
        ConfigurationError: If a declared request has no handler, or any
            request has more than one.
    """

    def __init__(
        self,
        *,
        commands: Iterable[CommandMetadata],
        queries: Iterable[QueryMetadata],
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        declared: Iterable[type] = (),
    ) -> None:
        entries: list[CommandMetadata | QueryMetadata] = [*commands, *queries]
        errors = validate_registry_consistency(entries, declared)
        if errors:
            raise ConfigurationError(
                "Invalid handler registry: " + "; ".join(errors)
            )

        self._routes: dict[type, CommandMetadata | QueryMetadata] = {
            meta.request_class: meta for meta in entries
        }
        self._validators: dict[type, Validator] = {
            meta.request_class: meta.validator_class()
            for meta in entries
            if meta.validator_class is not None
        }
        self._event_bus = event_bus
        self._logger = logger

    @property
    def registered_types(self) -> frozenset[type]:
        """Request types this dispatcher can route."""
        return frozenset(self._routes)

    def is_registered(self, request_type: type) -> bool:
        return request_type in self._routes

    async def send(
        self, request: Any, resolve_handler: HandlerResolver
    ) -> Result[Any, DomainError]:
        """Validate ``request`` and run its handler.

        Args:
            request: Command or query instance.
            resolve_handler: Builds a handler instance from its class.

        Returns:
            The handler's Result, or Failure(RequestValidationError).

        Raises:
            ConfigurationError: If ``type(request)`` is not registered.
        """
        request_type = type(request)
        metadata = self._routes.get(request_type)
        if metadata is None:
            raise ConfigurationError(
                f"No handler registered for {request_type.__name__}"
            )

        validator = self._validators.get(request_type)
        if validator is not None:
            violations = validator.validate(request)
            if violations:
                self._logger.info(
                    "request_validation_failed",
                    request_type=request_type.__name__,
                    fields=[violation.field for violation in violations],
                )
                return Failure(
                    error=RequestValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message="Validation failed",
                        violations=violations,
                    )
                )

        handler = await resolve_handler(metadata.handler_class)
        result = await handler.handle(request)

        self._logger.debug(
            "request_dispatched",
            request_type=request_type.__name__,
            handler=metadata.handler_class.__name__,
            succeeded=isinstance(result, Success),
        )
        return result

    async def publish(self, event: DomainEvent) -> None:
        await self._event_bus.publish(event)


class Mediator:
    """Request-scoped facade over the app-scoped Dispatcher.

    Example:
        >>> mediator = Mediator(dispatcher, resolver)
        >>> result = await mediator.send(GetCategoryById(category_id=category_id))
    """

    def __init__(self, dispatcher: Dispatcher, resolve_handler: HandlerResolver) -> None:
        self._dispatcher = dispatcher
        self._resolve_handler = resolve_handler

    async def send(self, request: Any) -> Result[Any, DomainError]:
        return await self._dispatcher.send(request, self._resolve_handler)

    async def publish(self, event: DomainEvent) -> None:
        await self._dispatcher.publish(event)
