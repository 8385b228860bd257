"""Unit tests for the CQRS Dispatcher and Mediator.

Test Strategy:
- Registries are built from small test-local commands and handlers
- The handler resolver is an AsyncMock, so tests can assert whether a
  handler was ever built
- Startup failures (missing or duplicate handlers) must raise
  ConfigurationError from the constructor
"""

from dataclasses import dataclass
from unittest.mock import AsyncMock, MagicMock

import pytest

from question_randomizer.application.cqrs import (
    CommandMetadata,
    CQRSCategory,
    Dispatcher,
    Mediator,
    QueryMetadata,
)
from question_randomizer.application.validators import Validator
from question_randomizer.core.enums import ErrorCode
from question_randomizer.core.errors import ConfigurationError, RequestValidationError
from question_randomizer.core.result import Failure, Success
from question_randomizer.domain.events import CategoryDeletedEvent


# =============================================================================
# Test Fixtures - Requests and Handlers
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RenameThing:
    name: str


@dataclass(frozen=True, kw_only=True)
class GetThing:
    thing_id: str


class RenameThingValidator(Validator):
    def define(self) -> None:
        self.rule_for("name").not_empty("Name is required")


class RenameThingHandler:
    async def handle(self, cmd: RenameThing) -> Success[str]:
        return Success(value=cmd.name.upper())


class GetThingHandler:
    async def handle(self, query: GetThing) -> Success[str]:
        return Success(value=query.thing_id)


class NotAHandler:
    """Has no handle() method."""


def rename_entry(**overrides: object) -> CommandMetadata:
    data: dict[str, object] = {
        "command_class": RenameThing,
        "handler_class": RenameThingHandler,
        "category": CQRSCategory.CATEGORY,
        "validator_class": RenameThingValidator,
    }
    data.update(overrides)
    return CommandMetadata(**data)  # type: ignore[arg-type]


def get_entry() -> QueryMetadata:
    return QueryMetadata(
        query_class=GetThing,
        handler_class=GetThingHandler,
        category=CQRSCategory.CATEGORY,
    )


@pytest.fixture
def mock_event_bus() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def dispatcher(mock_event_bus: AsyncMock, mock_logger: MagicMock) -> Dispatcher:
    return Dispatcher(
        commands=[rename_entry()],
        queries=[get_entry()],
        event_bus=mock_event_bus,
        logger=mock_logger,
        declared=[RenameThing, GetThing],
    )


def resolver_for(*handlers: object) -> AsyncMock:
    """Resolver returning a real handler instance for each class."""
    instances = {type(handler): handler for handler in handlers}

    async def resolve(handler_class: type) -> object:
        return instances[handler_class]

    return AsyncMock(side_effect=resolve)


# =============================================================================
# Startup wiring checks
# =============================================================================


@pytest.mark.unit
class TestDispatcherWiring:
    """Test fail-fast registry validation in the constructor."""

    def test_valid_registry_builds(self, dispatcher: Dispatcher) -> None:
        assert dispatcher.registered_types == frozenset({RenameThing, GetThing})
        assert dispatcher.is_registered(RenameThing)
        assert not dispatcher.is_registered(NotAHandler)

    def test_missing_handler_raises(
        self, mock_event_bus: AsyncMock, mock_logger: MagicMock
    ) -> None:
        with pytest.raises(ConfigurationError, match="GetThing has no registered handler"):
            Dispatcher(
                commands=[rename_entry()],
                queries=[],
                event_bus=mock_event_bus,
                logger=mock_logger,
                declared=[RenameThing, GetThing],
            )

    def test_duplicate_handler_raises(
        self, mock_event_bus: AsyncMock, mock_logger: MagicMock
    ) -> None:
        with pytest.raises(ConfigurationError, match="RenameThing has 2 registered handlers"):
            Dispatcher(
                commands=[rename_entry(), rename_entry()],
                queries=[get_entry()],
                event_bus=mock_event_bus,
                logger=mock_logger,
            )

    def test_handler_without_handle_method_raises(
        self, mock_event_bus: AsyncMock, mock_logger: MagicMock
    ) -> None:
        with pytest.raises(ConfigurationError, match="missing handle"):
            Dispatcher(
                commands=[rename_entry(handler_class=NotAHandler)],
                queries=[],
                event_bus=mock_event_bus,
                logger=mock_logger,
            )

    def test_validator_must_be_validator_subclass(
        self, mock_event_bus: AsyncMock, mock_logger: MagicMock
    ) -> None:
        with pytest.raises(ConfigurationError, match="is not a Validator"):
            Dispatcher(
                commands=[rename_entry(validator_class=NotAHandler)],
                queries=[],
                event_bus=mock_event_bus,
                logger=mock_logger,
            )


# =============================================================================
# send / publish
# =============================================================================


@pytest.mark.unit
class TestDispatcherSend:
    """Test validation short-circuit and handler invocation."""

    async def test_send_runs_handler(self, dispatcher: Dispatcher) -> None:
        resolver = resolver_for(RenameThingHandler())

        result = await dispatcher.send(RenameThing(name="quiz"), resolver)

        assert result == Success(value="QUIZ")
        resolver.assert_awaited_once_with(RenameThingHandler)

    async def test_query_without_validator_runs_handler(
        self, dispatcher: Dispatcher
    ) -> None:
        resolver = resolver_for(GetThingHandler())

        result = await dispatcher.send(GetThing(thing_id="t-1"), resolver)

        assert result == Success(value="t-1")

    async def test_validation_failure_short_circuits(
        self, dispatcher: Dispatcher
    ) -> None:
        resolver = resolver_for(RenameThingHandler())

        result = await dispatcher.send(RenameThing(name=""), resolver)

        assert isinstance(result, Failure)
        assert isinstance(result.error, RequestValidationError)
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.message == "Validation failed"
        assert [v.field for v in result.error.violations] == ["name"]
        resolver.assert_not_awaited()

    async def test_unregistered_request_raises(self, dispatcher: Dispatcher) -> None:
        resolver = resolver_for()

        with pytest.raises(ConfigurationError, match="No handler registered for NotAHandler"):
            await dispatcher.send(NotAHandler(), resolver)

    async def test_publish_delegates_to_event_bus(
        self, dispatcher: Dispatcher, mock_event_bus: AsyncMock
    ) -> None:
        event = CategoryDeletedEvent(category_id="c-1", user_id="u-1")

        await dispatcher.publish(event)

        mock_event_bus.publish.assert_awaited_once_with(event)


@pytest.mark.unit
class TestMediator:
    """Test the request-scoped facade."""

    async def test_send_uses_bound_resolver(self, dispatcher: Dispatcher) -> None:
        resolver = resolver_for(RenameThingHandler())
        mediator = Mediator(dispatcher, resolver)

        result = await mediator.send(RenameThing(name="abc"))

        assert result == Success(value="ABC")
        resolver.assert_awaited_once()

    async def test_publish_goes_through_dispatcher(
        self, dispatcher: Dispatcher, mock_event_bus: AsyncMock
    ) -> None:
        mediator = Mediator(dispatcher, resolver_for())
        event = CategoryDeletedEvent(category_id="c-1", user_id="u-1")

        await mediator.publish(event)

        mock_event_bus.publish.assert_awaited_once_with(event)
