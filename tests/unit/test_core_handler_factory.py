"""Unit tests for handler_factory module.

Tests the automatic dependency injection used by the mediator to build
request-scoped handlers from their ``__init__`` type hints.

Test Strategy:
- Small test-local handler classes exercise each resolution branch
- Real application handlers confirm every registered handler is buildable
- Repository construction is real (SQLAlchemy session is a MagicMock)
"""

from typing import Protocol
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from question_randomizer.application.commands.handlers.category_handlers import (
    CreateCategoryHandler,
    DeleteCategoryHandler,
)
from question_randomizer.application.cqrs import COMMAND_REGISTRY, QUERY_REGISTRY
from question_randomizer.core.container.handler_factory import (
    REPOSITORY_TYPES,
    REQUEST_SCOPED_TYPES,
    SINGLETON_TYPES,
    analyze_handler_dependencies,
    create_handler,
    get_supported_dependencies,
    get_type_name,
)
from question_randomizer.infrastructure.persistence.repositories import (
    CategoryRepository,
)


# =============================================================================
# Test Fixtures - Handler Classes
# =============================================================================


class WidgetService(Protocol):
    async def spin(self) -> None: ...


class SimpleHandler:
    """Handler with no dependencies."""

    def __init__(self) -> None:
        pass

    async def handle(self, cmd: object) -> str:
        return "success"


class OptionalDependencyHandler:
    """Handler with an optional dependency the container does not know."""

    def __init__(self, widget: WidgetService | None = None) -> None:
        self.widget = widget


class UnknownDependencyHandler:
    """Handler with a required dependency the container does not know."""

    def __init__(self, widget: WidgetService) -> None:
        self.widget = widget


@pytest.fixture
def mock_session() -> MagicMock:
    return MagicMock(spec=AsyncSession)


# =============================================================================
# get_type_name / analyze_handler_dependencies
# =============================================================================


@pytest.mark.unit
class TestTypeIntrospection:
    """Test annotation parsing helpers."""

    def test_class_annotation(self) -> None:
        assert get_type_name(CategoryRepository) == "CategoryRepository"

    def test_optional_annotation_uses_inner_type(self) -> None:
        assert get_type_name(WidgetService | None) == "WidgetService"

    def test_string_forward_reference(self) -> None:
        assert get_type_name("module.CategoryRepository") == "CategoryRepository"

    def test_none_annotation(self) -> None:
        assert get_type_name(None) == "None"

    def test_analyze_real_handler(self) -> None:
        deps = analyze_handler_dependencies(DeleteCategoryHandler)

        assert deps == {
            "category_repo": {"type_name": "CategoryRepository", "is_optional": False},
            "current_user": {"type_name": "CurrentUserProtocol", "is_optional": False},
            "event_bus": {"type_name": "EventBusProtocol", "is_optional": False},
        }

    def test_analyze_marks_optional(self) -> None:
        deps = analyze_handler_dependencies(OptionalDependencyHandler)

        assert deps["widget"]["is_optional"] is True

    def test_no_dependencies(self) -> None:
        assert analyze_handler_dependencies(SimpleHandler) == {}


# =============================================================================
# create_handler
# =============================================================================


@pytest.mark.unit
class TestCreateHandler:
    """Test dependency resolution for each branch."""

    async def test_repository_built_on_request_session(
        self, mock_session: MagicMock, current_user: MagicMock
    ) -> None:
        handler = await create_handler(
            CreateCategoryHandler, session=mock_session, current_user=current_user
        )

        assert isinstance(handler._category_repo, CategoryRepository)
        assert handler._category_repo.session is mock_session
        assert handler._current_user is current_user

    async def test_singletons_come_from_container(
        self, mock_session: MagicMock, current_user: MagicMock
    ) -> None:
        sentinel_bus = MagicMock()

        with patch(
            "question_randomizer.core.container.events.get_event_bus",
            return_value=sentinel_bus,
        ):
            handler = await create_handler(
                DeleteCategoryHandler, session=mock_session, current_user=current_user
            )

        assert handler._event_bus is sentinel_bus

    async def test_overrides_win(
        self, mock_session: MagicMock, current_user: MagicMock
    ) -> None:
        fake_repo = MagicMock()

        handler = await create_handler(
            CreateCategoryHandler,
            session=mock_session,
            current_user=current_user,
            category_repo=fake_repo,
        )

        assert handler._category_repo is fake_repo

    async def test_unknown_optional_dependency_is_none(
        self, mock_session: MagicMock, current_user: MagicMock
    ) -> None:
        handler = await create_handler(
            OptionalDependencyHandler, session=mock_session, current_user=current_user
        )

        assert handler.widget is None

    async def test_unknown_required_dependency_raises(
        self, mock_session: MagicMock, current_user: MagicMock
    ) -> None:
        with pytest.raises(ValueError, match="Cannot resolve dependency 'widget'"):
            await create_handler(
                UnknownDependencyHandler,
                session=mock_session,
                current_user=current_user,
            )


# =============================================================================
# Registry coverage
# =============================================================================


@pytest.mark.unit
class TestRegisteredHandlersAreBuildable:
    """Every registered handler must only depend on resolvable types."""

    def test_all_dependencies_supported(self) -> None:
        supported = REPOSITORY_TYPES | REQUEST_SCOPED_TYPES | SINGLETON_TYPES
        unresolved: list[str] = []

        for meta in [*COMMAND_REGISTRY, *QUERY_REGISTRY]:
            for param, info in analyze_handler_dependencies(meta.handler_class).items():
                if info["type_name"] not in supported and not info["is_optional"]:
                    unresolved.append(
                        f"{meta.handler_class.__name__}.{param}: {info['type_name']}"
                    )

        assert unresolved == []

    def test_supported_dependencies_listing(self) -> None:
        supported = get_supported_dependencies()

        assert "QuestionRepository" in supported["repositories"]
        assert supported["request_scoped"] == ["CurrentUserProtocol"]
        assert supported["singletons"] == ["EventBusProtocol", "LoggerProtocol"]
