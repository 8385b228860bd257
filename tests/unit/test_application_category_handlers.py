"""Unit tests for category and qualification handlers.

Tests cover:
- Missing identity → AuthenticationError, repository untouched
- Missing or foreign records → NotFoundError (same error for both)
- Batch create writes all names through one create_many call
- Delete publishes the matching *DeletedEvent only after a successful delete

Reference:
    - question_randomizer/application/commands/handlers/category_handlers.py
    - question_randomizer/application/commands/handlers/qualification_handlers.py
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from question_randomizer.application.commands import (
    CreateCategoriesBatch,
    CreateCategory,
    DeleteCategory,
    DeleteQualification,
    UpdateCategory,
)
from question_randomizer.application.commands.handlers.category_handlers import (
    CreateCategoriesBatchHandler,
    CreateCategoryHandler,
    DeleteCategoryHandler,
    UpdateCategoryHandler,
)
from question_randomizer.application.commands.handlers.qualification_handlers import (
    DeleteQualificationHandler,
)
from question_randomizer.application.dtos import CategoryResult
from question_randomizer.application.queries import GetCategories, GetCategoryById
from question_randomizer.application.queries.handlers.category_handlers import (
    GetCategoriesHandler,
    GetCategoryByIdHandler,
)
from question_randomizer.core.enums import ErrorCode
from question_randomizer.core.errors import AuthenticationError, NotFoundError
from question_randomizer.core.result import Failure, Success
from question_randomizer.domain.entities.category import Category
from question_randomizer.domain.events import (
    CategoryDeletedEvent,
    QualificationDeletedEvent,
)
from question_randomizer.domain.protocols import (
    CategoryRepository,
    EventBusProtocol,
    QualificationRepository,
)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_category_repo() -> AsyncMock:
    return AsyncMock(spec=CategoryRepository)


@pytest.fixture
def mock_qualification_repo() -> AsyncMock:
    return AsyncMock(spec=QualificationRepository)


@pytest.fixture
def mock_event_bus() -> AsyncMock:
    return AsyncMock(spec=EventBusProtocol)


def persisted(category: Category, category_id: str = "cat-1") -> Category:
    """Mimic the store assigning an ID on insert."""
    category.id = category_id
    return category


@pytest.fixture
def existing_category(user_id: str) -> Category:
    return Category(
        id="cat-1",
        name="History",
        description="Dates and people",
        user_id=user_id,
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
        updated_at=datetime(2024, 1, 1, tzinfo=UTC),
    )


# ============================================================================
# Create
# ============================================================================


@pytest.mark.unit
class TestCreateCategoryHandler:
    """Test CreateCategoryHandler."""

    async def test_creates_category_for_current_user(
        self, mock_category_repo: AsyncMock, current_user: MagicMock, user_id: str
    ) -> None:
        mock_category_repo.create.side_effect = persisted
        handler = CreateCategoryHandler(mock_category_repo, current_user)

        result = await handler.handle(
            CreateCategory(name="Science", description="Physics and chemistry")
        )

        assert isinstance(result, Success)
        assert isinstance(result.value, CategoryResult)
        assert result.value.id == "cat-1"
        assert result.value.name == "Science"
        assert result.value.is_active is True
        written = mock_category_repo.create.await_args.args[0]
        assert written.user_id == user_id
        assert written.created_at is not None

    async def test_requires_authenticated_user(
        self, mock_category_repo: AsyncMock, anonymous_user: MagicMock
    ) -> None:
        handler = CreateCategoryHandler(mock_category_repo, anonymous_user)

        result = await handler.handle(CreateCategory(name="Science"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.AUTHENTICATION_REQUIRED
        mock_category_repo.create.assert_not_awaited()


@pytest.mark.unit
class TestCreateCategoriesBatchHandler:
    """Test CreateCategoriesBatchHandler."""

    async def test_all_names_written_in_one_call(
        self, mock_category_repo: AsyncMock, current_user: MagicMock, user_id: str
    ) -> None:
        async def create_many(categories: list[Category]) -> list[Category]:
            return [persisted(c, f"cat-{i}") for i, c in enumerate(categories)]

        mock_category_repo.create_many.side_effect = create_many
        handler = CreateCategoriesBatchHandler(mock_category_repo, current_user)

        result = await handler.handle(
            CreateCategoriesBatch(names=["History", "Science", "Art"])
        )

        assert isinstance(result, Success)
        assert [c.name for c in result.value] == ["History", "Science", "Art"]
        assert len({c.id for c in result.value}) == 3
        mock_category_repo.create_many.assert_awaited_once()
        written = mock_category_repo.create_many.await_args.args[0]
        assert all(c.user_id == user_id for c in written)


# ============================================================================
# Update / Get
# ============================================================================


@pytest.mark.unit
class TestUpdateCategoryHandler:
    """Test UpdateCategoryHandler."""

    async def test_overwrites_fields(
        self,
        mock_category_repo: AsyncMock,
        current_user: MagicMock,
        existing_category: Category,
    ) -> None:
        mock_category_repo.get_by_id.return_value = existing_category
        mock_category_repo.update.return_value = True
        handler = UpdateCategoryHandler(mock_category_repo, current_user)

        result = await handler.handle(
            UpdateCategory(category_id="cat-1", name="World History", description=None)
        )

        assert isinstance(result, Success)
        assert result.value.name == "World History"
        assert result.value.description is None
        assert result.value.updated_at > datetime(2024, 1, 1, tzinfo=UTC)

    async def test_foreign_category_reported_as_not_found(
        self, mock_category_repo: AsyncMock, current_user: MagicMock, user_id: str
    ) -> None:
        # Repository lookups are owner-scoped: another user's row is invisible
        mock_category_repo.get_by_id.return_value = None
        handler = UpdateCategoryHandler(mock_category_repo, current_user)

        result = await handler.handle(UpdateCategory(category_id="cat-9", name="X"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.CATEGORY_NOT_FOUND
        assert result.error.resource_id == "cat-9"
        mock_category_repo.get_by_id.assert_awaited_once_with("cat-9", user_id)
        mock_category_repo.update.assert_not_awaited()


@pytest.mark.unit
class TestCategoryQueries:
    """Test GetCategoriesHandler and GetCategoryByIdHandler."""

    async def test_list_passes_activity_filter(
        self,
        mock_category_repo: AsyncMock,
        current_user: MagicMock,
        existing_category: Category,
        user_id: str,
    ) -> None:
        mock_category_repo.get_by_user_id.return_value = [existing_category]
        handler = GetCategoriesHandler(mock_category_repo, current_user)

        result = await handler.handle(GetCategories(is_active=True))

        assert isinstance(result, Success)
        assert [c.id for c in result.value] == ["cat-1"]
        mock_category_repo.get_by_user_id.assert_awaited_once_with(
            user_id, is_active=True
        )

    async def test_get_missing_category(
        self, mock_category_repo: AsyncMock, current_user: MagicMock
    ) -> None:
        mock_category_repo.get_by_id.return_value = None
        handler = GetCategoryByIdHandler(mock_category_repo, current_user)

        result = await handler.handle(GetCategoryById(category_id="missing"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CATEGORY_NOT_FOUND

    async def test_get_requires_authenticated_user(
        self, mock_category_repo: AsyncMock, anonymous_user: MagicMock
    ) -> None:
        handler = GetCategoryByIdHandler(mock_category_repo, anonymous_user)

        result = await handler.handle(GetCategoryById(category_id="cat-1"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        mock_category_repo.get_by_id.assert_not_awaited()


# ============================================================================
# Delete (event publishing)
# ============================================================================


@pytest.mark.unit
class TestDeleteHandlersPublishEvents:
    """Test that deletes publish their event only after succeeding."""

    async def test_delete_category_publishes_event(
        self,
        mock_category_repo: AsyncMock,
        mock_event_bus: AsyncMock,
        current_user: MagicMock,
        user_id: str,
    ) -> None:
        mock_category_repo.delete.return_value = True
        handler = DeleteCategoryHandler(mock_category_repo, current_user, mock_event_bus)

        result = await handler.handle(DeleteCategory(category_id="cat-1"))

        assert result == Success(value=None)
        mock_category_repo.delete.assert_awaited_once_with("cat-1", user_id)
        mock_event_bus.publish.assert_awaited_once()
        event = mock_event_bus.publish.await_args.args[0]
        assert isinstance(event, CategoryDeletedEvent)
        assert event.category_id == "cat-1"
        assert event.user_id == user_id

    async def test_failed_delete_publishes_nothing(
        self,
        mock_category_repo: AsyncMock,
        mock_event_bus: AsyncMock,
        current_user: MagicMock,
    ) -> None:
        mock_category_repo.delete.return_value = False
        handler = DeleteCategoryHandler(mock_category_repo, current_user, mock_event_bus)

        result = await handler.handle(DeleteCategory(category_id="cat-9"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CATEGORY_NOT_FOUND
        mock_event_bus.publish.assert_not_awaited()

    async def test_subscriber_failure_propagates(
        self,
        mock_category_repo: AsyncMock,
        mock_event_bus: AsyncMock,
        current_user: MagicMock,
    ) -> None:
        mock_category_repo.delete.return_value = True
        mock_event_bus.publish.side_effect = RuntimeError("cleanup failed")
        handler = DeleteCategoryHandler(mock_category_repo, current_user, mock_event_bus)

        with pytest.raises(RuntimeError, match="cleanup failed"):
            await handler.handle(DeleteCategory(category_id="cat-1"))

        mock_category_repo.delete.assert_awaited_once()

    async def test_delete_qualification_publishes_event(
        self,
        mock_qualification_repo: AsyncMock,
        mock_event_bus: AsyncMock,
        current_user: MagicMock,
        user_id: str,
    ) -> None:
        mock_qualification_repo.delete.return_value = True
        handler = DeleteQualificationHandler(
            mock_qualification_repo, current_user, mock_event_bus
        )

        result = await handler.handle(DeleteQualification(qualification_id="qual-1"))

        assert result == Success(value=None)
        event = mock_event_bus.publish.await_args.args[0]
        assert isinstance(event, QualificationDeletedEvent)
        assert event.qualification_id == "qual-1"
        assert event.user_id == user_id
