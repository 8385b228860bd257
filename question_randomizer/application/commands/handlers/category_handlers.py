"""Category command handlers.

Flow shared by every handler:
1. Resolve the acting user (AuthenticationError when there is none)
2. Load the target and check ownership (NotFoundError for missing or foreign)
3. One repository write
4. Map to CategoryResult

DeleteCategoryHandler publishes CategoryDeletedEvent once the soft delete
has been committed. Subscriber failures propagate to the caller; the
delete itself is not undone.
"""

from datetime import UTC, datetime

from question_randomizer.application.commands.category_commands import (
    CreateCategoriesBatch,
    CreateCategory,
    DeleteCategory,
    UpdateCategory,
)
from question_randomizer.application.dtos import CategoryResult
from question_randomizer.core.enums import ErrorCode
from question_randomizer.core.errors import DomainError, NotFoundError
from question_randomizer.core.result import Failure, Result, Success
from question_randomizer.domain.entities.category import Category
from question_randomizer.domain.events import CategoryDeletedEvent
from question_randomizer.domain.protocols import (
    CategoryRepository,
    CurrentUserProtocol,
    EventBusProtocol,
)


def category_not_found(category_id: str) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.CATEGORY_NOT_FOUND,
        message="Category not found",
        resource_type="Category",
        resource_id=category_id,
    )


class CreateCategoryHandler:
    """Handler for CreateCategory command."""

    def __init__(
        self,
        category_repo: CategoryRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._category_repo = category_repo
        self._current_user = current_user

    async def handle(self, cmd: CreateCategory) -> Result[CategoryResult, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        now = datetime.now(UTC)
        category = await self._category_repo.create(
            Category(
                name=cmd.name,
                description=cmd.description,
                user_id=user_result.value,
                created_at=now,
                updated_at=now,
            )
        )
        return Success(value=CategoryResult.from_entity(category))


class CreateCategoriesBatchHandler:
    """Handler for CreateCategoriesBatch command.

    All categories are written in one commit: either every name is
    created or none is.
    """

    def __init__(
        self,
        category_repo: CategoryRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._category_repo = category_repo
        self._current_user = current_user

    async def handle(
        self, cmd: CreateCategoriesBatch
    ) -> Result[list[CategoryResult], DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        now = datetime.now(UTC)
        categories = await self._category_repo.create_many(
            [
                Category(
                    name=name,
                    user_id=user_result.value,
                    created_at=now,
                    updated_at=now,
                )
                for name in cmd.names
            ]
        )
        return Success(value=[CategoryResult.from_entity(c) for c in categories])


class UpdateCategoryHandler:
    """Handler for UpdateCategory command.

    Renaming does not touch name snapshots already copied onto questions
    or randomization items.
    """

    def __init__(
        self,
        category_repo: CategoryRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._category_repo = category_repo
        self._current_user = current_user

    async def handle(self, cmd: UpdateCategory) -> Result[CategoryResult, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)
        user_id = user_result.value

        category = await self._category_repo.get_by_id(cmd.category_id, user_id)
        if category is None:
            return Failure(error=category_not_found(cmd.category_id))

        category.name = cmd.name
        category.description = cmd.description
        category.is_active = cmd.is_active
        category.updated_at = datetime.now(UTC)

        if not await self._category_repo.update(category):
            return Failure(error=category_not_found(cmd.category_id))

        return Success(value=CategoryResult.from_entity(category))


class DeleteCategoryHandler:
    """Handler for DeleteCategory command.

    Side Effects:
        - Soft-deletes the category (``is_active=False``).
        - Publishes CategoryDeletedEvent after the commit.
    """

    def __init__(
        self,
        category_repo: CategoryRepository,
        current_user: CurrentUserProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._category_repo = category_repo
        self._current_user = current_user
        self._event_bus = event_bus

    async def handle(self, cmd: DeleteCategory) -> Result[None, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)
        user_id = user_result.value

        if not await self._category_repo.delete(cmd.category_id, user_id):
            return Failure(error=category_not_found(cmd.category_id))

        await self._event_bus.publish(
            CategoryDeletedEvent(category_id=cmd.category_id, user_id=user_id)
        )
        return Success(value=None)
