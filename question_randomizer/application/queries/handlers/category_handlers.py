"""Category and qualification query handlers."""

from question_randomizer.application.commands.handlers.category_handlers import (
    category_not_found,
)
from question_randomizer.application.commands.handlers.qualification_handlers import (
    qualification_not_found,
)
from question_randomizer.application.dtos import CategoryResult, QualificationResult
from question_randomizer.application.queries.category_queries import (
    GetCategories,
    GetCategoryById,
    GetQualificationById,
    GetQualifications,
)
from question_randomizer.core.errors import DomainError
from question_randomizer.core.result import Failure, Result, Success
from question_randomizer.domain.protocols import (
    CategoryRepository,
    CurrentUserProtocol,
    QualificationRepository,
)


class GetCategoriesHandler:
    """Handler for GetCategories query."""

    def __init__(
        self,
        category_repo: CategoryRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._category_repo = category_repo
        self._current_user = current_user

    async def handle(
        self, query: GetCategories
    ) -> Result[list[CategoryResult], DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        categories = await self._category_repo.get_by_user_id(
            user_result.value, is_active=query.is_active
        )
        return Success(value=[CategoryResult.from_entity(c) for c in categories])


class GetCategoryByIdHandler:
    """Handler for GetCategoryById query.

    Soft-deleted categories are still returned; only ownership matters.
    """

    def __init__(
        self,
        category_repo: CategoryRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._category_repo = category_repo
        self._current_user = current_user

    async def handle(self, query: GetCategoryById) -> Result[CategoryResult, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        category = await self._category_repo.get_by_id(
            query.category_id, user_result.value
        )
        if category is None:
            return Failure(error=category_not_found(query.category_id))
        return Success(value=CategoryResult.from_entity(category))


class GetQualificationsHandler:
    """Handler for GetQualifications query."""

    def __init__(
        self,
        qualification_repo: QualificationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._qualification_repo = qualification_repo
        self._current_user = current_user

    async def handle(
        self, query: GetQualifications
    ) -> Result[list[QualificationResult], DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        qualifications = await self._qualification_repo.get_by_user_id(
            user_result.value, is_active=query.is_active
        )
        return Success(
            value=[QualificationResult.from_entity(q) for q in qualifications]
        )


class GetQualificationByIdHandler:
    """Handler for GetQualificationById query."""

    def __init__(
        self,
        qualification_repo: QualificationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._qualification_repo = qualification_repo
        self._current_user = current_user

    async def handle(
        self, query: GetQualificationById
    ) -> Result[QualificationResult, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        qualification = await self._qualification_repo.get_by_id(
            query.qualification_id, user_result.value
        )
        if qualification is None:
            return Failure(error=qualification_not_found(query.qualification_id))
        return Success(value=QualificationResult.from_entity(qualification))
