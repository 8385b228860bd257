"""Randomization session query handlers."""

from question_randomizer.application.commands.handlers.randomization_handlers import (
    resolve_owned_randomization,
)
from question_randomizer.application.dtos import (
    PostponedQuestionResult,
    RandomizationResult,
    SelectedCategoryResult,
    UsedQuestionResult,
)
from question_randomizer.application.queries.randomization_queries import (
    GetPostponedQuestions,
    GetRandomization,
    GetSelectedCategories,
    GetUsedQuestions,
)
from question_randomizer.core.errors import DomainError
from question_randomizer.core.result import Failure, Result, Success
from question_randomizer.domain.protocols import (
    CurrentUserProtocol,
    PostponedQuestionRepository,
    RandomizationRepository,
    SelectedCategoryRepository,
    UsedQuestionRepository,
)


class GetRandomizationHandler:
    """Handler for GetRandomization query.

    Returns:
        Success(RandomizationResult) for the user's current session, or
        Success(None) when they have no active session.
    """

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._current_user = current_user

    async def handle(
        self, query: GetRandomization
    ) -> Result[RandomizationResult | None, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        randomization = await self._randomization_repo.get_active_by_user_id(
            user_result.value
        )
        if randomization is None:
            return Success(value=None)
        return Success(value=RandomizationResult.from_entity(randomization))


class GetSelectedCategoriesHandler:
    """Handler for GetSelectedCategories query."""

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        selected_category_repo: SelectedCategoryRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._selected_category_repo = selected_category_repo
        self._current_user = current_user

    async def handle(
        self, query: GetSelectedCategories
    ) -> Result[list[SelectedCategoryResult], DomainError]:
        owned = await resolve_owned_randomization(
            self._current_user, self._randomization_repo, query.randomization_id
        )
        if isinstance(owned, Failure):
            return owned

        items = await self._selected_category_repo.get_by_randomization_id(
            query.randomization_id, owned.value.user_id
        )
        return Success(value=[SelectedCategoryResult.from_entity(i) for i in items])


class GetUsedQuestionsHandler:
    """Handler for GetUsedQuestions query."""

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        used_question_repo: UsedQuestionRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._used_question_repo = used_question_repo
        self._current_user = current_user

    async def handle(
        self, query: GetUsedQuestions
    ) -> Result[list[UsedQuestionResult], DomainError]:
        owned = await resolve_owned_randomization(
            self._current_user, self._randomization_repo, query.randomization_id
        )
        if isinstance(owned, Failure):
            return owned

        items = await self._used_question_repo.get_by_randomization_id(
            query.randomization_id, owned.value.user_id
        )
        return Success(value=[UsedQuestionResult.from_entity(i) for i in items])


class GetPostponedQuestionsHandler:
    """Handler for GetPostponedQuestions query (oldest postponement first)."""

    def __init__(
        self,
        randomization_repo: RandomizationRepository,
        postponed_question_repo: PostponedQuestionRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._randomization_repo = randomization_repo
        self._postponed_question_repo = postponed_question_repo
        self._current_user = current_user

    async def handle(
        self, query: GetPostponedQuestions
    ) -> Result[list[PostponedQuestionResult], DomainError]:
        owned = await resolve_owned_randomization(
            self._current_user, self._randomization_repo, query.randomization_id
        )
        if isinstance(owned, Failure):
            return owned

        items = await self._postponed_question_repo.get_by_randomization_id(
            query.randomization_id, owned.value.user_id
        )
        return Success(value=[PostponedQuestionResult.from_entity(i) for i in items])
