"""Question query handlers."""

from question_randomizer.application.commands.handlers.question_handlers import (
    question_not_found,
)
from question_randomizer.application.dtos import QuestionResult
from question_randomizer.application.queries.question_queries import (
    GetQuestionById,
    GetQuestions,
)
from question_randomizer.core.errors import DomainError
from question_randomizer.core.result import Failure, Result, Success
from question_randomizer.domain.protocols import CurrentUserProtocol, QuestionRepository


class GetQuestionsHandler:
    """Handler for GetQuestions query.

    Lists the user's questions, narrowed to one category when
    ``category_id`` is given.
    """

    def __init__(
        self,
        question_repo: QuestionRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._question_repo = question_repo
        self._current_user = current_user

    async def handle(
        self, query: GetQuestions
    ) -> Result[list[QuestionResult], DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)
        user_id = user_result.value

        if query.category_id:
            questions = await self._question_repo.get_by_category_id(
                query.category_id, user_id, is_active=query.is_active
            )
        else:
            questions = await self._question_repo.get_by_user_id(
                user_id, is_active=query.is_active
            )
        return Success(value=[QuestionResult.from_entity(q) for q in questions])


class GetQuestionByIdHandler:
    """Handler for GetQuestionById query."""

    def __init__(
        self,
        question_repo: QuestionRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._question_repo = question_repo
        self._current_user = current_user

    async def handle(self, query: GetQuestionById) -> Result[QuestionResult, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        question = await self._question_repo.get_by_id(
            query.question_id, user_result.value
        )
        if question is None:
            return Failure(error=question_not_found(query.question_id))
        return Success(value=QuestionResult.from_entity(question))
