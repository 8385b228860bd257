"""Question command handlers.

Create and update copy the category and qualification names onto the
question. Lookups are scoped to the acting user, and a miss leaves the
snapshot as None (the ID is kept as supplied).

Batch handlers write in a single commit. UpdateQuestionsBatchHandler
checks every target first, so one foreign or missing ID fails the whole
batch before anything is written.
"""

from datetime import UTC, datetime

from question_randomizer.application.commands.question_commands import (
    CreateQuestion,
    CreateQuestionsBatch,
    DeleteQuestion,
    QuestionInput,
    RemoveCategoryFromQuestions,
    RemoveQualificationFromQuestions,
    UpdateQuestion,
    UpdateQuestionsBatch,
)
from question_randomizer.application.dtos import QuestionResult
from question_randomizer.core.enums import ErrorCode
from question_randomizer.core.errors import DomainError, NotFoundError
from question_randomizer.core.result import Failure, Result, Success
from question_randomizer.domain.entities.question import Question
from question_randomizer.domain.protocols import (
    CategoryRepository,
    CurrentUserProtocol,
    QualificationRepository,
    QuestionRepository,
)


def question_not_found(question_id: str) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.QUESTION_NOT_FOUND,
        message="Question not found",
        resource_type="Question",
        resource_id=question_id,
    )


class QuestionNameSnapshots:
    """Per-request memo of category/qualification names for one user."""

    def __init__(
        self,
        category_repo: CategoryRepository,
        qualification_repo: QualificationRepository,
        user_id: str,
    ) -> None:
        self._category_repo = category_repo
        self._qualification_repo = qualification_repo
        self._user_id = user_id
        self._category_names: dict[str, str | None] = {}
        self._qualification_names: dict[str, str | None] = {}

    async def category_name(self, category_id: str | None) -> str | None:
        if not category_id:
            return None
        if category_id not in self._category_names:
            category = await self._category_repo.get_by_id(category_id, self._user_id)
            self._category_names[category_id] = category.name if category else None
        return self._category_names[category_id]

    async def qualification_name(self, qualification_id: str | None) -> str | None:
        if not qualification_id:
            return None
        if qualification_id not in self._qualification_names:
            qualification = await self._qualification_repo.get_by_id(
                qualification_id, self._user_id
            )
            self._qualification_names[qualification_id] = (
                qualification.name if qualification else None
            )
        return self._qualification_names[qualification_id]

    async def apply(self, question: Question, data: QuestionInput) -> Question:
        """Copy input fields and fresh name snapshots onto ``question``."""
        question.question_text = data.question_text
        question.answer = data.answer
        question.answer_pl = data.answer_pl
        question.category_id = data.category_id
        question.category_name = await self.category_name(data.category_id)
        question.qualification_id = data.qualification_id
        question.qualification_name = await self.qualification_name(
            data.qualification_id
        )
        question.tags = list(data.tags) if data.tags is not None else None
        return question


def _new_question(user_id: str, now: datetime) -> Question:
    return Question(
        question_text="",
        answer="",
        answer_pl="",
        user_id=user_id,
        created_at=now,
        updated_at=now,
    )


class CreateQuestionHandler:
    """Handler for CreateQuestion command."""

    def __init__(
        self,
        question_repo: QuestionRepository,
        category_repo: CategoryRepository,
        qualification_repo: QualificationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._question_repo = question_repo
        self._category_repo = category_repo
        self._qualification_repo = qualification_repo
        self._current_user = current_user

    async def handle(self, cmd: CreateQuestion) -> Result[QuestionResult, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)
        user_id = user_result.value

        snapshots = QuestionNameSnapshots(
            self._category_repo, self._qualification_repo, user_id
        )
        question = await snapshots.apply(
            _new_question(user_id, datetime.now(UTC)), cmd
        )
        created = await self._question_repo.create(question)
        return Success(value=QuestionResult.from_entity(created))


class CreateQuestionsBatchHandler:
    """Handler for CreateQuestionsBatch command (single commit)."""

    def __init__(
        self,
        question_repo: QuestionRepository,
        category_repo: CategoryRepository,
        qualification_repo: QualificationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._question_repo = question_repo
        self._category_repo = category_repo
        self._qualification_repo = qualification_repo
        self._current_user = current_user

    async def handle(
        self, cmd: CreateQuestionsBatch
    ) -> Result[list[QuestionResult], DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)
        user_id = user_result.value

        now = datetime.now(UTC)
        snapshots = QuestionNameSnapshots(
            self._category_repo, self._qualification_repo, user_id
        )
        questions = [
            await snapshots.apply(_new_question(user_id, now), item)
            for item in cmd.questions
        ]
        created = await self._question_repo.create_many(questions)
        return Success(value=[QuestionResult.from_entity(q) for q in created])


class UpdateQuestionHandler:
    """Handler for UpdateQuestion command."""

    def __init__(
        self,
        question_repo: QuestionRepository,
        category_repo: CategoryRepository,
        qualification_repo: QualificationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._question_repo = question_repo
        self._category_repo = category_repo
        self._qualification_repo = qualification_repo
        self._current_user = current_user

    async def handle(self, cmd: UpdateQuestion) -> Result[QuestionResult, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)
        user_id = user_result.value

        question = await self._question_repo.get_by_id(cmd.question_id, user_id)
        if question is None:
            return Failure(error=question_not_found(cmd.question_id))

        snapshots = QuestionNameSnapshots(
            self._category_repo, self._qualification_repo, user_id
        )
        await snapshots.apply(question, cmd)
        question.is_active = cmd.is_active
        question.updated_at = datetime.now(UTC)

        if not await self._question_repo.update(question):
            return Failure(error=question_not_found(cmd.question_id))

        return Success(value=QuestionResult.from_entity(question))


class UpdateQuestionsBatchHandler:
    """Handler for UpdateQuestionsBatch command.

    Every question must exist and belong to the acting user. The first
    miss is reported as NotFoundError and nothing is written.
    """

    def __init__(
        self,
        question_repo: QuestionRepository,
        category_repo: CategoryRepository,
        qualification_repo: QualificationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._question_repo = question_repo
        self._category_repo = category_repo
        self._qualification_repo = qualification_repo
        self._current_user = current_user

    async def handle(
        self, cmd: UpdateQuestionsBatch
    ) -> Result[list[QuestionResult], DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)
        user_id = user_result.value

        now = datetime.now(UTC)
        snapshots = QuestionNameSnapshots(
            self._category_repo, self._qualification_repo, user_id
        )
        questions: list[Question] = []
        for item in cmd.questions:
            question = await self._question_repo.get_by_id(item.question_id, user_id)
            if question is None:
                return Failure(error=question_not_found(item.question_id))
            await snapshots.apply(question, item)
            question.is_active = item.is_active
            question.updated_at = now
            questions.append(question)

        if not await self._question_repo.update_many(questions):
            # A target vanished between the ownership check and the write.
            return Failure(error=question_not_found(cmd.questions[0].question_id))

        return Success(value=[QuestionResult.from_entity(q) for q in questions])


class DeleteQuestionHandler:
    """Handler for DeleteQuestion command (soft delete)."""

    def __init__(
        self,
        question_repo: QuestionRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._question_repo = question_repo
        self._current_user = current_user

    async def handle(self, cmd: DeleteQuestion) -> Result[None, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        if not await self._question_repo.delete(cmd.question_id, user_result.value):
            return Failure(error=question_not_found(cmd.question_id))
        return Success(value=None)


class RemoveCategoryFromQuestionsHandler:
    """Handler for RemoveCategoryFromQuestions command.

    Returns:
        Number of questions whose ``category_id`` was cleared.
    """

    def __init__(
        self,
        question_repo: QuestionRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._question_repo = question_repo
        self._current_user = current_user

    async def handle(self, cmd: RemoveCategoryFromQuestions) -> Result[int, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        cleared = await self._question_repo.remove_category_id(
            cmd.category_id, user_result.value
        )
        return Success(value=cleared)


class RemoveQualificationFromQuestionsHandler:
    """Handler for RemoveQualificationFromQuestions command."""

    def __init__(
        self,
        question_repo: QuestionRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._question_repo = question_repo
        self._current_user = current_user

    async def handle(
        self, cmd: RemoveQualificationFromQuestions
    ) -> Result[int, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        cleared = await self._question_repo.remove_qualification_id(
            cmd.qualification_id, user_result.value
        )
        return Success(value=cleared)
