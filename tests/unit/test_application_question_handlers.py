"""Unit tests for question handlers.

Tests cover:
- Name snapshots copied from the user's own categories/qualifications
- Unknown or foreign references keep the ID but get no name snapshot
- Batch update fails as a whole when one target is missing or foreign
- Reference removal returns the repository's row count
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from question_randomizer.application.commands import (
    CreateQuestion,
    CreateQuestionsBatch,
    DeleteQuestion,
    RemoveCategoryFromQuestions,
    UpdateQuestion,
    UpdateQuestionsBatch,
)
from question_randomizer.application.commands.handlers.question_handlers import (
    CreateQuestionHandler,
    CreateQuestionsBatchHandler,
    DeleteQuestionHandler,
    RemoveCategoryFromQuestionsHandler,
    UpdateQuestionHandler,
    UpdateQuestionsBatchHandler,
)
from question_randomizer.application.commands.question_commands import (
    QuestionInput,
    QuestionUpdateInput,
)
from question_randomizer.application.queries import GetQuestions
from question_randomizer.application.queries.handlers.question_handlers import (
    GetQuestionsHandler,
)
from question_randomizer.core.enums import ErrorCode
from question_randomizer.core.errors import AuthenticationError
from question_randomizer.core.result import Failure, Success
from question_randomizer.domain.entities.category import Category
from question_randomizer.domain.entities.qualification import Qualification
from question_randomizer.domain.entities.question import Question
from question_randomizer.domain.protocols import (
    CategoryRepository,
    QualificationRepository,
    QuestionRepository,
)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_question_repo() -> AsyncMock:
    return AsyncMock(spec=QuestionRepository)


@pytest.fixture
def mock_category_repo(user_id: str) -> AsyncMock:
    repo = AsyncMock(spec=CategoryRepository)

    async def get_by_id(category_id: str, owner_id: str) -> Category | None:
        if category_id == "cat-1" and owner_id == user_id:
            return Category(id="cat-1", name="History", user_id=user_id)
        return None

    repo.get_by_id.side_effect = get_by_id
    return repo


@pytest.fixture
def mock_qualification_repo(user_id: str) -> AsyncMock:
    repo = AsyncMock(spec=QualificationRepository)

    async def get_by_id(qualification_id: str, owner_id: str) -> Qualification | None:
        if qualification_id == "qual-1" and owner_id == user_id:
            return Qualification(id="qual-1", name="Junior", user_id=user_id)
        return None

    repo.get_by_id.side_effect = get_by_id
    return repo


@pytest.fixture
def handler_deps(
    mock_question_repo: AsyncMock,
    mock_category_repo: AsyncMock,
    mock_qualification_repo: AsyncMock,
    current_user: MagicMock,
) -> dict[str, object]:
    return {
        "question_repo": mock_question_repo,
        "category_repo": mock_category_repo,
        "qualification_repo": mock_qualification_repo,
        "current_user": current_user,
    }


def stored_question(user_id: str, question_id: str = "q-1") -> Question:
    return Question(
        id=question_id,
        question_text="Old text",
        answer="Old answer",
        answer_pl="Stara odpowiedz",
        category_id="cat-1",
        category_name="History",
        user_id=user_id,
    )


def assign_id(question: Question) -> Question:
    question.id = "q-new"
    return question


# ============================================================================
# Create
# ============================================================================


@pytest.mark.unit
class TestCreateQuestionHandler:
    """Test CreateQuestionHandler snapshots."""

    async def test_copies_reference_names(
        self, handler_deps: dict[str, object], mock_question_repo: AsyncMock
    ) -> None:
        mock_question_repo.create.side_effect = assign_id
        handler = CreateQuestionHandler(**handler_deps)  # type: ignore[arg-type]

        result = await handler.handle(
            CreateQuestion(
                question_text="When did WW2 end?",
                answer="1945",
                answer_pl="1945",
                category_id="cat-1",
                qualification_id="qual-1",
                tags=["dates"],
            )
        )

        assert isinstance(result, Success)
        assert result.value.id == "q-new"
        assert result.value.category_name == "History"
        assert result.value.qualification_name == "Junior"
        assert result.value.tags == ["dates"]
        assert result.value.is_active is True

    async def test_unknown_reference_keeps_id_without_name(
        self, handler_deps: dict[str, object], mock_question_repo: AsyncMock
    ) -> None:
        mock_question_repo.create.side_effect = assign_id
        handler = CreateQuestionHandler(**handler_deps)  # type: ignore[arg-type]

        result = await handler.handle(
            CreateQuestion(
                question_text="Q", answer="A", answer_pl="O", category_id="foreign-cat"
            )
        )

        assert isinstance(result, Success)
        assert result.value.category_id == "foreign-cat"
        assert result.value.category_name is None

    async def test_requires_authenticated_user(
        self,
        handler_deps: dict[str, object],
        anonymous_user: MagicMock,
        mock_question_repo: AsyncMock,
    ) -> None:
        handler = CreateQuestionHandler(  # type: ignore[arg-type]
            **{**handler_deps, "current_user": anonymous_user}
        )

        result = await handler.handle(
            CreateQuestion(question_text="Q", answer="A", answer_pl="O")
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        mock_question_repo.create.assert_not_awaited()

    async def test_batch_looks_up_each_reference_once(
        self,
        handler_deps: dict[str, object],
        mock_question_repo: AsyncMock,
        mock_category_repo: AsyncMock,
    ) -> None:
        async def create_many(questions: list[Question]) -> list[Question]:
            for index, question in enumerate(questions):
                question.id = f"q-{index}"
            return questions

        mock_question_repo.create_many.side_effect = create_many
        handler = CreateQuestionsBatchHandler(**handler_deps)  # type: ignore[arg-type]
        items = [
            QuestionInput(
                question_text=f"Q{i}", answer="A", answer_pl="O", category_id="cat-1"
            )
            for i in range(3)
        ]

        result = await handler.handle(CreateQuestionsBatch(questions=items))

        assert isinstance(result, Success)
        assert [q.id for q in result.value] == ["q-0", "q-1", "q-2"]
        assert all(q.category_name == "History" for q in result.value)
        mock_question_repo.create_many.assert_awaited_once()
        assert mock_category_repo.get_by_id.await_count == 1


# ============================================================================
# Update
# ============================================================================


@pytest.mark.unit
class TestUpdateQuestionHandlers:
    """Test single and batch updates."""

    async def test_update_refreshes_snapshot(
        self,
        handler_deps: dict[str, object],
        mock_question_repo: AsyncMock,
        user_id: str,
    ) -> None:
        mock_question_repo.get_by_id.return_value = stored_question(user_id)
        mock_question_repo.update.return_value = True
        handler = UpdateQuestionHandler(**handler_deps)  # type: ignore[arg-type]

        result = await handler.handle(
            UpdateQuestion(
                question_id="q-1",
                question_text="New text",
                answer="New answer",
                answer_pl="Nowa odpowiedz",
                category_id=None,
                qualification_id="qual-1",
            )
        )

        assert isinstance(result, Success)
        assert result.value.question_text == "New text"
        assert result.value.category_id is None
        assert result.value.category_name is None
        assert result.value.qualification_name == "Junior"

    async def test_update_missing_question(
        self, handler_deps: dict[str, object], mock_question_repo: AsyncMock
    ) -> None:
        mock_question_repo.get_by_id.return_value = None
        handler = UpdateQuestionHandler(**handler_deps)  # type: ignore[arg-type]

        result = await handler.handle(
            UpdateQuestion(
                question_id="q-9", question_text="Q", answer="A", answer_pl="O"
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.QUESTION_NOT_FOUND
        mock_question_repo.update.assert_not_awaited()

    async def test_batch_with_foreign_question_writes_nothing(
        self,
        handler_deps: dict[str, object],
        mock_question_repo: AsyncMock,
        user_id: str,
    ) -> None:
        async def get_by_id(question_id: str, owner_id: str) -> Question | None:
            if question_id != "q-1":
                return None
            return stored_question(owner_id, question_id)

        mock_question_repo.get_by_id.side_effect = get_by_id
        handler = UpdateQuestionsBatchHandler(**handler_deps)  # type: ignore[arg-type]
        items = [
            QuestionUpdateInput(
                question_id=question_id, question_text="Q", answer="A", answer_pl="O"
            )
            for question_id in ("q-1", "q-foreign")
        ]

        result = await handler.handle(UpdateQuestionsBatch(questions=items))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.QUESTION_NOT_FOUND
        assert result.error.resource_id == "q-foreign"
        mock_question_repo.update_many.assert_not_awaited()

    async def test_batch_updates_all_in_one_call(
        self,
        handler_deps: dict[str, object],
        mock_question_repo: AsyncMock,
    ) -> None:
        async def get_by_id(question_id: str, owner_id: str) -> Question:
            return stored_question(owner_id, question_id)

        mock_question_repo.get_by_id.side_effect = get_by_id
        mock_question_repo.update_many.return_value = True
        handler = UpdateQuestionsBatchHandler(**handler_deps)  # type: ignore[arg-type]
        items = [
            QuestionUpdateInput(
                question_id=f"q-{i}",
                question_text=f"Text {i}",
                answer="A",
                answer_pl="O",
                is_active=i != 1,
            )
            for i in range(2)
        ]

        result = await handler.handle(UpdateQuestionsBatch(questions=items))

        assert isinstance(result, Success)
        assert [(q.id, q.is_active) for q in result.value] == [
            ("q-0", True),
            ("q-1", False),
        ]
        mock_question_repo.update_many.assert_awaited_once()


# ============================================================================
# Delete / reference removal / list
# ============================================================================


@pytest.mark.unit
class TestQuestionMaintenanceHandlers:
    """Test delete, reference removal and listing."""

    async def test_delete_foreign_question_not_found(
        self, mock_question_repo: AsyncMock, current_user: MagicMock
    ) -> None:
        mock_question_repo.delete.return_value = False
        handler = DeleteQuestionHandler(mock_question_repo, current_user)

        result = await handler.handle(DeleteQuestion(question_id="q-foreign"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.QUESTION_NOT_FOUND

    async def test_remove_category_returns_count(
        self, mock_question_repo: AsyncMock, current_user: MagicMock, user_id: str
    ) -> None:
        mock_question_repo.remove_category_id.return_value = 4
        handler = RemoveCategoryFromQuestionsHandler(mock_question_repo, current_user)

        result = await handler.handle(RemoveCategoryFromQuestions(category_id="cat-1"))

        assert result == Success(value=4)
        mock_question_repo.remove_category_id.assert_awaited_once_with("cat-1", user_id)

    async def test_list_by_category(
        self, mock_question_repo: AsyncMock, current_user: MagicMock, user_id: str
    ) -> None:
        mock_question_repo.get_by_category_id.return_value = [stored_question(user_id)]
        handler = GetQuestionsHandler(mock_question_repo, current_user)

        result = await handler.handle(GetQuestions(category_id="cat-1", is_active=True))

        assert isinstance(result, Success)
        assert [q.id for q in result.value] == ["q-1"]
        mock_question_repo.get_by_category_id.assert_awaited_once_with(
            "cat-1", user_id, is_active=True
        )
        mock_question_repo.get_by_user_id.assert_not_awaited()
