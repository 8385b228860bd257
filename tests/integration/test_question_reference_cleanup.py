"""Integration tests for reference clean-up on category/qualification deletion.

The delete handler commits, publishes the event on a real InMemoryEventBus
and the subscribed QuestionReferenceCleanupHandler strips the dangling ID
in its own session.
"""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from question_randomizer.application.commands import DeleteCategory, DeleteQualification
from question_randomizer.application.commands.handlers.category_handlers import (
    DeleteCategoryHandler,
)
from question_randomizer.application.commands.handlers.qualification_handlers import (
    DeleteQualificationHandler,
)
from question_randomizer.application.event_handlers.question_reference_cleanup_handler import (
    QuestionReferenceCleanupHandler,
)
from question_randomizer.core.result import Success
from question_randomizer.domain.entities.category import Category
from question_randomizer.domain.entities.qualification import Qualification
from question_randomizer.domain.entities.question import Question
from question_randomizer.domain.events import (
    CategoryDeletedEvent,
    QualificationDeletedEvent,
)
from question_randomizer.infrastructure.events.in_memory_event_bus import (
    InMemoryEventBus,
)
from question_randomizer.infrastructure.persistence.database import Database
from question_randomizer.infrastructure.persistence.repositories import (
    CategoryRepository,
    QualificationRepository,
    QuestionRepository,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def event_bus(test_database: Database, mock_logger: MagicMock) -> InMemoryEventBus:
    bus = InMemoryEventBus(logger=mock_logger)
    cleanup = QuestionReferenceCleanupHandler(database=test_database, logger=mock_logger)
    bus.subscribe(CategoryDeletedEvent, cleanup.handle_category_deleted)
    bus.subscribe(QualificationDeletedEvent, cleanup.handle_qualification_deleted)
    return bus


async def seed_question(database: Database, user_id: str, **refs: str) -> str:
    async with database.get_session() as session:
        question = await QuestionRepository(session).create(
            Question(
                question_text="Define entropy",
                answer="A measure of disorder",
                answer_pl="Miara nieuporzadkowania",
                user_id=user_id,
                created_at=NOW,
                updated_at=NOW,
                **refs,
            )
        )
    assert question.id is not None
    return question.id


async def load_question(database: Database, question_id: str, user_id: str) -> Question:
    async with database.get_session() as session:
        question = await QuestionRepository(session).get_by_id(question_id, user_id)
    assert question is not None
    return question


@pytest.mark.integration
class TestQuestionReferenceCleanup:
    """Test end-to-end clean-up through the event bus."""

    async def test_category_delete_clears_id_keeps_name(
        self,
        test_database: Database,
        event_bus: InMemoryEventBus,
        current_user: MagicMock,
        user_id: str,
        other_user_id: str,
        mock_logger: MagicMock,
    ) -> None:
        async with test_database.get_session() as session:
            category = await CategoryRepository(session).create(
                Category(name="Physics", user_id=user_id, created_at=NOW, updated_at=NOW)
            )
        assert category.id is not None
        mine = await seed_question(
            test_database, user_id, category_id=category.id, category_name="Physics"
        )
        theirs = await seed_question(
            test_database, other_user_id, category_id=category.id, category_name="Physics"
        )

        async with test_database.get_session() as session:
            handler = DeleteCategoryHandler(
                CategoryRepository(session), current_user, event_bus
            )
            result = await handler.handle(DeleteCategory(category_id=category.id))

        assert result == Success(value=None)
        cleaned = await load_question(test_database, mine, user_id)
        assert cleaned.category_id is None
        assert cleaned.category_name == "Physics"
        untouched = await load_question(test_database, theirs, other_user_id)
        assert untouched.category_id == category.id
        mock_logger.info.assert_any_call(
            "question_references_cleared",
            reference="category_id",
            reference_id=category.id,
            user_id=user_id,
            questions_updated=1,
        )

    async def test_qualification_delete_clears_id_keeps_name(
        self,
        test_database: Database,
        event_bus: InMemoryEventBus,
        current_user: MagicMock,
        user_id: str,
    ) -> None:
        async with test_database.get_session() as session:
            qualification = await QualificationRepository(session).create(
                Qualification(
                    name="Graduate", user_id=user_id, created_at=NOW, updated_at=NOW
                )
            )
        assert qualification.id is not None
        question_id = await seed_question(
            test_database,
            user_id,
            qualification_id=qualification.id,
            qualification_name="Graduate",
        )

        async with test_database.get_session() as session:
            handler = DeleteQualificationHandler(
                QualificationRepository(session), current_user, event_bus
            )
            result = await handler.handle(
                DeleteQualification(qualification_id=qualification.id)
            )

        assert isinstance(result, Success)
        cleaned = await load_question(test_database, question_id, user_id)
        assert cleaned.qualification_id is None
        assert cleaned.qualification_name == "Graduate"

    async def test_foreign_category_delete_changes_nothing(
        self,
        test_database: Database,
        event_bus: InMemoryEventBus,
        current_user: MagicMock,
        other_user_id: str,
    ) -> None:
        async with test_database.get_session() as session:
            category = await CategoryRepository(session).create(
                Category(
                    name="Chemistry", user_id=other_user_id, created_at=NOW, updated_at=NOW
                )
            )
        assert category.id is not None
        question_id = await seed_question(
            test_database, other_user_id, category_id=category.id
        )

        async with test_database.get_session() as session:
            handler = DeleteCategoryHandler(
                CategoryRepository(session), current_user, event_bus
            )
            result = await handler.handle(DeleteCategory(category_id=category.id))

        assert not isinstance(result, Success)
        untouched = await load_question(test_database, question_id, other_user_id)
        assert untouched.category_id == category.id
