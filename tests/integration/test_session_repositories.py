"""Integration tests for conversation and randomization repositories."""

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from question_randomizer.domain.entities.conversation import Conversation, Message
from question_randomizer.domain.entities.randomization import (
    PostponedQuestion,
    Randomization,
    SelectedCategory,
    UsedQuestion,
)
from question_randomizer.infrastructure.persistence.repositories import (
    ConversationRepository,
    MessageRepository,
    PostponedQuestionRepository,
    RandomizationRepository,
    SelectedCategoryRepository,
    UsedQuestionRepository,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


async def create_session(
    repo: RandomizationRepository, user_id: str, created_at: datetime = NOW, **kw: object
) -> Randomization:
    return await repo.create(
        Randomization(
            user_id=user_id,
            created_at=created_at,
            updated_at=created_at,
            **kw,  # type: ignore[arg-type]
        )
    )


@pytest.mark.integration
class TestConversationRepositories:
    """Test conversation ownership and message ordering."""

    async def test_messages_read_in_timestamp_order(
        self, test_session: AsyncSession, user_id: str
    ) -> None:
        conversations = ConversationRepository(test_session)
        messages = MessageRepository(test_session)
        conversation = await conversations.create(
            Conversation(title="Revision", user_id=user_id, created_at=NOW, updated_at=NOW)
        )
        assert conversation.id is not None

        await messages.create(
            Message(
                conversation_id=conversation.id,
                role="assistant",
                content="second",
                timestamp=NOW + timedelta(seconds=5),
            )
        )
        await messages.create(
            Message(
                conversation_id=conversation.id,
                role="user",
                content="first",
                timestamp=NOW,
            )
        )

        stored = await messages.get_by_conversation_id(conversation.id)

        assert [m.content for m in stored] == ["first", "second"]
        assert stored[0].timestamp == NOW

    async def test_delete_removes_messages(
        self, test_session: AsyncSession, user_id: str, other_user_id: str
    ) -> None:
        conversations = ConversationRepository(test_session)
        messages = MessageRepository(test_session)
        conversation = await conversations.create(
            Conversation(user_id=user_id, created_at=NOW, updated_at=NOW)
        )
        assert conversation.id is not None
        await messages.create(
            Message(
                conversation_id=conversation.id,
                role="user",
                content="hello",
                timestamp=NOW,
            )
        )

        assert await conversations.delete(conversation.id, other_user_id) is False
        assert await conversations.delete(conversation.id, user_id) is True
        assert await conversations.get_by_id(conversation.id, user_id) is None
        assert await messages.get_by_conversation_id(conversation.id) == []

    async def test_update_timestamp_is_owner_scoped(
        self, test_session: AsyncSession, user_id: str, other_user_id: str
    ) -> None:
        conversations = ConversationRepository(test_session)
        conversation = await conversations.create(
            Conversation(user_id=user_id, created_at=NOW, updated_at=NOW)
        )
        assert conversation.id is not None

        assert await conversations.update_timestamp(conversation.id, other_user_id) is False
        assert await conversations.update_timestamp(conversation.id, user_id) is True

        stored = await conversations.get_by_id(conversation.id, user_id)
        assert stored is not None
        assert stored.updated_at is not None
        assert stored.updated_at > NOW


@pytest.mark.integration
class TestRandomizationRepositories:
    """Test the active-session lookup and the per-session lists."""

    async def test_active_session_is_latest_active(
        self, test_session: AsyncSession, user_id: str, other_user_id: str
    ) -> None:
        repo = RandomizationRepository(test_session)
        await create_session(repo, user_id, NOW)
        latest = await create_session(repo, user_id, NOW + timedelta(hours=1))
        await create_session(repo, user_id, NOW + timedelta(hours=2), is_active=False)
        await create_session(repo, other_user_id, NOW + timedelta(hours=3))

        active = await repo.get_active_by_user_id(user_id)

        assert active is not None
        assert active.id == latest.id

    async def test_no_active_session(
        self, test_session: AsyncSession, user_id: str
    ) -> None:
        repo = RandomizationRepository(test_session)
        await create_session(repo, user_id, is_active=False)

        assert await repo.get_active_by_user_id(user_id) is None

    async def test_clear_current_question(
        self, test_session: AsyncSession, user_id: str
    ) -> None:
        repo = RandomizationRepository(test_session)
        session = await create_session(repo, user_id, current_question_id="q-1")
        assert session.id is not None

        assert await repo.clear_current_question(session.id, user_id) is True

        stored = await repo.get_by_id(session.id, user_id)
        assert stored is not None
        assert stored.current_question_id is None

    async def test_selected_category_delete_removes_one(
        self, test_session: AsyncSession, user_id: str
    ) -> None:
        session = await create_session(RandomizationRepository(test_session), user_id)
        assert session.id is not None
        repo = SelectedCategoryRepository(test_session)
        for offset in range(2):
            await repo.create(
                SelectedCategory(
                    randomization_id=session.id,
                    user_id=user_id,
                    category_id="cat-1",
                    category_name="History",
                    created_at=NOW + timedelta(seconds=offset),
                )
            )

        assert await repo.delete_by_category_id(session.id, user_id, "cat-1") is True
        assert len(await repo.get_by_randomization_id(session.id, user_id)) == 1
        assert await repo.delete_by_category_id(session.id, user_id, "cat-9") is False

    async def test_used_question_category_rename(
        self, test_session: AsyncSession, user_id: str
    ) -> None:
        session = await create_session(RandomizationRepository(test_session), user_id)
        assert session.id is not None
        repo = UsedQuestionRepository(test_session)
        await repo.create(
            UsedQuestion(
                randomization_id=session.id,
                user_id=user_id,
                question_id="q-1",
                category_id="cat-1",
                category_name="History",
                created_at=NOW,
            )
        )

        changed = await repo.update_category(session.id, user_id, "cat-1", "World History")

        assert changed == 1
        stored = await repo.get_by_randomization_id(session.id, user_id)
        assert [u.category_name for u in stored] == ["World History"]

    async def test_postponed_questions_ordered_by_timestamp(
        self, test_session: AsyncSession, user_id: str, other_user_id: str
    ) -> None:
        session = await create_session(RandomizationRepository(test_session), user_id)
        assert session.id is not None
        repo = PostponedQuestionRepository(test_session)
        for question_id, offset in (("q-1", 0), ("q-2", 10)):
            await repo.create(
                PostponedQuestion(
                    randomization_id=session.id,
                    user_id=user_id,
                    question_id=question_id,
                    timestamp=NOW + timedelta(seconds=offset),
                )
            )

        moved = await repo.update_timestamp(
            session.id, user_id, "q-1", NOW + timedelta(seconds=20)
        )

        assert moved is True
        stored = await repo.get_by_randomization_id(session.id, user_id)
        assert [p.question_id for p in stored] == ["q-2", "q-1"]
        assert await repo.get_by_randomization_id(session.id, other_user_id) == []

    async def test_delete_removes_item_lists(
        self, test_session: AsyncSession, user_id: str
    ) -> None:
        sessions = RandomizationRepository(test_session)
        session = await create_session(sessions, user_id)
        assert session.id is not None
        selected = SelectedCategoryRepository(test_session)
        postponed = PostponedQuestionRepository(test_session)
        await selected.create(
            SelectedCategory(
                randomization_id=session.id,
                user_id=user_id,
                category_id="cat-1",
                category_name="History",
                created_at=NOW,
            )
        )
        await postponed.create(
            PostponedQuestion(
                randomization_id=session.id,
                user_id=user_id,
                question_id="q-1",
                timestamp=NOW,
            )
        )

        assert await sessions.delete(session.id, user_id) is True

        assert await sessions.get_by_id(session.id, user_id) is None
        assert await selected.get_by_randomization_id(session.id, user_id) == []
        assert await postponed.get_by_randomization_id(session.id, user_id) == []
