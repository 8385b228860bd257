"""Conversation and Message repositories (SQLAlchemy adapters).

Conversations are hard-deleted together with their messages.
"""

from datetime import UTC, datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from question_randomizer.domain.entities.conversation import Conversation, Message
from question_randomizer.infrastructure.persistence.base import ensure_utc
from question_randomizer.infrastructure.persistence.models.conversation import (
    Conversation as ConversationModel,
)
from question_randomizer.infrastructure.persistence.models.conversation import (
    Message as MessageModel,
)


class ConversationRepository:
    """SQLAlchemy implementation of ConversationRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def get_by_id(
        self, conversation_id: str, user_id: str
    ) -> Conversation | None:
        """Find a conversation owned by ``user_id``."""
        model = await self._find_owned(conversation_id, user_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def get_by_user_id(self, user_id: str) -> list[Conversation]:
        """List the user's conversations, most recently updated first."""
        stmt = (
            select(ConversationModel)
            .where(ConversationModel.user_id == user_id)
            .order_by(ConversationModel.updated_at.desc(), ConversationModel.id.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create(self, conversation: Conversation) -> Conversation:
        """Insert a conversation and return it with its assigned ID."""
        model = ConversationModel(
            title=conversation.title,
            user_id=conversation.user_id,
            is_active=conversation.is_active,
            created_at=conversation.created_at,
            updated_at=conversation.updated_at,
        )
        self.session.add(model)
        await self.session.commit()
        return self._to_domain(model)

    async def update_timestamp(self, conversation_id: str, user_id: str) -> bool:
        """Bump ``updated_at`` to now. False if missing or not owned."""
        model = await self._find_owned(conversation_id, user_id)
        if model is None:
            return False

        model.updated_at = datetime.now(UTC)
        await self.session.commit()
        return True

    async def delete(self, conversation_id: str, user_id: str) -> bool:
        """Hard-delete a conversation and all of its messages.

        Returns:
            True if deleted, False if missing or not owned.
        """
        model = await self._find_owned(conversation_id, user_id)
        if model is None:
            return False

        await self.session.execute(
            delete(MessageModel).where(MessageModel.conversation_id == conversation_id)
        )
        await self.session.delete(model)
        await self.session.commit()
        return True

    async def _find_owned(
        self, conversation_id: str, user_id: str
    ) -> ConversationModel | None:
        stmt = select(ConversationModel).where(
            ConversationModel.id == conversation_id,
            ConversationModel.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, model: ConversationModel) -> Conversation:
        return Conversation(
            id=model.id,
            title=model.title,
            user_id=model.user_id,
            is_active=model.is_active,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


class MessageRepository:
    """SQLAlchemy implementation of MessageRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_conversation_id(self, conversation_id: str) -> list[Message]:
        """List a conversation's messages, oldest first."""
        stmt = (
            select(MessageModel)
            .where(MessageModel.conversation_id == conversation_id)
            .order_by(MessageModel.timestamp, MessageModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create(self, message: Message) -> Message:
        """Append a message and return it with its assigned ID."""
        model = MessageModel(
            conversation_id=message.conversation_id,
            role=message.role,
            content=message.content,
            timestamp=message.timestamp,
            created_at=message.timestamp,
        )
        self.session.add(model)
        await self.session.commit()
        return self._to_domain(model)

    def _to_domain(self, model: MessageModel) -> Message:
        return Message(
            id=model.id,
            conversation_id=model.conversation_id,
            role=model.role,
            content=model.content,
            timestamp=ensure_utc(model.timestamp),  # type: ignore[arg-type]
        )
