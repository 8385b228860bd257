"""Conversation and message result DTOs."""

from dataclasses import dataclass
from datetime import datetime

from question_randomizer.domain.entities.conversation import Conversation, Message


@dataclass(frozen=True, kw_only=True)
class ConversationResult:
    """Conversation as returned to callers."""

    id: str
    title: str | None
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, conversation: Conversation) -> "ConversationResult":
        return cls(
            id=conversation.id or "",
            title=conversation.title,
            is_active=conversation.is_active,
            created_at=conversation.created_at,
            updated_at=conversation.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class MessageResult:
    """Message as returned to callers."""

    id: str
    conversation_id: str
    role: str
    content: str
    timestamp: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageResult":
        return cls(
            id=message.id or "",
            conversation_id=message.conversation_id,
            role=message.role,
            content=message.content,
            timestamp=message.timestamp,
        )
