"""Conversation and Message domain entities.

A conversation is a per-user message log. Messages are append-only and
always read in timestamp order. Deleting a conversation is a hard delete.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class MessageRole(str, Enum):
    """Author of a message."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(kw_only=True)
class Conversation:
    """Conversation owned by a single user.

    Attributes:
        id: Store-assigned identifier (None until persisted).
        title: Optional title.
        user_id: Owning user.
        is_active: Activity flag.
        created_at: Creation timestamp (UTC).
        updated_at: Bumped whenever the conversation is touched.
    """

    id: str | None = None
    title: str | None = None
    user_id: str
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(kw_only=True)
class Message:
    """Single message inside a conversation.

    Ownership is inherited from the parent conversation, so messages carry
    no ``user_id`` of their own.

    Attributes:
        id: Store-assigned identifier (None until persisted).
        conversation_id: Parent conversation.
        role: "user" or "assistant".
        content: Message body.
        timestamp: When the message was added (UTC).
    """

    id: str | None = None
    conversation_id: str
    role: str
    content: str
    timestamp: datetime
