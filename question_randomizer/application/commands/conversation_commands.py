"""Conversation and message commands."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CreateConversation:
    """Start a conversation.

    Attributes:
        title: Conversation title (required, ≤200 chars).
    """

    title: str


@dataclass(frozen=True, kw_only=True)
class UpdateConversationTimestamp:
    """Mark a conversation as touched now."""

    conversation_id: str


@dataclass(frozen=True, kw_only=True)
class DeleteConversation:
    """Hard-delete a conversation and its messages."""

    conversation_id: str


@dataclass(frozen=True, kw_only=True)
class AddMessage:
    """Append a message to an owned conversation.

    Attributes:
        conversation_id: Target conversation.
        role: "user" or "assistant".
        content: Message body (required, ≤10000 chars).
    """

    conversation_id: str
    role: str
    content: str
