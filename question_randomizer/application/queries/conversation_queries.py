"""Conversation and message queries."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetConversations:
    """List the acting user's conversations, most recently updated first."""


@dataclass(frozen=True, kw_only=True)
class GetConversationById:
    """Fetch one owned conversation."""

    conversation_id: str


@dataclass(frozen=True, kw_only=True)
class GetMessages:
    """List the messages of an owned conversation, oldest first."""

    conversation_id: str
