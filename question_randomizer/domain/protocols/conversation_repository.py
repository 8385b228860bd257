"""Conversation and Message repository protocols.

Messages are only reachable through a conversation the handler has already
verified, so MessageRepository is not user-scoped itself.
"""

from typing import Protocol

from question_randomizer.domain.entities.conversation import Conversation, Message


class ConversationRepository(Protocol):
    """Conversation repository protocol (port)."""

    async def get_by_id(
        self, conversation_id: str, user_id: str
    ) -> Conversation | None:
        """Find a conversation owned by ``user_id``."""
        ...

    async def get_by_user_id(self, user_id: str) -> list[Conversation]:
        """List the user's conversations, most recently updated first."""
        ...

    async def create(self, conversation: Conversation) -> Conversation:
        """Insert a conversation and return it with its assigned ID."""
        ...

    async def update_timestamp(self, conversation_id: str, user_id: str) -> bool:
        """Set ``updated_at`` to now. False if missing or not owned."""
        ...

    async def delete(self, conversation_id: str, user_id: str) -> bool:
        """Hard-delete a conversation and its messages.

        Returns:
            False if missing or not owned.
        """
        ...


class MessageRepository(Protocol):
    """Message repository protocol (port)."""

    async def get_by_conversation_id(self, conversation_id: str) -> list[Message]:
        """List messages of a conversation, oldest first."""
        ...

    async def create(self, message: Message) -> Message:
        """Append a message and return it with its assigned ID."""
        ...
