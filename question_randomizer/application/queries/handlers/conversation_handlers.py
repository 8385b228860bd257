"""Conversation and message query handlers."""

from question_randomizer.application.commands.handlers.conversation_handlers import (
    conversation_not_found,
)
from question_randomizer.application.dtos import ConversationResult, MessageResult
from question_randomizer.application.queries.conversation_queries import (
    GetConversationById,
    GetConversations,
    GetMessages,
)
from question_randomizer.core.errors import DomainError
from question_randomizer.core.result import Failure, Result, Success
from question_randomizer.domain.protocols import (
    ConversationRepository,
    CurrentUserProtocol,
    MessageRepository,
)


class GetConversationsHandler:
    """Handler for GetConversations query (most recently updated first)."""

    def __init__(
        self,
        conversation_repo: ConversationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._conversation_repo = conversation_repo
        self._current_user = current_user

    async def handle(
        self, query: GetConversations
    ) -> Result[list[ConversationResult], DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        conversations = await self._conversation_repo.get_by_user_id(user_result.value)
        return Success(
            value=[ConversationResult.from_entity(c) for c in conversations]
        )


class GetConversationByIdHandler:
    """Handler for GetConversationById query."""

    def __init__(
        self,
        conversation_repo: ConversationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._conversation_repo = conversation_repo
        self._current_user = current_user

    async def handle(
        self, query: GetConversationById
    ) -> Result[ConversationResult, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        conversation = await self._conversation_repo.get_by_id(
            query.conversation_id, user_result.value
        )
        if conversation is None:
            return Failure(error=conversation_not_found(query.conversation_id))
        return Success(value=ConversationResult.from_entity(conversation))


class GetMessagesHandler:
    """Handler for GetMessages query.

    The parent conversation must belong to the acting user; messages are
    returned oldest first.
    """

    def __init__(
        self,
        conversation_repo: ConversationRepository,
        message_repo: MessageRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._conversation_repo = conversation_repo
        self._message_repo = message_repo
        self._current_user = current_user

    async def handle(
        self, query: GetMessages
    ) -> Result[list[MessageResult], DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        conversation = await self._conversation_repo.get_by_id(
            query.conversation_id, user_result.value
        )
        if conversation is None:
            return Failure(error=conversation_not_found(query.conversation_id))

        messages = await self._message_repo.get_by_conversation_id(
            query.conversation_id
        )
        return Success(value=[MessageResult.from_entity(m) for m in messages])
