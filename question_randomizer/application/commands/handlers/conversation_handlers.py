"""Conversation and message command handlers.

Messages have no owner of their own: AddMessageHandler checks that the
parent conversation belongs to the acting user, then bumps the
conversation's ``updated_at`` so it sorts first in listings.
"""

from datetime import UTC, datetime

from question_randomizer.application.commands.conversation_commands import (
    AddMessage,
    CreateConversation,
    DeleteConversation,
    UpdateConversationTimestamp,
)
from question_randomizer.application.dtos import ConversationResult, MessageResult
from question_randomizer.core.enums import ErrorCode
from question_randomizer.core.errors import DomainError, NotFoundError
from question_randomizer.core.result import Failure, Result, Success
from question_randomizer.domain.entities.conversation import Conversation, Message
from question_randomizer.domain.protocols import (
    ConversationRepository,
    CurrentUserProtocol,
    MessageRepository,
)


def conversation_not_found(conversation_id: str) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.CONVERSATION_NOT_FOUND,
        message="Conversation not found",
        resource_type="Conversation",
        resource_id=conversation_id,
    )


class CreateConversationHandler:
    """Handler for CreateConversation command."""

    def __init__(
        self,
        conversation_repo: ConversationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._conversation_repo = conversation_repo
        self._current_user = current_user

    async def handle(
        self, cmd: CreateConversation
    ) -> Result[ConversationResult, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        now = datetime.now(UTC)
        conversation = await self._conversation_repo.create(
            Conversation(
                title=cmd.title,
                user_id=user_result.value,
                created_at=now,
                updated_at=now,
            )
        )
        return Success(value=ConversationResult.from_entity(conversation))


class UpdateConversationTimestampHandler:
    """Handler for UpdateConversationTimestamp command."""

    def __init__(
        self,
        conversation_repo: ConversationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._conversation_repo = conversation_repo
        self._current_user = current_user

    async def handle(
        self, cmd: UpdateConversationTimestamp
    ) -> Result[None, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        if not await self._conversation_repo.update_timestamp(
            cmd.conversation_id, user_result.value
        ):
            return Failure(error=conversation_not_found(cmd.conversation_id))
        return Success(value=None)


class DeleteConversationHandler:
    """Handler for DeleteConversation command (hard delete, messages included)."""

    def __init__(
        self,
        conversation_repo: ConversationRepository,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._conversation_repo = conversation_repo
        self._current_user = current_user

    async def handle(self, cmd: DeleteConversation) -> Result[None, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)

        if not await self._conversation_repo.delete(
            cmd.conversation_id, user_result.value
        ):
            return Failure(error=conversation_not_found(cmd.conversation_id))
        return Success(value=None)


class AddMessageHandler:
    """Handler for AddMessage command.

    Flow:
    1. Resolve user
    2. Load conversation (NotFoundError when missing or foreign)
    3. Insert message stamped with the current time
    4. Touch the conversation
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

    async def handle(self, cmd: AddMessage) -> Result[MessageResult, DomainError]:
        user_result = self._current_user.get_user_id()
        if isinstance(user_result, Failure):
            return Failure(error=user_result.error)
        user_id = user_result.value

        conversation = await self._conversation_repo.get_by_id(
            cmd.conversation_id, user_id
        )
        if conversation is None:
            return Failure(error=conversation_not_found(cmd.conversation_id))

        message = await self._message_repo.create(
            Message(
                conversation_id=cmd.conversation_id,
                role=cmd.role,
                content=cmd.content,
                timestamp=datetime.now(UTC),
            )
        )
        await self._conversation_repo.update_timestamp(cmd.conversation_id, user_id)
        return Success(value=MessageResult.from_entity(message))
