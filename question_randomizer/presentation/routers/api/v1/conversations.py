"""Conversations resource handlers.

Handler functions for conversation and message endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_conversations            - List conversations (recent first)
    get_conversation              - Get one conversation
    create_conversation           - Start a conversation
    update_conversation_timestamp - Mark a conversation as touched now
    delete_conversation           - Delete a conversation and its messages
    list_messages                 - List a conversation's messages
    add_message                   - Append a message
"""

from typing import Annotated

from fastapi import Path, Request, Response, status
from fastapi.responses import JSONResponse

from question_randomizer.application.commands import (
    AddMessage,
    CreateConversation,
    DeleteConversation,
    UpdateConversationTimestamp,
)
from question_randomizer.application.queries import (
    GetConversationById,
    GetConversations,
    GetMessages,
)
from question_randomizer.core.result import Failure
from question_randomizer.presentation.routers.api.middleware.auth_dependencies import (
    MediatorDep,
)
from question_randomizer.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from question_randomizer.presentation.routers.api.v1.errors import ErrorResponseBuilder
from question_randomizer.schemas.conversation_schemas import (
    ConversationCreateRequest,
    ConversationListResponse,
    ConversationResponse,
    MessageCreateRequest,
    MessageListResponse,
    MessageResponse,
)


async def list_conversations(
    request: Request,
    mediator: MediatorDep,
) -> ConversationListResponse | JSONResponse:
    """List the authenticated user's conversations.

    GET /api/v1/conversations → 200 OK
    """
    result = await mediator.send(GetConversations())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ConversationListResponse.from_dto(result.value)


async def get_conversation(
    request: Request,
    mediator: MediatorDep,
    conversation_id: Annotated[str, Path(description="Conversation ID")],
) -> ConversationResponse | JSONResponse:
    """GET /api/v1/conversations/{conversation_id} → 200 OK"""
    result = await mediator.send(GetConversationById(conversation_id=conversation_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ConversationResponse.from_dto(result.value)


async def create_conversation(
    request: Request,
    mediator: MediatorDep,
    data: ConversationCreateRequest,
) -> ConversationResponse | JSONResponse:
    """Start a conversation.

    POST /api/v1/conversations → 201 Created
    """
    result = await mediator.send(CreateConversation(title=data.title))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ConversationResponse.from_dto(result.value)


async def update_conversation_timestamp(
    request: Request,
    mediator: MediatorDep,
    conversation_id: Annotated[str, Path(description="Conversation ID")],
) -> Response:
    """Mark a conversation as touched now.

    POST /api/v1/conversations/{conversation_id}/update-timestamp → 204 No Content
    """
    result = await mediator.send(
        UpdateConversationTimestamp(conversation_id=conversation_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def delete_conversation(
    request: Request,
    mediator: MediatorDep,
    conversation_id: Annotated[str, Path(description="Conversation ID")],
) -> Response:
    """Delete a conversation and all of its messages.

    DELETE /api/v1/conversations/{conversation_id} → 204 No Content
    """
    result = await mediator.send(DeleteConversation(conversation_id=conversation_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def list_messages(
    request: Request,
    mediator: MediatorDep,
    conversation_id: Annotated[str, Path(description="Conversation ID")],
) -> MessageListResponse | JSONResponse:
    """List a conversation's messages, oldest first.

    GET /api/v1/conversations/{conversation_id}/messages → 200 OK
    """
    result = await mediator.send(GetMessages(conversation_id=conversation_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return MessageListResponse.from_dto(result.value)


async def add_message(
    request: Request,
    mediator: MediatorDep,
    conversation_id: Annotated[str, Path(description="Conversation ID")],
    data: MessageCreateRequest,
) -> MessageResponse | JSONResponse:
    """Append a message and bump the conversation's ``updated_at``.

    POST /api/v1/conversations/{conversation_id}/messages → 201 Created
    """
    result = await mediator.send(
        AddMessage(
            conversation_id=conversation_id,
            role=data.role,
            content=data.content,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return MessageResponse.from_dto(result.value)
