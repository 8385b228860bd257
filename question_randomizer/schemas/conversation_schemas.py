"""Conversation and message request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from question_randomizer.application.dtos import ConversationResult, MessageResult


class ConversationCreateRequest(BaseModel):
    """Start a conversation."""

    title: str = Field(..., description="Conversation title (≤200 chars)")


class MessageCreateRequest(BaseModel):
    """Append a message to a conversation."""

    role: str = Field(..., description="Author role", examples=["user", "assistant"])
    content: str = Field(..., description="Message body (≤10000 chars)")


class ConversationResponse(BaseModel):
    """Single conversation response."""

    id: str = Field(..., description="Conversation identifier")
    title: str | None = Field(None, description="Conversation title")
    is_active: bool = Field(..., description="Whether the conversation is active")
    created_at: datetime | None = Field(None, description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last activity timestamp")

    @classmethod
    def from_dto(cls, dto: ConversationResult) -> "ConversationResponse":
        return cls(
            id=dto.id,
            title=dto.title,
            is_active=dto.is_active,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class ConversationListResponse(BaseModel):
    """Conversation list response, most recently updated first."""

    conversations: list[ConversationResponse] = Field(..., description="Conversations")
    total_count: int = Field(..., description="Number of conversations returned")

    @classmethod
    def from_dto(cls, dtos: list[ConversationResult]) -> "ConversationListResponse":
        return cls(
            conversations=[ConversationResponse.from_dto(dto) for dto in dtos],
            total_count=len(dtos),
        )


class MessageResponse(BaseModel):
    """Single message response."""

    id: str = Field(..., description="Message identifier")
    conversation_id: str = Field(..., description="Parent conversation")
    role: str = Field(..., description="Author role")
    content: str = Field(..., description="Message body")
    timestamp: datetime = Field(..., description="When the message was added")

    @classmethod
    def from_dto(cls, dto: MessageResult) -> "MessageResponse":
        return cls(
            id=dto.id,
            conversation_id=dto.conversation_id,
            role=dto.role,
            content=dto.content,
            timestamp=dto.timestamp,
        )


class MessageListResponse(BaseModel):
    """Message list response, oldest first."""

    messages: list[MessageResponse] = Field(..., description="Messages")
    total_count: int = Field(..., description="Number of messages returned")

    @classmethod
    def from_dto(cls, dtos: list[MessageResult]) -> "MessageListResponse":
        return cls(
            messages=[MessageResponse.from_dto(dto) for dto in dtos],
            total_count=len(dtos),
        )
