"""Conversation and message database models.

Messages reference their conversation with ON DELETE CASCADE; the
repository also deletes them explicitly since SQLite only enforces foreign
keys when the pragma is enabled.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from question_randomizer.infrastructure.persistence.base import (
    BaseModel,
    BaseMutableModel,
)


class Conversation(BaseMutableModel):
    """Conversation table."""

    __tablename__ = "conversations"

    title: Mapped[str | None] = mapped_column(String(200), nullable=True)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class Message(BaseModel):
    """Message table (append-only, no updated_at)."""

    __tablename__ = "messages"

    conversation_id: Mapped[str] = mapped_column(
        ForeignKey("conversations.id", ondelete="CASCADE"),
        nullable=False,
    )
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    __table_args__ = (
        Index("ix_messages_conversation_timestamp", "conversation_id", "timestamp"),
    )
