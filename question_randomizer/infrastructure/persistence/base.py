"""Base model and mixins for all database tables.

This module provides:
- BaseModel: Base class for ALL models (string id, created_at)
- TimestampMixin: Adds updated_at
- BaseMutableModel: Base for models that are updated after insert
- ensure_utc: Normalizes datetimes read back from the database

Identifiers are assigned by the store on insert (UUID v7 rendered as a
string) so the domain never generates IDs itself.

Architecture:
    BaseModel (id, created_at)
        ↑
        ├── BaseMutableModel (+ updated_at via TimestampMixin)
        │   ├── Category, Qualification, Question
        │   ├── Conversation, Randomization
        │
        └── Message, SelectedCategory, UsedQuestion, PostponedQuestion
"""

from datetime import UTC, datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


def new_id() -> str:
    """Generate a store-side identifier (time-ordered UUID v7)."""
    return str(uuid7())


def ensure_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes.

    SQLite drops tzinfo on DateTime(timezone=True) columns. Every value
    written by the service is UTC, so a naive value read back is UTC too.
    """
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: String primary key assigned on insert
    - created_at: Creation timestamp (UTC)
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
    )

    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Mixin for models that track updates."""

    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        server_default=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models (id, created_at, updated_at)."""

    __abstract__ = True
