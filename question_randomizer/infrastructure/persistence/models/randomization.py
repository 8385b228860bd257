"""Randomization session and bookkeeping database models.

The three item tables carry both ``randomization_id`` and ``user_id`` so
every query can be scoped by owner without joining the parent.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from question_randomizer.infrastructure.persistence.base import (
    BaseModel,
    BaseMutableModel,
)


class Randomization(BaseMutableModel):
    """Randomization session table."""

    __tablename__ = "randomizations"

    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    show_answer: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    current_question_id: Mapped[str | None] = mapped_column(
        String(100), nullable=True
    )


class SelectedCategory(BaseModel):
    """Category selected for a session."""

    __tablename__ = "selected_categories"

    randomization_id: Mapped[str] = mapped_column(
        ForeignKey("randomizations.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(String(128), nullable=False)
    category_id: Mapped[str] = mapped_column(String(100), nullable=False)
    category_name: Mapped[str] = mapped_column(String(200), nullable=False)

    __table_args__ = (
        Index("ix_selected_categories_owner", "randomization_id", "user_id"),
    )


class UsedQuestion(BaseModel):
    """Question already drawn in a session."""

    __tablename__ = "used_questions"

    randomization_id: Mapped[str] = mapped_column(
        ForeignKey("randomizations.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(String(128), nullable=False)
    question_id: Mapped[str] = mapped_column(String(100), nullable=False)
    category_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    category_name: Mapped[str | None] = mapped_column(String(200), nullable=True)

    __table_args__ = (Index("ix_used_questions_owner", "randomization_id", "user_id"),)


class PostponedQuestion(BaseModel):
    """Question postponed in a session."""

    __tablename__ = "postponed_questions"

    randomization_id: Mapped[str] = mapped_column(
        ForeignKey("randomizations.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(String(128), nullable=False)
    question_id: Mapped[str] = mapped_column(String(100), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    __table_args__ = (
        Index("ix_postponed_questions_owner", "randomization_id", "user_id"),
    )
