"""Question database model.

Architecture:
    - category_id / qualification_id are plain columns, not foreign keys:
      soft-deleted categories keep their rows and clean-up is event driven
    - Name snapshots stored next to the IDs for read convenience
    - Tags stored as JSON (JSONB on PostgreSQL)
"""

from sqlalchemy import JSON, Boolean, Index, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from question_randomizer.infrastructure.persistence.base import BaseMutableModel


class Question(BaseMutableModel):
    """Question table.

    Indexes:
        - ix_questions_user_category: Per-category listing and clean-up
        - ix_questions_user_qualification: Qualification clean-up
    """

    __tablename__ = "questions"

    question_text: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    answer_pl: Mapped[str] = mapped_column(Text, nullable=False)
    category_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    category_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    qualification_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    qualification_name: Mapped[str | None] = mapped_column(
        String(200), nullable=True
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    tags: Mapped[list[str] | None] = mapped_column(
        JSON().with_variant(JSONB, "postgresql"),
        nullable=True,
    )

    __table_args__ = (
        Index("ix_questions_user_category", "user_id", "category_id"),
        Index("ix_questions_user_qualification", "user_id", "qualification_id"),
    )
