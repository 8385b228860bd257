"""Category database model.

Architecture:
    - Owned by a user (user_id, indexed for per-user listing)
    - Soft delete via is_active
"""

from sqlalchemy import Boolean, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from question_randomizer.infrastructure.persistence.base import BaseMutableModel


class Category(BaseMutableModel):
    """Category table.

    Fields:
        id, created_at, updated_at: From BaseMutableModel
        name: Display name
        description: Optional free text
        is_active: Soft-delete flag
        user_id: Owning user
    """

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)

    __table_args__ = (Index("ix_categories_user_active", "user_id", "is_active"),)
