"""Qualification database model."""

from sqlalchemy import Boolean, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from question_randomizer.infrastructure.persistence.base import BaseMutableModel


class Qualification(BaseMutableModel):
    """Qualification table (same shape as categories)."""

    __tablename__ = "qualifications"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)

    __table_args__ = (
        Index("ix_qualifications_user_active", "user_id", "is_active"),
    )
