"""Question request and response schemas.

Reference:
    - question_randomizer/application/commands/question_commands.py
"""

from datetime import datetime

from pydantic import BaseModel, Field

from question_randomizer.application.commands.question_commands import (
    QuestionInput,
    QuestionUpdateInput,
)
from question_randomizer.application.dtos import QuestionResult


# =============================================================================
# Request Schemas
# =============================================================================


class QuestionCreateRequest(BaseModel):
    """Fields supplied when creating a question.

    Attributes:
        question_text: Question (≤1000 chars).
        answer: Answer (≤5000 chars).
        answer_pl: Polish answer (≤5000 chars).
        category_id: Optional category reference.
        qualification_id: Optional qualification reference.
        tags: Optional labels (≤20).
    """

    question_text: str = Field(..., description="Question text")
    answer: str = Field(..., description="Answer")
    answer_pl: str = Field(..., description="Polish answer")
    category_id: str | None = Field(None, description="Category reference")
    qualification_id: str | None = Field(None, description="Qualification reference")
    tags: list[str] | None = Field(None, description="Labels")

    def to_input(self) -> QuestionInput:
        return QuestionInput(
            question_text=self.question_text,
            answer=self.answer,
            answer_pl=self.answer_pl,
            category_id=self.category_id,
            qualification_id=self.qualification_id,
            tags=self.tags,
        )


class QuestionUpdateRequest(QuestionCreateRequest):
    """Fields supplied when overwriting a question."""

    is_active: bool = Field(True, description="False marks the question deleted")


class QuestionBatchUpdateItem(QuestionUpdateRequest):
    """One element of a batch update; carries its own target ID."""

    id: str = Field(..., description="Question to overwrite")

    def to_update_input(self) -> QuestionUpdateInput:
        return QuestionUpdateInput(
            question_id=self.id,
            question_text=self.question_text,
            answer=self.answer,
            answer_pl=self.answer_pl,
            category_id=self.category_id,
            qualification_id=self.qualification_id,
            tags=self.tags,
            is_active=self.is_active,
        )


class QuestionBatchCreateRequest(BaseModel):
    """Create several questions in one transaction."""

    questions: list[QuestionCreateRequest] = Field(
        ..., description="Questions to create (1 to 100)"
    )


class QuestionBatchUpdateRequest(BaseModel):
    """Overwrite several questions in one transaction."""

    questions: list[QuestionBatchUpdateItem] = Field(
        ..., description="Questions to overwrite (1 to 100)"
    )


# =============================================================================
# Response Schemas
# =============================================================================


class QuestionResponse(BaseModel):
    """Single question response.

    ``category_name``/``qualification_name`` are snapshots taken when the
    question was written and may be stale.
    """

    id: str = Field(..., description="Question identifier")
    question_text: str = Field(..., description="Question text")
    answer: str = Field(..., description="Answer")
    answer_pl: str = Field(..., description="Polish answer")
    category_id: str | None = Field(None, description="Category reference")
    category_name: str | None = Field(None, description="Category name snapshot")
    qualification_id: str | None = Field(None, description="Qualification reference")
    qualification_name: str | None = Field(
        None, description="Qualification name snapshot"
    )
    is_active: bool = Field(..., description="False once soft-deleted")
    tags: list[str] | None = Field(None, description="Labels")
    created_at: datetime | None = Field(None, description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: QuestionResult) -> "QuestionResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            question_text=dto.question_text,
            answer=dto.answer,
            answer_pl=dto.answer_pl,
            category_id=dto.category_id,
            category_name=dto.category_name,
            qualification_id=dto.qualification_id,
            qualification_name=dto.qualification_name,
            is_active=dto.is_active,
            tags=dto.tags,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class QuestionListResponse(BaseModel):
    """Question list response."""

    questions: list[QuestionResponse] = Field(..., description="Questions")
    total_count: int = Field(..., description="Number of questions returned")

    @classmethod
    def from_dto(cls, dtos: list[QuestionResult]) -> "QuestionListResponse":
        return cls(
            questions=[QuestionResponse.from_dto(dto) for dto in dtos],
            total_count=len(dtos),
        )


class QuestionReferencesClearedResponse(BaseModel):
    """Result of clearing a category/qualification reference."""

    cleared_count: int = Field(..., description="Number of questions changed")
