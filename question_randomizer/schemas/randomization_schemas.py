"""Randomization session request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from question_randomizer.application.dtos import (
    PostponedQuestionResult,
    RandomizationResult,
    SelectedCategoryResult,
    UsedQuestionResult,
)


# =============================================================================
# Request Schemas
# =============================================================================


class RandomizationUpdateRequest(BaseModel):
    """Overwrite the state of a session."""

    show_answer: bool = Field(..., description="Whether answers are revealed")
    status: str = Field(..., description="Free-form status", examples=["Ongoing"])
    current_question_id: str | None = Field(None, description="Question on screen")


class SelectedCategoryCreateRequest(BaseModel):
    """Add a category to the session's selection."""

    category_id: str = Field(..., description="Category reference")
    category_name: str = Field(..., description="Category name snapshot (≤200 chars)")


class UsedQuestionCreateRequest(BaseModel):
    """Record a question as drawn."""

    question_id: str = Field(..., description="Question reference")
    category_id: str | None = Field(None, description="Category of the question")
    category_name: str | None = Field(None, description="Category name snapshot")


class UsedQuestionCategoryUpdateRequest(BaseModel):
    """Rename the category snapshot on the session's used questions."""

    category_id: str = Field(..., description="Category to rename")
    category_name: str = Field(..., description="New category name")


class PostponedQuestionCreateRequest(BaseModel):
    """Postpone a question."""

    question_id: str = Field(..., description="Question reference")


# =============================================================================
# Response Schemas
# =============================================================================


class RandomizationResponse(BaseModel):
    """Randomization session response."""

    id: str = Field(..., description="Session identifier")
    is_active: bool = Field(..., description="Whether this is a current session")
    show_answer: bool = Field(..., description="Whether answers are revealed")
    status: str = Field(..., description="Free-form status")
    current_question_id: str | None = Field(None, description="Question on screen")
    created_at: datetime | None = Field(None, description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: RandomizationResult) -> "RandomizationResponse":
        return cls(
            id=dto.id,
            is_active=dto.is_active,
            show_answer=dto.show_answer,
            status=dto.status,
            current_question_id=dto.current_question_id,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class SelectedCategoryResponse(BaseModel):
    """Selected category response."""

    id: str = Field(..., description="Record identifier")
    randomization_id: str = Field(..., description="Parent session")
    category_id: str = Field(..., description="Category reference")
    category_name: str = Field(..., description="Category name snapshot")
    created_at: datetime | None = Field(None, description="Creation timestamp")

    @classmethod
    def from_dto(cls, dto: SelectedCategoryResult) -> "SelectedCategoryResponse":
        return cls(
            id=dto.id,
            randomization_id=dto.randomization_id,
            category_id=dto.category_id,
            category_name=dto.category_name,
            created_at=dto.created_at,
        )


class SelectedCategoryListResponse(BaseModel):
    selected_categories: list[SelectedCategoryResponse]
    total_count: int

    @classmethod
    def from_dto(
        cls, dtos: list[SelectedCategoryResult]
    ) -> "SelectedCategoryListResponse":
        return cls(
            selected_categories=[SelectedCategoryResponse.from_dto(dto) for dto in dtos],
            total_count=len(dtos),
        )


class UsedQuestionResponse(BaseModel):
    """Used question response."""

    id: str = Field(..., description="Record identifier")
    randomization_id: str = Field(..., description="Parent session")
    question_id: str = Field(..., description="Question reference")
    category_id: str | None = Field(None, description="Category of the question")
    category_name: str | None = Field(None, description="Category name snapshot")
    created_at: datetime | None = Field(None, description="Creation timestamp")

    @classmethod
    def from_dto(cls, dto: UsedQuestionResult) -> "UsedQuestionResponse":
        return cls(
            id=dto.id,
            randomization_id=dto.randomization_id,
            question_id=dto.question_id,
            category_id=dto.category_id,
            category_name=dto.category_name,
            created_at=dto.created_at,
        )


class UsedQuestionListResponse(BaseModel):
    used_questions: list[UsedQuestionResponse]
    total_count: int

    @classmethod
    def from_dto(cls, dtos: list[UsedQuestionResult]) -> "UsedQuestionListResponse":
        return cls(
            used_questions=[UsedQuestionResponse.from_dto(dto) for dto in dtos],
            total_count=len(dtos),
        )


class UsedQuestionsUpdatedResponse(BaseModel):
    """Result of renaming a category snapshot."""

    updated_count: int = Field(..., description="Number of used questions changed")


class PostponedQuestionResponse(BaseModel):
    """Postponed question response."""

    id: str = Field(..., description="Record identifier")
    randomization_id: str = Field(..., description="Parent session")
    question_id: str = Field(..., description="Question reference")
    timestamp: datetime = Field(..., description="Position in the postponed queue")

    @classmethod
    def from_dto(cls, dto: PostponedQuestionResult) -> "PostponedQuestionResponse":
        return cls(
            id=dto.id,
            randomization_id=dto.randomization_id,
            question_id=dto.question_id,
            timestamp=dto.timestamp,
        )


class PostponedQuestionListResponse(BaseModel):
    postponed_questions: list[PostponedQuestionResponse]
    total_count: int

    @classmethod
    def from_dto(
        cls, dtos: list[PostponedQuestionResult]
    ) -> "PostponedQuestionListResponse":
        return cls(
            postponed_questions=[
                PostponedQuestionResponse.from_dto(dto) for dto in dtos
            ],
            total_count=len(dtos),
        )
