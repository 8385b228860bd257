"""Category and qualification request and response schemas.

Both resources share the same shapes, so each request model is used by
both routers while responses stay resource-specific.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from question_randomizer.application.dtos import CategoryResult, QualificationResult


# =============================================================================
# Request Schemas
# =============================================================================


class NamedItemCreateRequest(BaseModel):
    """Create one category or qualification."""

    name: str = Field(..., description="Display name", examples=["Python"])
    description: str | None = Field(None, description="Optional free text")


class NamedItemBatchCreateRequest(BaseModel):
    """Create several categories or qualifications in one transaction."""

    names: list[str] = Field(
        ..., description="Names to create (1 to 100)", examples=[["Python", "SQL"]]
    )


class NamedItemUpdateRequest(BaseModel):
    """Overwrite a category or qualification."""

    name: str = Field(..., description="Display name")
    description: str | None = Field(None, description="Optional free text")
    is_active: bool = Field(True, description="False marks the record deleted")


# =============================================================================
# Response Schemas
# =============================================================================


class CategoryResponse(BaseModel):
    """Single category response."""

    id: str = Field(..., description="Category identifier")
    name: str = Field(..., description="Display name")
    description: str | None = Field(None, description="Optional free text")
    is_active: bool = Field(..., description="False once soft-deleted")
    created_at: datetime | None = Field(None, description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: CategoryResult) -> "CategoryResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            is_active=dto.is_active,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class CategoryListResponse(BaseModel):
    """Category list response."""

    categories: list[CategoryResponse] = Field(..., description="Categories")
    total_count: int = Field(..., description="Number of categories returned")

    @classmethod
    def from_dto(cls, dtos: list[CategoryResult]) -> "CategoryListResponse":
        return cls(
            categories=[CategoryResponse.from_dto(dto) for dto in dtos],
            total_count=len(dtos),
        )


class QualificationResponse(BaseModel):
    """Single qualification response."""

    id: str = Field(..., description="Qualification identifier")
    name: str = Field(..., description="Display name")
    description: str | None = Field(None, description="Optional free text")
    is_active: bool = Field(..., description="False once soft-deleted")
    created_at: datetime | None = Field(None, description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: QualificationResult) -> "QualificationResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            is_active=dto.is_active,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class QualificationListResponse(BaseModel):
    """Qualification list response."""

    qualifications: list[QualificationResponse] = Field(
        ..., description="Qualifications"
    )
    total_count: int = Field(..., description="Number of qualifications returned")

    @classmethod
    def from_dto(cls, dtos: list[QualificationResult]) -> "QualificationListResponse":
        return cls(
            qualifications=[QualificationResponse.from_dto(dto) for dto in dtos],
            total_count=len(dtos),
        )
