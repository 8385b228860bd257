"""Category and qualification result DTOs.

Mapping is written out field by field: a new entity attribute stays out
of responses until it is added here on purpose.
"""

from dataclasses import dataclass
from datetime import datetime

from question_randomizer.domain.entities.category import Category
from question_randomizer.domain.entities.qualification import Qualification


@dataclass(frozen=True, kw_only=True)
class CategoryResult:
    """Category as returned to callers.

    Attributes:
        id: Category identifier.
        name: Display name.
        description: Optional free text.
        is_active: False once soft-deleted.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: str
    name: str
    description: str | None
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryResult":
        return cls(
            id=category.id or "",
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class QualificationResult:
    """Qualification as returned to callers."""

    id: str
    name: str
    description: str | None
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, qualification: Qualification) -> "QualificationResult":
        return cls(
            id=qualification.id or "",
            name=qualification.name,
            description=qualification.description,
            is_active=qualification.is_active,
            created_at=qualification.created_at,
            updated_at=qualification.updated_at,
        )
