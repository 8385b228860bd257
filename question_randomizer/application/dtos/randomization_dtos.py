"""Randomization session result DTOs."""

from dataclasses import dataclass
from datetime import datetime

from question_randomizer.domain.entities.randomization import (
    PostponedQuestion,
    Randomization,
    SelectedCategory,
    UsedQuestion,
)


@dataclass(frozen=True, kw_only=True)
class RandomizationResult:
    """Randomization session as returned to callers.

    Attributes:
        id: Session identifier.
        is_active: Whether this can be the user's current session.
        show_answer: Whether answers are revealed.
        status: Free-form status.
        current_question_id: Question on screen, if any.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: str
    is_active: bool
    show_answer: bool
    status: str
    current_question_id: str | None
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, randomization: Randomization) -> "RandomizationResult":
        return cls(
            id=randomization.id or "",
            is_active=randomization.is_active,
            show_answer=randomization.show_answer,
            status=randomization.status,
            current_question_id=randomization.current_question_id,
            created_at=randomization.created_at,
            updated_at=randomization.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class SelectedCategoryResult:
    """Selected category of a session."""

    id: str
    randomization_id: str
    category_id: str
    category_name: str
    created_at: datetime | None

    @classmethod
    def from_entity(cls, item: SelectedCategory) -> "SelectedCategoryResult":
        return cls(
            id=item.id or "",
            randomization_id=item.randomization_id,
            category_id=item.category_id,
            category_name=item.category_name,
            created_at=item.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class UsedQuestionResult:
    """Used question of a session."""

    id: str
    randomization_id: str
    question_id: str
    category_id: str | None
    category_name: str | None
    created_at: datetime | None

    @classmethod
    def from_entity(cls, item: UsedQuestion) -> "UsedQuestionResult":
        return cls(
            id=item.id or "",
            randomization_id=item.randomization_id,
            question_id=item.question_id,
            category_id=item.category_id,
            category_name=item.category_name,
            created_at=item.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class PostponedQuestionResult:
    """Postponed question of a session."""

    id: str
    randomization_id: str
    question_id: str
    timestamp: datetime

    @classmethod
    def from_entity(cls, item: PostponedQuestion) -> "PostponedQuestionResult":
        return cls(
            id=item.id or "",
            randomization_id=item.randomization_id,
            question_id=item.question_id,
            timestamp=item.timestamp,
        )
