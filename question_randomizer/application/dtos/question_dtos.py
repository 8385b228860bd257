"""Question result DTO."""

from dataclasses import dataclass
from datetime import datetime

from question_randomizer.domain.entities.question import Question


@dataclass(frozen=True, kw_only=True)
class QuestionResult:
    """Question as returned to callers.

    Attributes:
        id: Question identifier.
        question_text: Question.
        answer: Answer.
        answer_pl: Polish answer.
        category_id: Referenced category (None after the category is deleted).
        category_name: Name snapshot, possibly stale.
        qualification_id: Referenced qualification.
        qualification_name: Name snapshot, possibly stale.
        is_active: False once soft-deleted.
        tags: Labels.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: str
    question_text: str
    answer: str
    answer_pl: str
    category_id: str | None
    category_name: str | None
    qualification_id: str | None
    qualification_name: str | None
    is_active: bool
    tags: list[str] | None
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, question: Question) -> "QuestionResult":
        return cls(
            id=question.id or "",
            question_text=question.question_text,
            answer=question.answer,
            answer_pl=question.answer_pl,
            category_id=question.category_id,
            category_name=question.category_name,
            qualification_id=question.qualification_id,
            qualification_name=question.qualification_name,
            is_active=question.is_active,
            tags=list(question.tags) if question.tags is not None else None,
            created_at=question.created_at,
            updated_at=question.updated_at,
        )
