"""Question commands.

Batch commands carry ``QuestionInput``/``QuestionUpdateInput`` items so the
same field rules validate single and batch writes.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class QuestionInput:
    """Fields supplied when writing a question.

    Attributes:
        question_text: Question (required, ≤1000 chars).
        answer: Answer (required, ≤5000 chars).
        answer_pl: Polish answer (required, ≤5000 chars).
        category_id: Optional category reference.
        qualification_id: Optional qualification reference.
        tags: Optional labels (≤20).
    """

    question_text: str
    answer: str
    answer_pl: str
    category_id: str | None = None
    qualification_id: str | None = None
    tags: list[str] | None = None


@dataclass(frozen=True, kw_only=True)
class QuestionUpdateInput(QuestionInput):
    """Question fields plus the target ID, used by batch updates."""

    question_id: str
    is_active: bool = True


@dataclass(frozen=True, kw_only=True)
class CreateQuestion(QuestionInput):
    """Create one question."""


@dataclass(frozen=True, kw_only=True)
class CreateQuestionsBatch:
    """Create up to 100 questions atomically."""

    questions: list[QuestionInput]


@dataclass(frozen=True, kw_only=True)
class UpdateQuestion(QuestionUpdateInput):
    """Overwrite one owned question."""


@dataclass(frozen=True, kw_only=True)
class UpdateQuestionsBatch:
    """Overwrite up to 100 owned questions atomically."""

    questions: list[QuestionUpdateInput]


@dataclass(frozen=True, kw_only=True)
class DeleteQuestion:
    """Soft-delete one owned question."""

    question_id: str


@dataclass(frozen=True, kw_only=True)
class RemoveCategoryFromQuestions:
    """Clear ``category_id`` on every question of the user that references it."""

    category_id: str


@dataclass(frozen=True, kw_only=True)
class RemoveQualificationFromQuestions:
    """Clear ``qualification_id`` on every question of the user that references it."""

    qualification_id: str
