"""Question queries."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetQuestions:
    """List the acting user's questions.

    Attributes:
        category_id: Restrict to one category when set.
        is_active: Restrict to active (True) or deleted (False) questions.
    """

    category_id: str | None = None
    is_active: bool | None = None


@dataclass(frozen=True, kw_only=True)
class GetQuestionById:
    """Fetch one owned question."""

    question_id: str
