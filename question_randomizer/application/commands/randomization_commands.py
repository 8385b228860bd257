"""Randomization session commands.

Item commands (selected categories, used and postponed questions) all
name their parent session; handlers check that the session belongs to
the acting user before touching its lists.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CreateRandomization:
    """Start a new randomization session for the acting user."""


@dataclass(frozen=True, kw_only=True)
class UpdateRandomization:
    """Overwrite the state of an owned session.

    Attributes:
        randomization_id: Session to update.
        show_answer: Whether answers are revealed.
        status: Free-form status (required).
        current_question_id: Question on screen, if any.
    """

    randomization_id: str
    show_answer: bool
    status: str
    current_question_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class ClearCurrentQuestion:
    """Unset the current question of an owned session."""

    randomization_id: str


@dataclass(frozen=True, kw_only=True)
class DeleteRandomization:
    """Hard-delete an owned session."""

    randomization_id: str


@dataclass(frozen=True, kw_only=True)
class AddSelectedCategory:
    """Add a category to a session's selection."""

    randomization_id: str
    category_id: str
    category_name: str


@dataclass(frozen=True, kw_only=True)
class DeleteSelectedCategory:
    """Remove a category from a session's selection."""

    randomization_id: str
    category_id: str


@dataclass(frozen=True, kw_only=True)
class AddUsedQuestion:
    """Record a question as drawn in a session."""

    randomization_id: str
    question_id: str
    category_id: str | None = None
    category_name: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteUsedQuestion:
    """Forget that a question was drawn in a session."""

    randomization_id: str
    question_id: str


@dataclass(frozen=True, kw_only=True)
class UpdateUsedQuestionCategory:
    """Rename the category snapshot on a session's used questions."""

    randomization_id: str
    category_id: str
    category_name: str


@dataclass(frozen=True, kw_only=True)
class AddPostponedQuestion:
    """Postpone a question in a session."""

    randomization_id: str
    question_id: str


@dataclass(frozen=True, kw_only=True)
class DeletePostponedQuestion:
    """Drop a question from a session's postponed list."""

    randomization_id: str
    question_id: str


@dataclass(frozen=True, kw_only=True)
class UpdatePostponedQuestionTimestamp:
    """Move a postponed question to the end of the queue (timestamp = now)."""

    randomization_id: str
    question_id: str
