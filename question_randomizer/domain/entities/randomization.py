"""Randomization session and its bookkeeping records.

A randomization is a review run. The caller decides which question to show
next; this model only records state: the selected categories, the questions
already used, and the questions postponed for later.

The three subordinate records are keyed by the parent ``randomization_id``
and by ``user_id`` so ownership can be checked without a join.
"""

from dataclasses import dataclass
from datetime import datetime

# Status is a free string. "Ongoing" is the only value the service writes.
STATUS_ONGOING = "Ongoing"


@dataclass(kw_only=True)
class Randomization:
    """Randomization session.

    Attributes:
        id: Store-assigned identifier (None until persisted).
        user_id: Owning user.
        is_active: The first active session is the user's current one.
        show_answer: Whether the client reveals answers.
        status: Free-form status string.
        current_question_id: Question currently on screen, if any.
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).
    """

    id: str | None = None
    user_id: str
    is_active: bool = True
    show_answer: bool = False
    status: str = STATUS_ONGOING
    current_question_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(kw_only=True)
class SelectedCategory:
    """Category chosen for a randomization session."""

    id: str | None = None
    randomization_id: str
    user_id: str
    category_id: str
    category_name: str
    created_at: datetime | None = None


@dataclass(kw_only=True)
class UsedQuestion:
    """Question already drawn in a randomization session."""

    id: str | None = None
    randomization_id: str
    user_id: str
    question_id: str
    category_id: str | None = None
    category_name: str | None = None
    created_at: datetime | None = None


@dataclass(kw_only=True)
class PostponedQuestion:
    """Question pushed back for later in a randomization session."""

    id: str | None = None
    randomization_id: str
    user_id: str
    question_id: str
    timestamp: datetime
