"""Question domain entity.

``category_name`` and ``qualification_name`` are snapshots copied when the
question is written. Nothing refreshes them afterwards: renaming a category
leaves old text in place, and deleting one clears only ``category_id``.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(kw_only=True)
class Question:
    """Quiz question with English and Polish answers.

    Attributes:
        id: Store-assigned identifier (None until persisted).
        question_text: The question itself.
        answer: Answer text.
        answer_pl: Polish answer text.
        category_id: Referenced category, if any.
        category_name: Category name snapshot taken at write time.
        qualification_id: Referenced qualification, if any.
        qualification_name: Qualification name snapshot taken at write time.
        is_active: False once soft-deleted.
        user_id: Owning user.
        tags: Free-form labels (at most 20).
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).
    """

    id: str | None = None
    question_text: str
    answer: str
    answer_pl: str
    category_id: str | None = None
    category_name: str | None = None
    qualification_id: str | None = None
    qualification_name: str | None = None
    is_active: bool = True
    user_id: str
    tags: list[str] | None = field(default=None)
    created_at: datetime | None = None
    updated_at: datetime | None = None
