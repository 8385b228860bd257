"""Database models.

Importing this package registers every table on ``BaseModel.metadata``.
"""

from question_randomizer.infrastructure.persistence.models.category import Category
from question_randomizer.infrastructure.persistence.models.conversation import (
    Conversation,
    Message,
)
from question_randomizer.infrastructure.persistence.models.qualification import (
    Qualification,
)
from question_randomizer.infrastructure.persistence.models.question import Question
from question_randomizer.infrastructure.persistence.models.randomization import (
    PostponedQuestion,
    Randomization,
    SelectedCategory,
    UsedQuestion,
)

__all__ = [
    "Category",
    "Conversation",
    "Message",
    "PostponedQuestion",
    "Qualification",
    "Question",
    "Randomization",
    "SelectedCategory",
    "UsedQuestion",
]
