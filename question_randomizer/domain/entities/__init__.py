"""Domain entities.

Plain dataclasses with no infrastructure dependencies. Persistence models
live in ``infrastructure.persistence.models`` and are mapped by repositories.
"""

from question_randomizer.domain.entities.category import Category
from question_randomizer.domain.entities.conversation import (
    Conversation,
    Message,
    MessageRole,
)
from question_randomizer.domain.entities.qualification import Qualification
from question_randomizer.domain.entities.question import Question
from question_randomizer.domain.entities.randomization import (
    STATUS_ONGOING,
    PostponedQuestion,
    Randomization,
    SelectedCategory,
    UsedQuestion,
)

__all__ = [
    "STATUS_ONGOING",
    "Category",
    "Conversation",
    "Message",
    "MessageRole",
    "PostponedQuestion",
    "Qualification",
    "Question",
    "Randomization",
    "SelectedCategory",
    "UsedQuestion",
]
