"""Result DTOs returned by handlers."""

from question_randomizer.application.dtos.category_dtos import (
    CategoryResult,
    QualificationResult,
)
from question_randomizer.application.dtos.conversation_dtos import (
    ConversationResult,
    MessageResult,
)
from question_randomizer.application.dtos.question_dtos import QuestionResult
from question_randomizer.application.dtos.randomization_dtos import (
    PostponedQuestionResult,
    RandomizationResult,
    SelectedCategoryResult,
    UsedQuestionResult,
)

__all__ = [
    "CategoryResult",
    "ConversationResult",
    "MessageResult",
    "PostponedQuestionResult",
    "QualificationResult",
    "QuestionResult",
    "RandomizationResult",
    "SelectedCategoryResult",
    "UsedQuestionResult",
]
