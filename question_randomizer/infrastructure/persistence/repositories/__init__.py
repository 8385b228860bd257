"""Repository implementations (SQLAlchemy adapters for domain protocols)."""

from question_randomizer.infrastructure.persistence.repositories.category_repository import (
    CategoryRepository,
)
from question_randomizer.infrastructure.persistence.repositories.conversation_repository import (
    ConversationRepository,
    MessageRepository,
)
from question_randomizer.infrastructure.persistence.repositories.qualification_repository import (
    QualificationRepository,
)
from question_randomizer.infrastructure.persistence.repositories.question_repository import (
    QuestionRepository,
)
from question_randomizer.infrastructure.persistence.repositories.randomization_repository import (
    PostponedQuestionRepository,
    RandomizationRepository,
    SelectedCategoryRepository,
    UsedQuestionRepository,
)

__all__ = [
    "CategoryRepository",
    "ConversationRepository",
    "MessageRepository",
    "PostponedQuestionRepository",
    "QualificationRepository",
    "QuestionRepository",
    "RandomizationRepository",
    "SelectedCategoryRepository",
    "UsedQuestionRepository",
]
