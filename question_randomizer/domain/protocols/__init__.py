"""Domain protocols (ports).

Usage:
    from question_randomizer.domain.protocols import CategoryRepository
"""

from question_randomizer.domain.protocols.category_repository import (
    CategoryRepository,
)
from question_randomizer.domain.protocols.conversation_repository import (
    ConversationRepository,
    MessageRepository,
)
from question_randomizer.domain.protocols.current_user_protocol import (
    CurrentUserProtocol,
)
from question_randomizer.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from question_randomizer.domain.protocols.logger_protocol import LoggerProtocol
from question_randomizer.domain.protocols.qualification_repository import (
    QualificationRepository,
)
from question_randomizer.domain.protocols.question_repository import (
    QuestionRepository,
)
from question_randomizer.domain.protocols.randomization_repository import (
    PostponedQuestionRepository,
    RandomizationRepository,
    SelectedCategoryRepository,
    UsedQuestionRepository,
)

__all__ = [
    "CategoryRepository",
    "ConversationRepository",
    "CurrentUserProtocol",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "MessageRepository",
    "PostponedQuestionRepository",
    "QualificationRepository",
    "QuestionRepository",
    "RandomizationRepository",
    "SelectedCategoryRepository",
    "UsedQuestionRepository",
]
