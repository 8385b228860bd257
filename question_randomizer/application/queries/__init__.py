"""Queries (read-side requests).

``__all__`` lists every query the application accepts.
"""

from question_randomizer.application.queries.category_queries import (
    GetCategories,
    GetCategoryById,
    GetQualificationById,
    GetQualifications,
)
from question_randomizer.application.queries.conversation_queries import (
    GetConversationById,
    GetConversations,
    GetMessages,
)
from question_randomizer.application.queries.question_queries import (
    GetQuestionById,
    GetQuestions,
)
from question_randomizer.application.queries.randomization_queries import (
    GetPostponedQuestions,
    GetRandomization,
    GetSelectedCategories,
    GetUsedQuestions,
)

__all__ = [
    "GetCategories",
    "GetCategoryById",
    "GetConversationById",
    "GetConversations",
    "GetMessages",
    "GetPostponedQuestions",
    "GetQualificationById",
    "GetQualifications",
    "GetQuestionById",
    "GetQuestions",
    "GetRandomization",
    "GetSelectedCategories",
    "GetUsedQuestions",
]
