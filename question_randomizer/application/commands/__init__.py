"""Commands (write-side requests).

``__all__`` lists every command the application accepts. The dispatcher
refuses to start if one of them has no registered handler.
"""

from question_randomizer.application.commands.category_commands import (
    CreateCategoriesBatch,
    CreateCategory,
    DeleteCategory,
    UpdateCategory,
)
from question_randomizer.application.commands.conversation_commands import (
    AddMessage,
    CreateConversation,
    DeleteConversation,
    UpdateConversationTimestamp,
)
from question_randomizer.application.commands.qualification_commands import (
    CreateQualification,
    CreateQualificationsBatch,
    DeleteQualification,
    UpdateQualification,
)
from question_randomizer.application.commands.question_commands import (
    CreateQuestion,
    CreateQuestionsBatch,
    DeleteQuestion,
    RemoveCategoryFromQuestions,
    RemoveQualificationFromQuestions,
    UpdateQuestion,
    UpdateQuestionsBatch,
)
from question_randomizer.application.commands.randomization_commands import (
    AddPostponedQuestion,
    AddSelectedCategory,
    AddUsedQuestion,
    ClearCurrentQuestion,
    CreateRandomization,
    DeletePostponedQuestion,
    DeleteRandomization,
    DeleteSelectedCategory,
    DeleteUsedQuestion,
    UpdatePostponedQuestionTimestamp,
    UpdateRandomization,
    UpdateUsedQuestionCategory,
)

__all__ = [
    "AddMessage",
    "AddPostponedQuestion",
    "AddSelectedCategory",
    "AddUsedQuestion",
    "ClearCurrentQuestion",
    "CreateCategoriesBatch",
    "CreateCategory",
    "CreateConversation",
    "CreateQualification",
    "CreateQualificationsBatch",
    "CreateQuestion",
    "CreateQuestionsBatch",
    "CreateRandomization",
    "DeleteCategory",
    "DeleteConversation",
    "DeletePostponedQuestion",
    "DeleteQualification",
    "DeleteQuestion",
    "DeleteRandomization",
    "DeleteSelectedCategory",
    "DeleteUsedQuestion",
    "RemoveCategoryFromQuestions",
    "RemoveQualificationFromQuestions",
    "UpdateCategory",
    "UpdateConversationTimestamp",
    "UpdatePostponedQuestionTimestamp",
    "UpdateQualification",
    "UpdateQuestion",
    "UpdateQuestionsBatch",
    "UpdateRandomization",
    "UpdateUsedQuestionCategory",
]
