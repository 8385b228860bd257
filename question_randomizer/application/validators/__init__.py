"""Declarative command validators.

Validators are attached to commands through the CQRS registry and run by
the dispatcher before the handler is resolved.
"""

from question_randomizer.application.validators.category_validators import (
    CreateCategoriesBatchValidator,
    CreateCategoryValidator,
    CreateQualificationsBatchValidator,
    CreateQualificationValidator,
    UpdateCategoryValidator,
    UpdateQualificationValidator,
)
from question_randomizer.application.validators.conversation_validators import (
    AddMessageValidator,
    CreateConversationValidator,
)
from question_randomizer.application.validators.question_validators import (
    CreateQuestionsBatchValidator,
    CreateQuestionValidator,
    QuestionInputValidator,
    QuestionUpdateInputValidator,
    RemoveCategoryFromQuestionsValidator,
    RemoveQualificationFromQuestionsValidator,
    UpdateQuestionsBatchValidator,
    UpdateQuestionValidator,
)
from question_randomizer.application.validators.randomization_validators import (
    AddPostponedQuestionValidator,
    AddSelectedCategoryValidator,
    AddUsedQuestionValidator,
    UpdateRandomizationValidator,
    UpdateUsedQuestionCategoryValidator,
)
from question_randomizer.application.validators.rules import (
    Rule,
    RuleChain,
    Validator,
)

__all__ = [
    "AddMessageValidator",
    "AddPostponedQuestionValidator",
    "AddSelectedCategoryValidator",
    "AddUsedQuestionValidator",
    "CreateCategoriesBatchValidator",
    "CreateCategoryValidator",
    "CreateConversationValidator",
    "CreateQualificationsBatchValidator",
    "CreateQualificationValidator",
    "CreateQuestionsBatchValidator",
    "CreateQuestionValidator",
    "QuestionInputValidator",
    "QuestionUpdateInputValidator",
    "RemoveCategoryFromQuestionsValidator",
    "RemoveQualificationFromQuestionsValidator",
    "Rule",
    "RuleChain",
    "UpdateCategoryValidator",
    "UpdateQualificationValidator",
    "UpdateQuestionValidator",
    "UpdateQuestionsBatchValidator",
    "UpdateRandomizationValidator",
    "UpdateUsedQuestionCategoryValidator",
    "Validator",
]
