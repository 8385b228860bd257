"""CQRS Registry - Single Source of Truth for Commands and Queries.

Every command and query is mapped here to exactly one handler class and,
for writes, the validator that guards it. Nothing is discovered by
reflection: the dispatcher is built from these two lists and refuses to
start when a declared request has no entry or more than one.

Adding new commands/queries:
1. Define the dataclass in the matching *_commands.py/*_queries.py file
   and list it in that package's ``__all__``
2. Create the handler class in handlers/
3. Add an entry to COMMAND_REGISTRY or QUERY_REGISTRY below
4. Run tests - they'll tell you what's missing
"""

from question_randomizer.application.commands import (
    AddMessage,
    AddPostponedQuestion,
    AddSelectedCategory,
    AddUsedQuestion,
    ClearCurrentQuestion,
    CreateCategoriesBatch,
    CreateCategory,
    CreateConversation,
    CreateQualification,
    CreateQualificationsBatch,
    CreateQuestion,
    CreateQuestionsBatch,
    CreateRandomization,
    DeleteCategory,
    DeleteConversation,
    DeletePostponedQuestion,
    DeleteQualification,
    DeleteQuestion,
    DeleteRandomization,
    DeleteSelectedCategory,
    DeleteUsedQuestion,
    RemoveCategoryFromQuestions,
    RemoveQualificationFromQuestions,
    UpdateCategory,
    UpdateConversationTimestamp,
    UpdatePostponedQuestionTimestamp,
    UpdateQualification,
    UpdateQuestion,
    UpdateQuestionsBatch,
    UpdateRandomization,
    UpdateUsedQuestionCategory,
)
from question_randomizer.application.commands.handlers.category_handlers import (
    CreateCategoriesBatchHandler,
    CreateCategoryHandler,
    DeleteCategoryHandler,
    UpdateCategoryHandler,
)
from question_randomizer.application.commands.handlers.conversation_handlers import (
    AddMessageHandler,
    CreateConversationHandler,
    DeleteConversationHandler,
    UpdateConversationTimestampHandler,
)
from question_randomizer.application.commands.handlers.qualification_handlers import (
    CreateQualificationHandler,
    CreateQualificationsBatchHandler,
    DeleteQualificationHandler,
    UpdateQualificationHandler,
)
from question_randomizer.application.commands.handlers.question_handlers import (
    CreateQuestionHandler,
    CreateQuestionsBatchHandler,
    DeleteQuestionHandler,
    RemoveCategoryFromQuestionsHandler,
    RemoveQualificationFromQuestionsHandler,
    UpdateQuestionHandler,
    UpdateQuestionsBatchHandler,
)
from question_randomizer.application.commands.handlers.randomization_handlers import (
    AddPostponedQuestionHandler,
    AddSelectedCategoryHandler,
    AddUsedQuestionHandler,
    ClearCurrentQuestionHandler,
    CreateRandomizationHandler,
    DeletePostponedQuestionHandler,
    DeleteRandomizationHandler,
    DeleteSelectedCategoryHandler,
    DeleteUsedQuestionHandler,
    UpdatePostponedQuestionTimestampHandler,
    UpdateRandomizationHandler,
    UpdateUsedQuestionCategoryHandler,
)
from question_randomizer.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)
from question_randomizer.application.dtos import (
    CategoryResult,
    ConversationResult,
    MessageResult,
    PostponedQuestionResult,
    QualificationResult,
    QuestionResult,
    RandomizationResult,
    SelectedCategoryResult,
    UsedQuestionResult,
)
from question_randomizer.application.queries import (
    GetCategories,
    GetCategoryById,
    GetConversationById,
    GetConversations,
    GetMessages,
    GetPostponedQuestions,
    GetQualificationById,
    GetQualifications,
    GetQuestionById,
    GetQuestions,
    GetRandomization,
    GetSelectedCategories,
    GetUsedQuestions,
)
from question_randomizer.application.queries.handlers.category_handlers import (
    GetCategoriesHandler,
    GetCategoryByIdHandler,
    GetQualificationByIdHandler,
    GetQualificationsHandler,
)
from question_randomizer.application.queries.handlers.conversation_handlers import (
    GetConversationByIdHandler,
    GetConversationsHandler,
    GetMessagesHandler,
)
from question_randomizer.application.queries.handlers.question_handlers import (
    GetQuestionByIdHandler,
    GetQuestionsHandler,
)
from question_randomizer.application.queries.handlers.randomization_handlers import (
    GetPostponedQuestionsHandler,
    GetRandomizationHandler,
    GetSelectedCategoriesHandler,
    GetUsedQuestionsHandler,
)
from question_randomizer.application.validators import (
    AddMessageValidator,
    AddPostponedQuestionValidator,
    AddSelectedCategoryValidator,
    AddUsedQuestionValidator,
    CreateCategoriesBatchValidator,
    CreateCategoryValidator,
    CreateConversationValidator,
    CreateQualificationsBatchValidator,
    CreateQualificationValidator,
    CreateQuestionsBatchValidator,
    CreateQuestionValidator,
    RemoveCategoryFromQuestionsValidator,
    RemoveQualificationFromQuestionsValidator,
    UpdateCategoryValidator,
    UpdateQualificationValidator,
    UpdateQuestionsBatchValidator,
    UpdateQuestionValidator,
    UpdateRandomizationValidator,
    UpdateUsedQuestionCategoryValidator,
)

# ═══════════════════════════════════════════════════════════════════════════
# COMMAND REGISTRY (31 commands)
# ═══════════════════════════════════════════════════════════════════════════

COMMAND_REGISTRY: list[CommandMetadata] = [
    # ═══════════════════════════════════════════════════════════════════════
    # Category Commands (4 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=CreateCategory,
        handler_class=CreateCategoryHandler,
        category=CQRSCategory.CATEGORY,
        validator_class=CreateCategoryValidator,
        has_result_dto=True,
        result_dto_class=CategoryResult,
        description="Create a category",
    ),
    CommandMetadata(
        command_class=CreateCategoriesBatch,
        handler_class=CreateCategoriesBatchHandler,
        category=CQRSCategory.CATEGORY,
        validator_class=CreateCategoriesBatchValidator,
        has_result_dto=True,
        result_dto_class=CategoryResult,  # list of
        description="Create up to 100 categories in one commit",
    ),
    CommandMetadata(
        command_class=UpdateCategory,
        handler_class=UpdateCategoryHandler,
        category=CQRSCategory.CATEGORY,
        validator_class=UpdateCategoryValidator,
        has_result_dto=True,
        result_dto_class=CategoryResult,
        description="Overwrite an owned category",
    ),
    CommandMetadata(
        command_class=DeleteCategory,
        handler_class=DeleteCategoryHandler,
        category=CQRSCategory.CATEGORY,
        emits_events=True,
        description="Soft-delete a category and clear question references",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Qualification Commands (4 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=CreateQualification,
        handler_class=CreateQualificationHandler,
        category=CQRSCategory.QUALIFICATION,
        validator_class=CreateQualificationValidator,
        has_result_dto=True,
        result_dto_class=QualificationResult,
        description="Create a qualification",
    ),
    CommandMetadata(
        command_class=CreateQualificationsBatch,
        handler_class=CreateQualificationsBatchHandler,
        category=CQRSCategory.QUALIFICATION,
        validator_class=CreateQualificationsBatchValidator,
        has_result_dto=True,
        result_dto_class=QualificationResult,  # list of
        description="Create up to 100 qualifications in one commit",
    ),
    CommandMetadata(
        command_class=UpdateQualification,
        handler_class=UpdateQualificationHandler,
        category=CQRSCategory.QUALIFICATION,
        validator_class=UpdateQualificationValidator,
        has_result_dto=True,
        result_dto_class=QualificationResult,
        description="Overwrite an owned qualification",
    ),
    CommandMetadata(
        command_class=DeleteQualification,
        handler_class=DeleteQualificationHandler,
        category=CQRSCategory.QUALIFICATION,
        emits_events=True,
        description="Soft-delete a qualification and clear question references",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Question Commands (7 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=CreateQuestion,
        handler_class=CreateQuestionHandler,
        category=CQRSCategory.QUESTION,
        validator_class=CreateQuestionValidator,
        has_result_dto=True,
        result_dto_class=QuestionResult,
        description="Create a question with category/qualification name snapshots",
    ),
    CommandMetadata(
        command_class=CreateQuestionsBatch,
        handler_class=CreateQuestionsBatchHandler,
        category=CQRSCategory.QUESTION,
        validator_class=CreateQuestionsBatchValidator,
        has_result_dto=True,
        result_dto_class=QuestionResult,  # list of
        description="Create up to 100 questions in one commit",
    ),
    CommandMetadata(
        command_class=UpdateQuestion,
        handler_class=UpdateQuestionHandler,
        category=CQRSCategory.QUESTION,
        validator_class=UpdateQuestionValidator,
        has_result_dto=True,
        result_dto_class=QuestionResult,
        description="Overwrite an owned question",
    ),
    CommandMetadata(
        command_class=UpdateQuestionsBatch,
        handler_class=UpdateQuestionsBatchHandler,
        category=CQRSCategory.QUESTION,
        validator_class=UpdateQuestionsBatchValidator,
        has_result_dto=True,
        result_dto_class=QuestionResult,  # list of
        description="Overwrite up to 100 owned questions in one commit",
    ),
    CommandMetadata(
        command_class=DeleteQuestion,
        handler_class=DeleteQuestionHandler,
        category=CQRSCategory.QUESTION,
        description="Soft-delete a question",
    ),
    CommandMetadata(
        command_class=RemoveCategoryFromQuestions,
        handler_class=RemoveCategoryFromQuestionsHandler,
        category=CQRSCategory.QUESTION,
        validator_class=RemoveCategoryFromQuestionsValidator,
        description="Clear a category reference from the user's questions",
    ),
    CommandMetadata(
        command_class=RemoveQualificationFromQuestions,
        handler_class=RemoveQualificationFromQuestionsHandler,
        category=CQRSCategory.QUESTION,
        validator_class=RemoveQualificationFromQuestionsValidator,
        description="Clear a qualification reference from the user's questions",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Conversation Commands (4 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=CreateConversation,
        handler_class=CreateConversationHandler,
        category=CQRSCategory.CONVERSATION,
        validator_class=CreateConversationValidator,
        has_result_dto=True,
        result_dto_class=ConversationResult,
        description="Start a conversation",
    ),
    CommandMetadata(
        command_class=UpdateConversationTimestamp,
        handler_class=UpdateConversationTimestampHandler,
        category=CQRSCategory.CONVERSATION,
        description="Touch a conversation's updated_at",
    ),
    CommandMetadata(
        command_class=DeleteConversation,
        handler_class=DeleteConversationHandler,
        category=CQRSCategory.CONVERSATION,
        description="Hard-delete a conversation and its messages",
    ),
    CommandMetadata(
        command_class=AddMessage,
        handler_class=AddMessageHandler,
        category=CQRSCategory.CONVERSATION,
        validator_class=AddMessageValidator,
        has_result_dto=True,
        result_dto_class=MessageResult,
        description="Append a message to an owned conversation",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Randomization Commands (12 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=CreateRandomization,
        handler_class=CreateRandomizationHandler,
        category=CQRSCategory.RANDOMIZATION,
        has_result_dto=True,
        result_dto_class=RandomizationResult,
        description="Start a randomization session",
    ),
    CommandMetadata(
        command_class=UpdateRandomization,
        handler_class=UpdateRandomizationHandler,
        category=CQRSCategory.RANDOMIZATION,
        validator_class=UpdateRandomizationValidator,
        has_result_dto=True,
        result_dto_class=RandomizationResult,
        description="Overwrite the state of an owned session",
    ),
    CommandMetadata(
        command_class=ClearCurrentQuestion,
        handler_class=ClearCurrentQuestionHandler,
        category=CQRSCategory.RANDOMIZATION,
        description="Unset a session's current question",
    ),
    CommandMetadata(
        command_class=DeleteRandomization,
        handler_class=DeleteRandomizationHandler,
        category=CQRSCategory.RANDOMIZATION,
        description="Hard-delete a session and its items",
    ),
    CommandMetadata(
        command_class=AddSelectedCategory,
        handler_class=AddSelectedCategoryHandler,
        category=CQRSCategory.RANDOMIZATION,
        validator_class=AddSelectedCategoryValidator,
        has_result_dto=True,
        result_dto_class=SelectedCategoryResult,
        description="Add a category to a session's selection",
    ),
    CommandMetadata(
        command_class=DeleteSelectedCategory,
        handler_class=DeleteSelectedCategoryHandler,
        category=CQRSCategory.RANDOMIZATION,
        description="Remove a category from a session's selection",
    ),
    CommandMetadata(
        command_class=AddUsedQuestion,
        handler_class=AddUsedQuestionHandler,
        category=CQRSCategory.RANDOMIZATION,
        validator_class=AddUsedQuestionValidator,
        has_result_dto=True,
        result_dto_class=UsedQuestionResult,
        description="Record a question as drawn in a session",
    ),
    CommandMetadata(
        command_class=DeleteUsedQuestion,
        handler_class=DeleteUsedQuestionHandler,
        category=CQRSCategory.RANDOMIZATION,
        description="Forget a drawn question",
    ),
    CommandMetadata(
        command_class=UpdateUsedQuestionCategory,
        handler_class=UpdateUsedQuestionCategoryHandler,
        category=CQRSCategory.RANDOMIZATION,
        validator_class=UpdateUsedQuestionCategoryValidator,
        description="Rename the category snapshot on a session's used questions",
    ),
    CommandMetadata(
        command_class=AddPostponedQuestion,
        handler_class=AddPostponedQuestionHandler,
        category=CQRSCategory.RANDOMIZATION,
        validator_class=AddPostponedQuestionValidator,
        has_result_dto=True,
        result_dto_class=PostponedQuestionResult,
        description="Postpone a question in a session",
    ),
    CommandMetadata(
        command_class=DeletePostponedQuestion,
        handler_class=DeletePostponedQuestionHandler,
        category=CQRSCategory.RANDOMIZATION,
        description="Drop a question from a session's postponed list",
    ),
    CommandMetadata(
        command_class=UpdatePostponedQuestionTimestamp,
        handler_class=UpdatePostponedQuestionTimestampHandler,
        category=CQRSCategory.RANDOMIZATION,
        description="Move a postponed question to the back of the queue",
    ),
]


# ═══════════════════════════════════════════════════════════════════════════
# QUERY REGISTRY (13 queries)
# ═══════════════════════════════════════════════════════════════════════════

QUERY_REGISTRY: list[QueryMetadata] = [
    # Categories & qualifications
    QueryMetadata(
        query_class=GetCategories,
        handler_class=GetCategoriesHandler,
        category=CQRSCategory.CATEGORY,
        description="List the user's categories, optionally by activity",
    ),
    QueryMetadata(
        query_class=GetCategoryById,
        handler_class=GetCategoryByIdHandler,
        category=CQRSCategory.CATEGORY,
        description="Get one owned category",
    ),
    QueryMetadata(
        query_class=GetQualifications,
        handler_class=GetQualificationsHandler,
        category=CQRSCategory.QUALIFICATION,
        description="List the user's qualifications, optionally by activity",
    ),
    QueryMetadata(
        query_class=GetQualificationById,
        handler_class=GetQualificationByIdHandler,
        category=CQRSCategory.QUALIFICATION,
        description="Get one owned qualification",
    ),
    # Questions
    QueryMetadata(
        query_class=GetQuestions,
        handler_class=GetQuestionsHandler,
        category=CQRSCategory.QUESTION,
        description="List the user's questions, optionally by category/activity",
    ),
    QueryMetadata(
        query_class=GetQuestionById,
        handler_class=GetQuestionByIdHandler,
        category=CQRSCategory.QUESTION,
        description="Get one owned question",
    ),
    # Conversations
    QueryMetadata(
        query_class=GetConversations,
        handler_class=GetConversationsHandler,
        category=CQRSCategory.CONVERSATION,
        description="List the user's conversations, most recent first",
    ),
    QueryMetadata(
        query_class=GetConversationById,
        handler_class=GetConversationByIdHandler,
        category=CQRSCategory.CONVERSATION,
        description="Get one owned conversation",
    ),
    QueryMetadata(
        query_class=GetMessages,
        handler_class=GetMessagesHandler,
        category=CQRSCategory.CONVERSATION,
        description="List an owned conversation's messages, oldest first",
    ),
    # Randomizations
    QueryMetadata(
        query_class=GetRandomization,
        handler_class=GetRandomizationHandler,
        category=CQRSCategory.RANDOMIZATION,
        description="Get the user's current session (or None)",
    ),
    QueryMetadata(
        query_class=GetSelectedCategories,
        handler_class=GetSelectedCategoriesHandler,
        category=CQRSCategory.RANDOMIZATION,
        description="List a session's selected categories",
    ),
    QueryMetadata(
        query_class=GetUsedQuestions,
        handler_class=GetUsedQuestionsHandler,
        category=CQRSCategory.RANDOMIZATION,
        description="List a session's used questions",
    ),
    QueryMetadata(
        query_class=GetPostponedQuestions,
        handler_class=GetPostponedQuestionsHandler,
        category=CQRSCategory.RANDOMIZATION,
        description="List a session's postponed questions, oldest first",
    ),
]
