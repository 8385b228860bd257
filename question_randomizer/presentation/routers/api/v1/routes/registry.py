"""API Route Registry - Single Source of Truth for all routes.

ROUTE_REGISTRY is the authoritative list of all v1 API endpoints. It is
used to generate FastAPI routes, auth dependencies and OpenAPI metadata
at application startup.

Registry structure:
    - 44 endpoints across 5 resources
    - Every endpoint requires a bearer JWT (AUTHENTICATED)
    - Literal sub-paths are listed before parameterized siblings

Usage:
    from question_randomizer.presentation.routers.api.v1.routes.registry import (
        ROUTE_REGISTRY,
    )
    from question_randomizer.presentation.routers.api.v1.routes.generator import (
        register_routes_from_registry,
    )

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from question_randomizer.presentation.routers.api.v1.categories import (
    create_categories_batch,
    create_category,
    delete_category,
    get_category,
    list_categories,
    update_category,
)
from question_randomizer.presentation.routers.api.v1.conversations import (
    add_message,
    create_conversation,
    delete_conversation,
    get_conversation,
    list_conversations,
    list_messages,
    update_conversation_timestamp,
)
from question_randomizer.presentation.routers.api.v1.qualifications import (
    create_qualification,
    create_qualifications_batch,
    delete_qualification,
    get_qualification,
    list_qualifications,
    update_qualification,
)
from question_randomizer.presentation.routers.api.v1.questions import (
    create_question,
    create_questions_batch,
    delete_question,
    get_question,
    list_questions,
    remove_category_from_questions,
    remove_qualification_from_questions,
    update_question,
    update_questions_batch,
)
from question_randomizer.presentation.routers.api.v1.randomizations import (
    add_postponed_question,
    add_selected_category,
    add_used_question,
    clear_current_question,
    create_randomization,
    delete_postponed_question,
    delete_randomization,
    delete_selected_category,
    delete_used_question,
    get_randomization,
    list_postponed_questions,
    list_selected_categories,
    list_used_questions,
    update_postponed_question_timestamp,
    update_randomization,
    update_used_question_category,
)
from question_randomizer.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from question_randomizer.schemas.category_schemas import (
    CategoryListResponse,
    CategoryResponse,
    QualificationListResponse,
    QualificationResponse,
)
from question_randomizer.schemas.conversation_schemas import (
    ConversationListResponse,
    ConversationResponse,
    MessageListResponse,
    MessageResponse,
)
from question_randomizer.schemas.question_schemas import (
    QuestionListResponse,
    QuestionReferencesClearedResponse,
    QuestionResponse,
)
from question_randomizer.schemas.randomization_schemas import (
    PostponedQuestionListResponse,
    PostponedQuestionResponse,
    RandomizationResponse,
    SelectedCategoryListResponse,
    SelectedCategoryResponse,
    UsedQuestionListResponse,
    UsedQuestionResponse,
    UsedQuestionsUpdatedResponse,
)

# =============================================================================
# Shared error specifications
# =============================================================================

_UNAUTHORIZED = ErrorSpec(status=401, description="Missing or invalid bearer token")
_VALIDATION = ErrorSpec(status=400, description="Validation error")


def _not_found(resource: str) -> ErrorSpec:
    return ErrorSpec(status=404, description=f"{resource} not found")


# =============================================================================
# ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Categories Resource (6 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/categories",
        handler=list_categories,
        resource="categories",
        tags=["Categories"],
        summary="List categories",
        description="List the current user's categories, optionally filtered by activity.",
        operation_id="list_categories",
        response_model=CategoryListResponse,
        status_code=200,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/categories/{category_id}",
        handler=get_category,
        resource="categories",
        tags=["Categories"],
        summary="Get category",
        description="Get one category owned by the current user.",
        operation_id="get_category",
        response_model=CategoryResponse,
        status_code=200,
        errors=[_UNAUTHORIZED, _not_found("Category")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/categories",
        handler=create_category,
        resource="categories",
        tags=["Categories"],
        summary="Create category",
        description="Create a category.",
        operation_id="create_category",
        response_model=CategoryResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/categories/batch",
        handler=create_categories_batch,
        resource="categories",
        tags=["Categories"],
        summary="Create categories",
        description="Create 1 to 100 categories in one transaction.",
        operation_id="create_categories_batch",
        response_model=CategoryListResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/categories/{category_id}",
        handler=update_category,
        resource="categories",
        tags=["Categories"],
        summary="Update category",
        description="Overwrite a category. Question name snapshots are not updated.",
        operation_id="update_category",
        response_model=CategoryResponse,
        status_code=200,
        errors=[_VALIDATION, _UNAUTHORIZED, _not_found("Category")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/categories/{category_id}",
        handler=delete_category,
        resource="categories",
        tags=["Categories"],
        summary="Delete category",
        description="Soft-delete a category and clear it from the user's questions.",
        operation_id="delete_category",
        response_model=None,
        status_code=204,
        errors=[_UNAUTHORIZED, _not_found("Category")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    # =========================================================================
    # Qualifications Resource (6 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/qualifications",
        handler=list_qualifications,
        resource="qualifications",
        tags=["Qualifications"],
        summary="List qualifications",
        description="List the current user's qualifications, optionally filtered by activity.",
        operation_id="list_qualifications",
        response_model=QualificationListResponse,
        status_code=200,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/qualifications/{qualification_id}",
        handler=get_qualification,
        resource="qualifications",
        tags=["Qualifications"],
        summary="Get qualification",
        description="Get one qualification owned by the current user.",
        operation_id="get_qualification",
        response_model=QualificationResponse,
        status_code=200,
        errors=[_UNAUTHORIZED, _not_found("Qualification")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/qualifications",
        handler=create_qualification,
        resource="qualifications",
        tags=["Qualifications"],
        summary="Create qualification",
        description="Create a qualification.",
        operation_id="create_qualification",
        response_model=QualificationResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/qualifications/batch",
        handler=create_qualifications_batch,
        resource="qualifications",
        tags=["Qualifications"],
        summary="Create qualifications",
        description="Create 1 to 100 qualifications in one transaction.",
        operation_id="create_qualifications_batch",
        response_model=QualificationListResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/qualifications/{qualification_id}",
        handler=update_qualification,
        resource="qualifications",
        tags=["Qualifications"],
        summary="Update qualification",
        description="Overwrite a qualification. Question name snapshots are not updated.",
        operation_id="update_qualification",
        response_model=QualificationResponse,
        status_code=200,
        errors=[_VALIDATION, _UNAUTHORIZED, _not_found("Qualification")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/qualifications/{qualification_id}",
        handler=delete_qualification,
        resource="qualifications",
        tags=["Qualifications"],
        summary="Delete qualification",
        description="Soft-delete a qualification and clear it from the user's questions.",
        operation_id="delete_qualification",
        response_model=None,
        status_code=204,
        errors=[_UNAUTHORIZED, _not_found("Qualification")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    # =========================================================================
    # Questions Resource (9 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/questions",
        handler=list_questions,
        resource="questions",
        tags=["Questions"],
        summary="List questions",
        description="List the current user's questions, optionally by category and activity.",
        operation_id="list_questions",
        response_model=QuestionListResponse,
        status_code=200,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/questions/{question_id}",
        handler=get_question,
        resource="questions",
        tags=["Questions"],
        summary="Get question",
        description="Get one question owned by the current user.",
        operation_id="get_question",
        response_model=QuestionResponse,
        status_code=200,
        errors=[_UNAUTHORIZED, _not_found("Question")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/questions",
        handler=create_question,
        resource="questions",
        tags=["Questions"],
        summary="Create question",
        description="Create a question, snapshotting category and qualification names.",
        operation_id="create_question",
        response_model=QuestionResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/questions/batch",
        handler=create_questions_batch,
        resource="questions",
        tags=["Questions"],
        summary="Create questions",
        description="Create 1 to 100 questions in one transaction.",
        operation_id="create_questions_batch",
        response_model=QuestionListResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/questions/batch",
        handler=update_questions_batch,
        resource="questions",
        tags=["Questions"],
        summary="Update questions",
        description="Overwrite 1 to 100 owned questions in one transaction.",
        operation_id="update_questions_batch",
        response_model=QuestionListResponse,
        status_code=200,
        errors=[_VALIDATION, _UNAUTHORIZED, _not_found("Question")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/questions/{question_id}",
        handler=update_question,
        resource="questions",
        tags=["Questions"],
        summary="Update question",
        description="Overwrite a question.",
        operation_id="update_question",
        response_model=QuestionResponse,
        status_code=200,
        errors=[_VALIDATION, _UNAUTHORIZED, _not_found("Question")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/questions/category/{category_id}",
        handler=remove_category_from_questions,
        resource="questions",
        tags=["Questions"],
        summary="Clear category from questions",
        description="Clear category_id on every question of the user that references it.",
        operation_id="remove_category_from_questions",
        response_model=QuestionReferencesClearedResponse,
        status_code=200,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/questions/qualification/{qualification_id}",
        handler=remove_qualification_from_questions,
        resource="questions",
        tags=["Questions"],
        summary="Clear qualification from questions",
        description="Clear qualification_id on every question of the user that references it.",
        operation_id="remove_qualification_from_questions",
        response_model=QuestionReferencesClearedResponse,
        status_code=200,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/questions/{question_id}",
        handler=delete_question,
        resource="questions",
        tags=["Questions"],
        summary="Delete question",
        description="Soft-delete a question.",
        operation_id="delete_question",
        response_model=None,
        status_code=204,
        errors=[_UNAUTHORIZED, _not_found("Question")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    # =========================================================================
    # Conversations Resource (7 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/conversations",
        handler=list_conversations,
        resource="conversations",
        tags=["Conversations"],
        summary="List conversations",
        description="List the current user's conversations, most recently updated first.",
        operation_id="list_conversations",
        response_model=ConversationListResponse,
        status_code=200,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/conversations/{conversation_id}",
        handler=get_conversation,
        resource="conversations",
        tags=["Conversations"],
        summary="Get conversation",
        description="Get one conversation owned by the current user.",
        operation_id="get_conversation",
        response_model=ConversationResponse,
        status_code=200,
        errors=[_UNAUTHORIZED, _not_found("Conversation")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/conversations",
        handler=create_conversation,
        resource="conversations",
        tags=["Conversations"],
        summary="Create conversation",
        description="Start a conversation.",
        operation_id="create_conversation",
        response_model=ConversationResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/conversations/{conversation_id}/update-timestamp",
        handler=update_conversation_timestamp,
        resource="conversations",
        tags=["Conversations"],
        summary="Touch conversation",
        description="Set the conversation's updated_at to now.",
        operation_id="update_conversation_timestamp",
        response_model=None,
        status_code=204,
        errors=[_UNAUTHORIZED, _not_found("Conversation")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/conversations/{conversation_id}",
        handler=delete_conversation,
        resource="conversations",
        tags=["Conversations"],
        summary="Delete conversation",
        description="Delete a conversation and all of its messages.",
        operation_id="delete_conversation",
        response_model=None,
        status_code=204,
        errors=[_UNAUTHORIZED, _not_found("Conversation")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/conversations/{conversation_id}/messages",
        handler=list_messages,
        resource="conversations",
        tags=["Conversations"],
        summary="List messages",
        description="List a conversation's messages, oldest first.",
        operation_id="list_messages",
        response_model=MessageListResponse,
        status_code=200,
        errors=[_UNAUTHORIZED, _not_found("Conversation")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/conversations/{conversation_id}/messages",
        handler=add_message,
        resource="conversations",
        tags=["Conversations"],
        summary="Add message",
        description="Append a message and bump the conversation's updated_at.",
        operation_id="add_message",
        response_model=MessageResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHORIZED, _not_found("Conversation")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    # =========================================================================
    # Randomizations Resource (16 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/randomizations",
        handler=get_randomization,
        resource="randomizations",
        tags=["Randomizations"],
        summary="Get current randomization",
        description="Get the current user's active session, or null.",
        operation_id="get_randomization",
        response_model=None,
        status_code=200,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/randomizations",
        handler=create_randomization,
        resource="randomizations",
        tags=["Randomizations"],
        summary="Create randomization",
        description="Start a session with status Ongoing.",
        operation_id="create_randomization",
        response_model=RandomizationResponse,
        status_code=201,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/randomizations/{randomization_id}",
        handler=update_randomization,
        resource="randomizations",
        tags=["Randomizations"],
        summary="Update randomization",
        description="Overwrite the session state.",
        operation_id="update_randomization",
        response_model=RandomizationResponse,
        status_code=200,
        errors=[_VALIDATION, _UNAUTHORIZED, _not_found("Randomization")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/randomizations/{randomization_id}/clear-current-question",
        handler=clear_current_question,
        resource="randomizations",
        tags=["Randomizations"],
        summary="Clear current question",
        description="Unset the session's current question.",
        operation_id="clear_current_question",
        response_model=None,
        status_code=204,
        errors=[_UNAUTHORIZED, _not_found("Randomization")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/randomizations/{randomization_id}",
        handler=delete_randomization,
        resource="randomizations",
        tags=["Randomizations"],
        summary="Delete randomization",
        description="Delete a session with its selected, used and postponed items.",
        operation_id="delete_randomization",
        response_model=None,
        status_code=204,
        errors=[_UNAUTHORIZED, _not_found("Randomization")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/randomizations/{randomization_id}/selected-categories",
        handler=list_selected_categories,
        resource="randomizations",
        tags=["Randomizations"],
        summary="List selected categories",
        description="List the session's selected categories.",
        operation_id="list_selected_categories",
        response_model=SelectedCategoryListResponse,
        status_code=200,
        errors=[_UNAUTHORIZED, _not_found("Randomization")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/randomizations/{randomization_id}/selected-categories",
        handler=add_selected_category,
        resource="randomizations",
        tags=["Randomizations"],
        summary="Add selected category",
        description="Add a category to the session's selection.",
        operation_id="add_selected_category",
        response_model=SelectedCategoryResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHORIZED, _not_found("Randomization")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/randomizations/{randomization_id}/selected-categories/{category_id}",
        handler=delete_selected_category,
        resource="randomizations",
        tags=["Randomizations"],
        summary="Delete selected category",
        description="Remove a category from the session's selection.",
        operation_id="delete_selected_category",
        response_model=None,
        status_code=204,
        errors=[_UNAUTHORIZED, _not_found("Selected category")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/randomizations/{randomization_id}/used-questions",
        handler=list_used_questions,
        resource="randomizations",
        tags=["Randomizations"],
        summary="List used questions",
        description="List the questions already drawn in the session.",
        operation_id="list_used_questions",
        response_model=UsedQuestionListResponse,
        status_code=200,
        errors=[_UNAUTHORIZED, _not_found("Randomization")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/randomizations/{randomization_id}/used-questions",
        handler=add_used_question,
        resource="randomizations",
        tags=["Randomizations"],
        summary="Add used question",
        description="Record a question as drawn in the session.",
        operation_id="add_used_question",
        response_model=UsedQuestionResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHORIZED, _not_found("Randomization")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/randomizations/{randomization_id}/used-questions/category",
        handler=update_used_question_category,
        resource="randomizations",
        tags=["Randomizations"],
        summary="Rename used question category",
        description="Rename the category snapshot on the session's used questions.",
        operation_id="update_used_question_category",
        response_model=UsedQuestionsUpdatedResponse,
        status_code=200,
        errors=[_VALIDATION, _UNAUTHORIZED, _not_found("Randomization")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/randomizations/{randomization_id}/used-questions/{question_id}",
        handler=delete_used_question,
        resource="randomizations",
        tags=["Randomizations"],
        summary="Delete used question",
        description="Forget that a question was drawn in the session.",
        operation_id="delete_used_question",
        response_model=None,
        status_code=204,
        errors=[_UNAUTHORIZED, _not_found("Used question")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/randomizations/{randomization_id}/postponed-questions",
        handler=list_postponed_questions,
        resource="randomizations",
        tags=["Randomizations"],
        summary="List postponed questions",
        description="List the session's postponed questions, oldest first.",
        operation_id="list_postponed_questions",
        response_model=PostponedQuestionListResponse,
        status_code=200,
        errors=[_UNAUTHORIZED, _not_found("Randomization")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/randomizations/{randomization_id}/postponed-questions",
        handler=add_postponed_question,
        resource="randomizations",
        tags=["Randomizations"],
        summary="Add postponed question",
        description="Postpone a question in the session.",
        operation_id="add_postponed_question",
        response_model=PostponedQuestionResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHORIZED, _not_found("Randomization")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/randomizations/{randomization_id}/postponed-questions/{question_id}",
        handler=delete_postponed_question,
        resource="randomizations",
        tags=["Randomizations"],
        summary="Delete postponed question",
        description="Drop a question from the session's postponed list.",
        operation_id="delete_postponed_question",
        response_model=None,
        status_code=204,
        errors=[_UNAUTHORIZED, _not_found("Postponed question")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/randomizations/{randomization_id}/postponed-questions/{question_id}/timestamp",
        handler=update_postponed_question_timestamp,
        resource="randomizations",
        tags=["Randomizations"],
        summary="Requeue postponed question",
        description="Move a postponed question to the back of the queue.",
        operation_id="update_postponed_question_timestamp",
        response_model=None,
        status_code=204,
        errors=[_UNAUTHORIZED, _not_found("Postponed question")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
]
