"""Randomizations resource handlers.

Handler functions for randomization session endpoints and the session's
sub-collections (selected categories, used and postponed questions).
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Every sub-collection route names its parent session in the path. A
session that is missing or owned by someone else gives 404.
"""

from typing import Annotated

from fastapi import Path, Request, Response, status
from fastapi.responses import JSONResponse

from question_randomizer.application.commands import (
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
from question_randomizer.application.queries import (
    GetPostponedQuestions,
    GetRandomization,
    GetSelectedCategories,
    GetUsedQuestions,
)
from question_randomizer.core.result import Failure
from question_randomizer.presentation.routers.api.middleware.auth_dependencies import (
    MediatorDep,
)
from question_randomizer.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from question_randomizer.presentation.routers.api.v1.errors import ErrorResponseBuilder
from question_randomizer.schemas.randomization_schemas import (
    PostponedQuestionCreateRequest,
    PostponedQuestionListResponse,
    PostponedQuestionResponse,
    RandomizationResponse,
    RandomizationUpdateRequest,
    SelectedCategoryCreateRequest,
    SelectedCategoryListResponse,
    SelectedCategoryResponse,
    UsedQuestionCategoryUpdateRequest,
    UsedQuestionCreateRequest,
    UsedQuestionListResponse,
    UsedQuestionResponse,
    UsedQuestionsUpdatedResponse,
)

RandomizationId = Annotated[str, Path(description="Randomization session ID")]


# =============================================================================
# Session
# =============================================================================


async def get_randomization(
    request: Request,
    mediator: MediatorDep,
) -> RandomizationResponse | JSONResponse | None:
    """Get the authenticated user's current session.

    GET /api/v1/randomizations → 200 OK

    Returns:
        RandomizationResponse, or ``null`` when the user has no active
        session.
    """
    result = await mediator.send(GetRandomization())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    if result.value is None:
        return None
    return RandomizationResponse.from_dto(result.value)


async def create_randomization(
    request: Request,
    mediator: MediatorDep,
) -> RandomizationResponse | JSONResponse:
    """Start a session (status "Ongoing", answers hidden).

    POST /api/v1/randomizations → 201 Created
    """
    result = await mediator.send(CreateRandomization())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return RandomizationResponse.from_dto(result.value)


async def update_randomization(
    request: Request,
    mediator: MediatorDep,
    randomization_id: RandomizationId,
    data: RandomizationUpdateRequest,
) -> RandomizationResponse | JSONResponse:
    """PUT /api/v1/randomizations/{randomization_id} → 200 OK"""
    result = await mediator.send(
        UpdateRandomization(
            randomization_id=randomization_id,
            show_answer=data.show_answer,
            status=data.status,
            current_question_id=data.current_question_id,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return RandomizationResponse.from_dto(result.value)


async def clear_current_question(
    request: Request,
    mediator: MediatorDep,
    randomization_id: RandomizationId,
) -> Response:
    """POST /api/v1/randomizations/{randomization_id}/clear-current-question → 204"""
    result = await mediator.send(
        ClearCurrentQuestion(randomization_id=randomization_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def delete_randomization(
    request: Request,
    mediator: MediatorDep,
    randomization_id: RandomizationId,
) -> Response:
    """Delete a session together with its selected, used and postponed items.

    DELETE /api/v1/randomizations/{randomization_id} → 204 No Content
    """
    result = await mediator.send(DeleteRandomization(randomization_id=randomization_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Selected categories
# =============================================================================


async def list_selected_categories(
    request: Request,
    mediator: MediatorDep,
    randomization_id: RandomizationId,
) -> SelectedCategoryListResponse | JSONResponse:
    """GET /api/v1/randomizations/{randomization_id}/selected-categories → 200 OK"""
    result = await mediator.send(
        GetSelectedCategories(randomization_id=randomization_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return SelectedCategoryListResponse.from_dto(result.value)


async def add_selected_category(
    request: Request,
    mediator: MediatorDep,
    randomization_id: RandomizationId,
    data: SelectedCategoryCreateRequest,
) -> SelectedCategoryResponse | JSONResponse:
    """POST /api/v1/randomizations/{randomization_id}/selected-categories → 201"""
    result = await mediator.send(
        AddSelectedCategory(
            randomization_id=randomization_id,
            category_id=data.category_id,
            category_name=data.category_name,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return SelectedCategoryResponse.from_dto(result.value)


async def delete_selected_category(
    request: Request,
    mediator: MediatorDep,
    randomization_id: RandomizationId,
    category_id: Annotated[str, Path(description="Category ID")],
) -> Response:
    """Remove a category from the session's selection.

    DELETE /api/v1/randomizations/{randomization_id}/selected-categories/{category_id}
    → 204 No Content
    """
    result = await mediator.send(
        DeleteSelectedCategory(
            randomization_id=randomization_id, category_id=category_id
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Used questions
# =============================================================================


async def list_used_questions(
    request: Request,
    mediator: MediatorDep,
    randomization_id: RandomizationId,
) -> UsedQuestionListResponse | JSONResponse:
    """GET /api/v1/randomizations/{randomization_id}/used-questions → 200 OK"""
    result = await mediator.send(GetUsedQuestions(randomization_id=randomization_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return UsedQuestionListResponse.from_dto(result.value)


async def add_used_question(
    request: Request,
    mediator: MediatorDep,
    randomization_id: RandomizationId,
    data: UsedQuestionCreateRequest,
) -> UsedQuestionResponse | JSONResponse:
    """Record a question as drawn in the session.

    POST /api/v1/randomizations/{randomization_id}/used-questions → 201 Created
    """
    result = await mediator.send(
        AddUsedQuestion(
            randomization_id=randomization_id,
            question_id=data.question_id,
            category_id=data.category_id,
            category_name=data.category_name,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return UsedQuestionResponse.from_dto(result.value)


async def delete_used_question(
    request: Request,
    mediator: MediatorDep,
    randomization_id: RandomizationId,
    question_id: Annotated[str, Path(description="Question ID")],
) -> Response:
    """DELETE /api/v1/randomizations/{randomization_id}/used-questions/{question_id} → 204"""
    result = await mediator.send(
        DeleteUsedQuestion(randomization_id=randomization_id, question_id=question_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def update_used_question_category(
    request: Request,
    mediator: MediatorDep,
    randomization_id: RandomizationId,
    data: UsedQuestionCategoryUpdateRequest,
) -> UsedQuestionsUpdatedResponse | JSONResponse:
    """Rename the category snapshot on the session's used questions.

    PUT /api/v1/randomizations/{randomization_id}/used-questions/category → 200 OK
    """
    result = await mediator.send(
        UpdateUsedQuestionCategory(
            randomization_id=randomization_id,
            category_id=data.category_id,
            category_name=data.category_name,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return UsedQuestionsUpdatedResponse(updated_count=result.value)


# =============================================================================
# Postponed questions
# =============================================================================


async def list_postponed_questions(
    request: Request,
    mediator: MediatorDep,
    randomization_id: RandomizationId,
) -> PostponedQuestionListResponse | JSONResponse:
    """List the session's postponed questions, oldest first.

    GET /api/v1/randomizations/{randomization_id}/postponed-questions → 200 OK
    """
    result = await mediator.send(
        GetPostponedQuestions(randomization_id=randomization_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return PostponedQuestionListResponse.from_dto(result.value)


async def add_postponed_question(
    request: Request,
    mediator: MediatorDep,
    randomization_id: RandomizationId,
    data: PostponedQuestionCreateRequest,
) -> PostponedQuestionResponse | JSONResponse:
    """POST /api/v1/randomizations/{randomization_id}/postponed-questions → 201"""
    result = await mediator.send(
        AddPostponedQuestion(
            randomization_id=randomization_id, question_id=data.question_id
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return PostponedQuestionResponse.from_dto(result.value)


async def delete_postponed_question(
    request: Request,
    mediator: MediatorDep,
    randomization_id: RandomizationId,
    question_id: Annotated[str, Path(description="Question ID")],
) -> Response:
    """Drop a question from the session's postponed list.

    DELETE /api/v1/randomizations/{randomization_id}/postponed-questions/{question_id}
    → 204 No Content
    """
    result = await mediator.send(
        DeletePostponedQuestion(
            randomization_id=randomization_id, question_id=question_id
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def update_postponed_question_timestamp(
    request: Request,
    mediator: MediatorDep,
    randomization_id: RandomizationId,
    question_id: Annotated[str, Path(description="Question ID")],
) -> Response:
    """Move a postponed question to the back of the queue.

    PUT /api/v1/randomizations/{randomization_id}/postponed-questions/{question_id}/timestamp
    → 204 No Content
    """
    result = await mediator.send(
        UpdatePostponedQuestionTimestamp(
            randomization_id=randomization_id, question_id=question_id
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
