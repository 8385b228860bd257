"""Questions resource handlers.

Handler functions for question endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_questions                   - List questions (optionally by category)
    get_question                     - Get one question
    create_question                  - Create a question
    create_questions_batch           - Create up to 100 questions atomically
    update_question                  - Overwrite a question
    update_questions_batch           - Overwrite up to 100 questions atomically
    delete_question                  - Soft-delete a question
    remove_category_from_questions   - Clear a category reference everywhere
    remove_qualification_from_questions - Clear a qualification reference everywhere
"""

from typing import Annotated

from fastapi import Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from question_randomizer.application.commands import (
    CreateQuestion,
    CreateQuestionsBatch,
    DeleteQuestion,
    RemoveCategoryFromQuestions,
    RemoveQualificationFromQuestions,
    UpdateQuestion,
    UpdateQuestionsBatch,
)
from question_randomizer.application.queries import GetQuestionById, GetQuestions
from question_randomizer.core.result import Failure
from question_randomizer.presentation.routers.api.middleware.auth_dependencies import (
    MediatorDep,
)
from question_randomizer.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from question_randomizer.presentation.routers.api.v1.errors import ErrorResponseBuilder
from question_randomizer.schemas.question_schemas import (
    QuestionBatchCreateRequest,
    QuestionBatchUpdateRequest,
    QuestionCreateRequest,
    QuestionListResponse,
    QuestionReferencesClearedResponse,
    QuestionResponse,
    QuestionUpdateRequest,
)


async def list_questions(
    request: Request,
    mediator: MediatorDep,
    category_id: Annotated[
        str | None, Query(description="Only questions in this category")
    ] = None,
    is_active: Annotated[
        bool | None,
        Query(description="Only active (true) or only deleted (false) questions"),
    ] = None,
) -> QuestionListResponse | JSONResponse:
    """List the authenticated user's questions.

    GET /api/v1/questions → 200 OK
    """
    result = await mediator.send(
        GetQuestions(category_id=category_id, is_active=is_active)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return QuestionListResponse.from_dto(result.value)


async def get_question(
    request: Request,
    mediator: MediatorDep,
    question_id: Annotated[str, Path(description="Question ID")],
) -> QuestionResponse | JSONResponse:
    """Get a specific question.

    GET /api/v1/questions/{question_id} → 200 OK
    """
    result = await mediator.send(GetQuestionById(question_id=question_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return QuestionResponse.from_dto(result.value)


async def create_question(
    request: Request,
    mediator: MediatorDep,
    data: QuestionCreateRequest,
) -> QuestionResponse | JSONResponse:
    """Create a question.

    POST /api/v1/questions → 201 Created

    Category and qualification names are looked up and stored alongside
    the IDs; an unknown ID stores no name.
    """
    result = await mediator.send(
        CreateQuestion(
            question_text=data.question_text,
            answer=data.answer,
            answer_pl=data.answer_pl,
            category_id=data.category_id,
            qualification_id=data.qualification_id,
            tags=data.tags,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return QuestionResponse.from_dto(result.value)


async def create_questions_batch(
    request: Request,
    mediator: MediatorDep,
    data: QuestionBatchCreateRequest,
) -> QuestionListResponse | JSONResponse:
    """Create several questions in one transaction.

    POST /api/v1/questions/batch → 201 Created
    """
    result = await mediator.send(
        CreateQuestionsBatch(questions=[item.to_input() for item in data.questions])
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return QuestionListResponse.from_dto(result.value)


async def update_question(
    request: Request,
    mediator: MediatorDep,
    question_id: Annotated[str, Path(description="Question ID")],
    data: QuestionUpdateRequest,
) -> QuestionResponse | JSONResponse:
    """Overwrite a question.

    PUT /api/v1/questions/{question_id} → 200 OK
    """
    result = await mediator.send(
        UpdateQuestion(
            question_id=question_id,
            question_text=data.question_text,
            answer=data.answer,
            answer_pl=data.answer_pl,
            category_id=data.category_id,
            qualification_id=data.qualification_id,
            tags=data.tags,
            is_active=data.is_active,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return QuestionResponse.from_dto(result.value)


async def update_questions_batch(
    request: Request,
    mediator: MediatorDep,
    data: QuestionBatchUpdateRequest,
) -> QuestionListResponse | JSONResponse:
    """Overwrite several questions in one transaction.

    PUT /api/v1/questions/batch → 200 OK

    If any ID is missing or owned by someone else the whole batch fails
    with 404 and nothing is written.
    """
    result = await mediator.send(
        UpdateQuestionsBatch(
            questions=[item.to_update_input() for item in data.questions]
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return QuestionListResponse.from_dto(result.value)


async def delete_question(
    request: Request,
    mediator: MediatorDep,
    question_id: Annotated[str, Path(description="Question ID")],
) -> Response:
    """Soft-delete a question.

    DELETE /api/v1/questions/{question_id} → 204 No Content
    """
    result = await mediator.send(DeleteQuestion(question_id=question_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def remove_category_from_questions(
    request: Request,
    mediator: MediatorDep,
    category_id: Annotated[str, Path(description="Category ID")],
) -> QuestionReferencesClearedResponse | JSONResponse:
    """DELETE /api/v1/questions/category/{category_id} → 200 OK"""
    result = await mediator.send(RemoveCategoryFromQuestions(category_id=category_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return QuestionReferencesClearedResponse(cleared_count=result.value)


async def remove_qualification_from_questions(
    request: Request,
    mediator: MediatorDep,
    qualification_id: Annotated[str, Path(description="Qualification ID")],
) -> QuestionReferencesClearedResponse | JSONResponse:
    """DELETE /api/v1/questions/qualification/{qualification_id} → 200 OK"""
    result = await mediator.send(
        RemoveQualificationFromQuestions(qualification_id=qualification_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return QuestionReferencesClearedResponse(cleared_count=result.value)
