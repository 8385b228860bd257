"""Qualifications resource handlers.

Handler functions for qualification endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_qualifications         - List the user's qualifications
    get_qualification           - Get one qualification
    create_qualification        - Create a qualification
    create_qualifications_batch - Create up to 100 qualifications atomically
    update_qualification        - Overwrite a qualification
    delete_qualification        - Soft-delete a qualification
"""

from typing import Annotated

from fastapi import Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from question_randomizer.application.commands import (
    CreateQualification,
    CreateQualificationsBatch,
    DeleteQualification,
    UpdateQualification,
)
from question_randomizer.application.queries import (
    GetQualificationById,
    GetQualifications,
)
from question_randomizer.core.result import Failure
from question_randomizer.presentation.routers.api.middleware.auth_dependencies import (
    MediatorDep,
)
from question_randomizer.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from question_randomizer.presentation.routers.api.v1.errors import ErrorResponseBuilder
from question_randomizer.schemas.category_schemas import (
    NamedItemBatchCreateRequest,
    NamedItemCreateRequest,
    NamedItemUpdateRequest,
    QualificationListResponse,
    QualificationResponse,
)


async def list_qualifications(
    request: Request,
    mediator: MediatorDep,
    is_active: Annotated[
        bool | None,
        Query(
            description="Only active (true) or only deleted (false) qualifications"
        ),
    ] = None,
) -> QualificationListResponse | JSONResponse:
    """List the authenticated user's qualifications.

    GET /api/v1/qualifications → 200 OK
    """
    result = await mediator.send(GetQualifications(is_active=is_active))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return QualificationListResponse.from_dto(result.value)


async def get_qualification(
    request: Request,
    mediator: MediatorDep,
    qualification_id: Annotated[str, Path(description="Qualification ID")],
) -> QualificationResponse | JSONResponse:
    """Get a specific qualification.

    GET /api/v1/qualifications/{qualification_id} → 200 OK

    Returns:
        QualificationResponse, or 404 when the qualification is missing or
        owned by someone else.
    """
    result = await mediator.send(
        GetQualificationById(qualification_id=qualification_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return QualificationResponse.from_dto(result.value)


async def create_qualification(
    request: Request,
    mediator: MediatorDep,
    data: NamedItemCreateRequest,
) -> QualificationResponse | JSONResponse:
    """Create a qualification.

    POST /api/v1/qualifications → 201 Created
    """
    result = await mediator.send(
        CreateQualification(name=data.name, description=data.description)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return QualificationResponse.from_dto(result.value)


async def create_qualifications_batch(
    request: Request,
    mediator: MediatorDep,
    data: NamedItemBatchCreateRequest,
) -> QualificationListResponse | JSONResponse:
    """POST /api/v1/qualifications/batch → 201 Created (all or nothing)."""
    result = await mediator.send(CreateQualificationsBatch(names=data.names))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return QualificationListResponse.from_dto(result.value)


async def update_qualification(
    request: Request,
    mediator: MediatorDep,
    qualification_id: Annotated[str, Path(description="Qualification ID")],
    data: NamedItemUpdateRequest,
) -> QualificationResponse | JSONResponse:
    """Overwrite a qualification.

    PUT /api/v1/qualifications/{qualification_id} → 200 OK
    """
    result = await mediator.send(
        UpdateQualification(
            qualification_id=qualification_id,
            name=data.name,
            description=data.description,
            is_active=data.is_active,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return QualificationResponse.from_dto(result.value)


async def delete_qualification(
    request: Request,
    mediator: MediatorDep,
    qualification_id: Annotated[str, Path(description="Qualification ID")],
) -> Response:
    """Soft-delete a qualification.

    DELETE /api/v1/qualifications/{qualification_id} → 204 No Content

    Questions referencing the qualification have their
    ``qualification_id`` cleared before the response is sent.
    """
    result = await mediator.send(
        DeleteQualification(qualification_id=qualification_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
