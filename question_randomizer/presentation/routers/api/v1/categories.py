"""Categories resource handlers.

Handler functions for category endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_categories         - List the user's categories
    get_category            - Get one category
    create_category         - Create a category
    create_categories_batch - Create up to 100 categories atomically
    update_category         - Overwrite a category
    delete_category         - Soft-delete a category
"""

from typing import Annotated

from fastapi import Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from question_randomizer.application.commands import (
    CreateCategoriesBatch,
    CreateCategory,
    DeleteCategory,
    UpdateCategory,
)
from question_randomizer.application.queries import GetCategories, GetCategoryById
from question_randomizer.core.result import Failure
from question_randomizer.presentation.routers.api.middleware.auth_dependencies import (
    MediatorDep,
)
from question_randomizer.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from question_randomizer.presentation.routers.api.v1.errors import ErrorResponseBuilder
from question_randomizer.schemas.category_schemas import (
    CategoryListResponse,
    CategoryResponse,
    NamedItemBatchCreateRequest,
    NamedItemCreateRequest,
    NamedItemUpdateRequest,
)


async def list_categories(
    request: Request,
    mediator: MediatorDep,
    is_active: Annotated[
        bool | None,
        Query(description="Only active (true) or only deleted (false) categories"),
    ] = None,
) -> CategoryListResponse | JSONResponse:
    """List the authenticated user's categories.

    GET /api/v1/categories → 200 OK
    """
    result = await mediator.send(GetCategories(is_active=is_active))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return CategoryListResponse.from_dto(result.value)


async def get_category(
    request: Request,
    mediator: MediatorDep,
    category_id: Annotated[str, Path(description="Category ID")],
) -> CategoryResponse | JSONResponse:
    """Get a specific category.

    GET /api/v1/categories/{category_id} → 200 OK

    Returns:
        CategoryResponse, or 404 when the category is missing or owned by
        someone else.
    """
    result = await mediator.send(GetCategoryById(category_id=category_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return CategoryResponse.from_dto(result.value)


async def create_category(
    request: Request,
    mediator: MediatorDep,
    data: NamedItemCreateRequest,
) -> CategoryResponse | JSONResponse:
    """Create a category.

    POST /api/v1/categories → 201 Created
    """
    result = await mediator.send(
        CreateCategory(name=data.name, description=data.description)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return CategoryResponse.from_dto(result.value)


async def create_categories_batch(
    request: Request,
    mediator: MediatorDep,
    data: NamedItemBatchCreateRequest,
) -> CategoryListResponse | JSONResponse:
    """Create several categories in one transaction.

    POST /api/v1/categories/batch → 201 Created

    Nothing is written when any name fails validation.
    """
    result = await mediator.send(CreateCategoriesBatch(names=data.names))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return CategoryListResponse.from_dto(result.value)


async def update_category(
    request: Request,
    mediator: MediatorDep,
    category_id: Annotated[str, Path(description="Category ID")],
    data: NamedItemUpdateRequest,
) -> CategoryResponse | JSONResponse:
    """Overwrite a category.

    PUT /api/v1/categories/{category_id} → 200 OK
    """
    result = await mediator.send(
        UpdateCategory(
            category_id=category_id,
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

    return CategoryResponse.from_dto(result.value)


async def delete_category(
    request: Request,
    mediator: MediatorDep,
    category_id: Annotated[str, Path(description="Category ID")],
) -> Response:
    """Soft-delete a category.

    DELETE /api/v1/categories/{category_id} → 204 No Content

    Questions referencing the category have their ``category_id`` cleared
    before the response is sent.
    """
    result = await mediator.send(DeleteCategory(category_id=category_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
