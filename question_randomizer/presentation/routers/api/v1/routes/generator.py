"""Route generator for the API Route Registry.

Converts declarative RouteMetadata entries into FastAPI routes at
application startup.

Functions:
    register_routes_from_registry: Generate all routes from registry
    _build_dependencies: Build FastAPI dependencies from auth policy
    _build_responses: Build OpenAPI responses dict from error specs

Usage:
    v1_router = APIRouter(prefix=settings.api_v1_prefix)
    register_routes_from_registry(v1_router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter, Depends

from question_randomizer.presentation.routers.api.middleware.auth_dependencies import (
    require_authenticated_user,
)
from question_randomizer.presentation.routers.api.v1.errors.problem_details import (
    ProblemDetails,
)
from question_randomizer.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Routes are added in registry order, so literal paths such as
    ``/questions/batch`` must appear before ``/questions/{question_id}``.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: List of RouteMetadata entries to convert into routes
    """
    for metadata in registry:
        dependencies = _build_dependencies(metadata.auth_policy)
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            dependencies=dependencies,
            deprecated=metadata.deprecated,
        )


def _build_dependencies(auth_policy: AuthPolicy) -> list[Any]:
    """Build FastAPI dependencies from auth policy.

    Auth policy mapping:
        PUBLIC: No dependencies (anyone can access)
        AUTHENTICATED: Depends(require_authenticated_user) - 401 without a valid JWT

    Raises:
        ValueError: For an unknown auth level (fail closed).
    """
    match auth_policy.level:
        case AuthLevel.PUBLIC:
            return []

        case AuthLevel.AUTHENTICATED:
            return [Depends(require_authenticated_user)]

        case _:
            msg = f"Unknown auth level: {auth_policy.level}"
            raise ValueError(msg)


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error specifications.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Not found")])
        {404: {'description': 'Not found', 'model': ProblemDetails}}
    """
    return {
        error.status: {
            "description": error.description,
            "model": error.model or ProblemDetails,
        }
        for error in errors
    }
