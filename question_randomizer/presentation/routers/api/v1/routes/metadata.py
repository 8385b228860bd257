"""Route metadata types for the API Route Registry.

The registry is the single source of truth for all API routes: it
generates the FastAPI routes, their auth dependencies and their OpenAPI
metadata.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, auth, etc.)
    HTTPMethod: HTTP method enum (GET, POST, PUT, DELETE)
    AuthPolicy: Authentication policy (PUBLIC, AUTHENTICATED)
    ErrorSpec: Error response specification for OpenAPI
    IdempotencyLevel: HTTP idempotency classification

Usage:
    from question_randomizer.presentation.routers.api.v1.routes.metadata import (
        HTTPMethod,
        RouteMetadata,
    )

    metadata = RouteMetadata(
        method=HTTPMethod.POST,
        path="/categories",
        handler=create_category,
        resource="categories",
        tags=["Categories"],
        summary="Create category",
        operation_id="create_category",
        response_model=CategoryResponse,
        status_code=201,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


# =============================================================================
# HTTP Method Enum
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods for API routes.

    Attributes:
        GET: Safe, idempotent read operations
        POST: Non-idempotent create operations
        PUT: Idempotent complete replacement
        DELETE: Idempotent delete operations
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


# =============================================================================
# Authentication Policy
# =============================================================================


class AuthLevel(str, Enum):
    """Authentication levels for routes.

    Attributes:
        PUBLIC: No authentication required
        AUTHENTICATED: Requires a valid bearer JWT
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True, kw_only=True)
class AuthPolicy:
    """Authentication policy for a route.

    Attributes:
        level: Authentication level (public, authenticated)
        rationale: Optional explanation, required for PUBLIC routes

    Examples:
        >>> AuthPolicy(level=AuthLevel.AUTHENTICATED)
    """

    level: AuthLevel
    rationale: str | None = None


# =============================================================================
# Idempotency Level
# =============================================================================


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification.

    Attributes:
        SAFE: No side effects (GET)
        IDEMPOTENT: Side effects, but repeatable (PUT, DELETE) - safe to retry
        NON_IDEMPOTENT: Side effects, not repeatable (POST) - do not retry

    Reference:
        - RFC 7231 Section 4.2 (HTTP Semantics)
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


# =============================================================================
# Error Specification
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 400, 401, 404)
        description: Human-readable error description
        model: Optional Pydantic model for response (defaults to ProblemDetails)

    Examples:
        >>> ErrorSpec(status=400, description="Validation error")
        >>> ErrorSpec(status=404, description="Category not found")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


# =============================================================================
# Route Metadata (SSOT)
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route (Single Source of Truth).

    Identity fields:
        method: HTTP method (GET, POST, etc.)
        path: URL path relative to the v1 prefix (e.g., "/categories/{category_id}")
        handler: Async function that implements the endpoint

    Grouping fields:
        resource: Resource category (e.g., "categories", "questions")
        tags: OpenAPI tags (e.g., ["Categories"])

    OpenAPI documentation:
        summary: Short endpoint description
        description: Detailed endpoint description
        operation_id: Stable operation ID for client generation

    Request/Response:
        response_model: Pydantic model for success response
        status_code: Expected success status (200, 201, 204)
        errors: List of possible error responses for OpenAPI

    Behavior:
        idempotency: HTTP idempotency level
        auth_policy: Authentication policy
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel
    auth_policy: AuthPolicy

    # Deprecation
    deprecated: bool = False
