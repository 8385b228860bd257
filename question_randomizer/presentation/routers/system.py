"""System router for non-versioned application endpoints.

Provides external-facing system endpoints that are not part of the
versioned API contract: root and health.

These endpoints are intentionally lightweight and side-effect free to
support health checks and basic diagnostics.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from question_randomizer.core.config import settings
from question_randomizer.core.container import get_database


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic health/status check.

    Returns:
        dict[str, str]: Welcome message with API status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        JSONResponse: ``healthy`` with 200, or ``unhealthy`` with 503 when
            the database cannot be reached.
    """
    if await get_database().check_connection():
        return JSONResponse(content={"status": "healthy", "database": "ok"})
    return JSONResponse(
        status_code=503,
        content={"status": "unhealthy", "database": "unreachable"},
    )
