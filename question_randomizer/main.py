"""
Main FastAPI application entry point.

Builds the application: lifespan (dispatcher wiring check, schema
creation outside production), middleware, exception handlers and routers.

Run with:
    uvicorn question_randomizer.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from question_randomizer.core.config import settings
from question_randomizer.core.container import (
    get_database,
    get_dispatcher,
    get_logger,
)
from question_randomizer.presentation.routers import system_router
from question_randomizer.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)
from question_randomizer.presentation.routers.api.v1 import v1_router
from question_randomizer.presentation.routers.api.v1.errors import (
    register_exception_handlers,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: build the dispatcher (raises ConfigurationError on a broken
      handler registry), create tables outside production
    - Shutdown: dispose of the database connection pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()

    # Fail fast: a request type with zero or several handlers stops startup
    dispatcher = get_dispatcher()

    database = get_database()
    if not settings.is_production:
        await database.create_all()

    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
        registered_requests=len(dispatcher.registered_types),
    )

    yield

    await database.close()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Quiz question bank and randomization sessions",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Trace-Id"],
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
