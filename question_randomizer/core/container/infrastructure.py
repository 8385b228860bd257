"""Infrastructure dependency factories.

App-scoped singletons are cached with ``lru_cache``; request-scoped
dependencies are async generators consumed by FastAPI ``Depends``.
"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from question_randomizer.core.config import settings
from question_randomizer.infrastructure.persistence.database import Database
from question_randomizer.infrastructure.security.jwt_identity_service import (
    JWTIdentityService,
)

if TYPE_CHECKING:
    from question_randomizer.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_identity_service() -> JWTIdentityService:
    """Get bearer token validator singleton (app-scoped)."""
    return JWTIdentityService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        user_id_claim=settings.user_id_claim,
        audience=settings.jwt_audience,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from question_randomizer.infrastructure.logging.console_adapter import (
        ConsoleAdapter,
    )

    return ConsoleAdapter(use_json=settings.is_testing, level=settings.log_level)


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
