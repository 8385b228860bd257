"""Pytest configuration shared by all test layers.

Environment variables are set before any application import because
``question_randomizer.core.config.settings`` is evaluated at import time.

This configuration provides:
1. An isolated in-memory SQLite database per test (integration)
2. A TestClient whose lifespan creates a fresh schema (api)
3. Bearer token and current-user helpers for the multi-tenant checks
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-bearer-tokens-0123456789")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from collections.abc import AsyncGenerator, Callable, Generator  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import jwt  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from question_randomizer.core.config import settings  # noqa: E402
from question_randomizer.core.enums import ErrorCode  # noqa: E402
from question_randomizer.core.errors import AuthenticationError  # noqa: E402
from question_randomizer.core.result import Failure, Success  # noqa: E402
from question_randomizer.infrastructure.persistence.database import (  # noqa: E402
    Database,
)


# =============================================================================
# Identity
# =============================================================================


@pytest.fixture
def user_id() -> str:
    """ID of the acting user."""
    return str(uuid7())


@pytest.fixture
def other_user_id() -> str:
    """ID of a second tenant, used for ownership checks."""
    return str(uuid7())


@pytest.fixture
def current_user(user_id: str) -> MagicMock:
    """CurrentUserProtocol stub resolving to ``user_id``."""
    accessor = MagicMock()
    accessor.get_user_id.return_value = Success(value=user_id)
    return accessor


@pytest.fixture
def anonymous_user() -> MagicMock:
    """CurrentUserProtocol stub with no authenticated user."""
    accessor = MagicMock()
    accessor.get_user_id.return_value = Failure(
        error=AuthenticationError(
            code=ErrorCode.AUTHENTICATION_REQUIRED,
            message="Authentication required",
        )
    )
    return accessor


@pytest.fixture
def mock_logger() -> MagicMock:
    """LoggerProtocol stub."""
    return MagicMock()


# =============================================================================
# Bearer tokens
# =============================================================================


def make_token(subject: str, **claims: object) -> str:
    """Sign a bearer token the way the external identity provider does."""
    payload: dict[str, object] = {settings.user_id_claim: subject, **claims}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


@pytest.fixture
def token_factory() -> Callable[..., str]:
    """Factory fixture for signed bearer tokens."""
    return make_token


@pytest.fixture
def auth_headers(user_id: str) -> dict[str, str]:
    """Authorization header for ``user_id``."""
    return {"Authorization": f"Bearer {make_token(user_id)}"}


@pytest.fixture
def other_auth_headers(other_user_id: str) -> dict[str, str]:
    """Authorization header for ``other_user_id``."""
    return {"Authorization": f"Bearer {make_token(other_user_id)}"}


# =============================================================================
# Database
# =============================================================================


@pytest_asyncio.fixture
async def test_database() -> AsyncGenerator[Database, None]:
    """Fresh in-memory database with the full schema.

    Every test gets its own engine, so rows never leak between tests.
    """
    database = Database(database_url="sqlite+aiosqlite://")
    await database.create_all()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def test_session(test_database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Session on ``test_database`` (repositories commit on every write)."""
    async with test_database.get_session() as session:
        yield session


# =============================================================================
# Application
# =============================================================================


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """TestClient running the application lifespan.

    Startup creates the schema on the shared in-memory engine and shutdown
    disposes of it, so each test starts with an empty database.
    """
    from question_randomizer.main import app

    with TestClient(app) as test_client:
        yield test_client
