"""API tests for public system routes and bearer authentication."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from fastapi.testclient import TestClient
import pytest


@pytest.mark.api
class TestSystemRoutes:
    """Test routes that need no token."""

    def test_root(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Question Randomizer"
        assert body["status"] == "operational"
        assert "version" in body

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "ok"}

    def test_trace_id_header(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.headers.get("X-Trace-Id")


@pytest.mark.api
class TestBearerAuthentication:
    """Test the 401 paths of the route guard."""

    def test_missing_token(self, client: TestClient) -> None:
        response = client.get("/api/v1/categories")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        body = response.json()
        assert body["title"] == "Authentication Required"
        assert body["detail"] == "Authentication required"

    def test_invalid_token(self, client: TestClient) -> None:
        response = client.get(
            "/api/v1/questions", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired token"

    def test_expired_token(
        self, client: TestClient, token_factory: Callable[..., str]
    ) -> None:
        token = token_factory(
            "user-1", exp=datetime.now(UTC) - timedelta(minutes=1)
        )

        response = client.get(
            "/api/v1/conversations", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401

    def test_guard_runs_before_body_validation(self, client: TestClient) -> None:
        response = client.post("/api/v1/categories", json={"unexpected": True})

        assert response.status_code == 401

    def test_unknown_route_is_problem_details(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/nothing-here", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["status"] == 404
