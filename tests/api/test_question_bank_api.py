"""API tests for categories, qualifications and questions.

Every request goes through the real application: bearer token check,
mediator, validators, handlers, repositories and event bus, on a fresh
in-memory database per test.
"""

from fastapi.testclient import TestClient
import pytest


def create_category(client: TestClient, headers: dict[str, str], name: str) -> dict:
    response = client.post("/api/v1/categories", json={"name": name}, headers=headers)
    assert response.status_code == 201
    return response.json()


def create_question(
    client: TestClient, headers: dict[str, str], **fields: object
) -> dict:
    body: dict[str, object] = {
        "question_text": "What is a closure?",
        "answer": "A function bound to its enclosing scope",
        "answer_pl": "Funkcja powiazana z otaczajacym zakresem",
    }
    body.update(fields)
    response = client.post("/api/v1/questions", json=body, headers=headers)
    assert response.status_code == 201
    return response.json()


@pytest.mark.api
class TestCategoriesAPI:
    """Test category endpoints."""

    def test_create_then_get(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        created = create_category(client, auth_headers, "Python")

        response = client.get(f"/api/v1/categories/{created['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == created
        assert created["is_active"] is True

    def test_foreign_category_is_not_found(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
    ) -> None:
        created = create_category(client, auth_headers, "Python")

        get_response = client.get(
            f"/api/v1/categories/{created['id']}", headers=other_auth_headers
        )
        delete_response = client.delete(
            f"/api/v1/categories/{created['id']}", headers=other_auth_headers
        )

        assert get_response.status_code == 404
        assert get_response.json()["title"] == "Resource Not Found"
        assert delete_response.status_code == 404
        assert client.get("/api/v1/categories", headers=other_auth_headers).json() == {
            "categories": [],
            "total_count": 0,
        }

    def test_blank_name_is_rejected(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/categories", json={"name": "   "}, headers=auth_headers
        )

        assert response.status_code == 400
        body = response.json()
        assert body["title"] == "Validation Failed"
        assert [error["field"] for error in body["errors"]] == ["name"]

    def test_batch_limit(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        too_many = client.post(
            "/api/v1/categories/batch",
            json={"names": [f"Category {i}" for i in range(101)]},
            headers=auth_headers,
        )
        at_limit = client.post(
            "/api/v1/categories/batch",
            json={"names": [f"Category {i}" for i in range(100)]},
            headers=auth_headers,
        )

        assert too_many.status_code == 400
        assert too_many.json()["errors"][0]["code"] == "max_count"
        assert at_limit.status_code == 201
        assert at_limit.json()["total_count"] == 100
        listed = client.get("/api/v1/categories", headers=auth_headers).json()
        assert listed["total_count"] == 100

    def test_batch_with_blank_name_writes_nothing(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/categories/batch",
            json={"names": ["Python", "", "Rust"]},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "names[1]"
        listed = client.get("/api/v1/categories", headers=auth_headers).json()
        assert listed["total_count"] == 0

    def test_update(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        created = create_category(client, auth_headers, "Pyhton")

        response = client.put(
            f"/api/v1/categories/{created['id']}",
            json={"name": "Python", "description": "Language questions"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Python"
        assert response.json()["description"] == "Language questions"

    def test_delete_clears_question_reference_keeps_name(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        category = create_category(client, auth_headers, "Python")
        question = create_question(client, auth_headers, category_id=category["id"])
        assert question["category_name"] == "Python"

        response = client.delete(
            f"/api/v1/categories/{category['id']}", headers=auth_headers
        )

        assert response.status_code == 204
        stored = client.get(
            f"/api/v1/questions/{question['id']}", headers=auth_headers
        ).json()
        assert stored["category_id"] is None
        assert stored["category_name"] == "Python"
        active = client.get(
            "/api/v1/categories", params={"is_active": "true"}, headers=auth_headers
        ).json()
        assert active["total_count"] == 0

    def test_failing_subscriber_keeps_the_delete(
        self, auth_headers: dict[str, str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A subscriber error surfaces as 500 after the delete was committed."""
        from question_randomizer.core.container import get_event_bus
        from question_randomizer.domain.events import CategoryDeletedEvent
        from question_randomizer.main import app

        async def failing_subscriber(event: CategoryDeletedEvent) -> None:
            raise RuntimeError("search index unavailable")

        event_bus = get_event_bus()
        monkeypatch.setitem(
            event_bus._handlers,  # type: ignore[attr-defined]
            CategoryDeletedEvent,
            [*event_bus.handlers_for(CategoryDeletedEvent), failing_subscriber],
        )

        with TestClient(app, raise_server_exceptions=False) as client:
            category = create_category(client, auth_headers, "Python")
            question = create_question(
                client, auth_headers, category_id=category["id"]
            )

            response = client.delete(
                f"/api/v1/categories/{category['id']}", headers=auth_headers
            )

            assert response.status_code == 500
            assert response.json()["title"] == "Internal Server Error"
            stored = client.get(
                f"/api/v1/categories/{category['id']}", headers=auth_headers
            ).json()
            assert stored["is_active"] is False
            cleared = client.get(
                f"/api/v1/questions/{question['id']}", headers=auth_headers
            ).json()
            assert cleared["category_id"] is None


@pytest.mark.api
class TestQualificationsAPI:
    """Test qualification endpoints."""

    def test_batch_of_100_gets_distinct_ids(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/qualifications/batch",
            json={"names": [f"Level {i}" for i in range(100)]},
            headers=auth_headers,
        )

        assert response.status_code == 201
        ids = [q["id"] for q in response.json()["qualifications"]]
        assert len(set(ids)) == 100

    def test_batch_of_101_is_rejected(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/qualifications/batch",
            json={"names": [f"Level {i}" for i in range(101)]},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["message"] == (
            "Maximum 100 qualifications can be created at once"
        )

    def test_soft_deleted_excluded_from_active_list(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        kept = client.post(
            "/api/v1/qualifications", json={"name": "Junior"}, headers=auth_headers
        ).json()
        removed = client.post(
            "/api/v1/qualifications", json={"name": "Senior"}, headers=auth_headers
        ).json()
        question = create_question(client, auth_headers, qualification_id=removed["id"])

        response = client.delete(
            f"/api/v1/qualifications/{removed['id']}", headers=auth_headers
        )

        assert response.status_code == 204
        active = client.get(
            "/api/v1/qualifications", params={"is_active": "true"}, headers=auth_headers
        ).json()
        assert [q["id"] for q in active["qualifications"]] == [kept["id"]]
        stored = client.get(
            f"/api/v1/questions/{question['id']}", headers=auth_headers
        ).json()
        assert stored["qualification_id"] is None
        assert stored["qualification_name"] == "Senior"


@pytest.mark.api
class TestQuestionsAPI:
    """Test question endpoints."""

    def test_create_then_get(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        created = create_question(client, auth_headers, tags=["basics"])

        response = client.get(f"/api/v1/questions/{created['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == created
        assert created["tags"] == ["basics"]

    def test_missing_required_field_reports_each_violation(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/questions",
            json={"question_text": "", "answer": "", "answer_pl": "Odpowiedz"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"question_text", "answer"}

    def test_list_filters_by_category(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        category = create_category(client, auth_headers, "Python")
        in_category = create_question(client, auth_headers, category_id=category["id"])
        create_question(client, auth_headers)

        response = client.get(
            "/api/v1/questions",
            params={"category_id": category["id"]},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert [q["id"] for q in response.json()["questions"]] == [in_category["id"]]

    def test_batch_update_with_foreign_question_changes_nothing(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
    ) -> None:
        mine = create_question(client, auth_headers)
        theirs = create_question(client, other_auth_headers)
        items = [
            {
                "id": question["id"],
                "question_text": "Rewritten",
                "answer": "A",
                "answer_pl": "O",
            }
            for question in (mine, theirs)
        ]

        response = client.put(
            "/api/v1/questions/batch", json={"questions": items}, headers=auth_headers
        )

        assert response.status_code == 404
        stored = client.get(f"/api/v1/questions/{mine['id']}", headers=auth_headers)
        assert stored.json()["question_text"] == mine["question_text"]

    def test_remove_category_from_questions(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        for _ in range(2):
            create_question(client, auth_headers, category_id="cat-legacy")

        response = client.delete(
            "/api/v1/questions/category/cat-legacy", headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json() == {"cleared_count": 2}

    def test_delete_is_soft(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        question = create_question(client, auth_headers)

        response = client.delete(
            f"/api/v1/questions/{question['id']}", headers=auth_headers
        )

        assert response.status_code == 204
        stored = client.get(
            f"/api/v1/questions/{question['id']}", headers=auth_headers
        ).json()
        assert stored["is_active"] is False
