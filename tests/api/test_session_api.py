"""API tests for conversations and randomization sessions."""

from datetime import datetime

from fastapi.testclient import TestClient
import pytest


def create_conversation(client: TestClient, headers: dict[str, str]) -> dict:
    response = client.post(
        "/api/v1/conversations", json={"title": "Interview prep"}, headers=headers
    )
    assert response.status_code == 201
    return response.json()


def create_randomization(client: TestClient, headers: dict[str, str]) -> dict:
    response = client.post("/api/v1/randomizations", headers=headers)
    assert response.status_code == 201
    return response.json()


@pytest.mark.api
class TestConversationsAPI:
    """Test conversation and message endpoints."""

    def test_messages_in_order(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        conversation = create_conversation(client, auth_headers)
        url = f"/api/v1/conversations/{conversation['id']}/messages"

        for role, content in (("user", "Ask me something"), ("assistant", "Define GIL")):
            response = client.post(
                url, json={"role": role, "content": content}, headers=auth_headers
            )
            assert response.status_code == 201

        listed = client.get(url, headers=auth_headers).json()
        assert [m["content"] for m in listed["messages"]] == [
            "Ask me something",
            "Define GIL",
        ]
        assert listed["total_count"] == 2
        first_sent = datetime.fromisoformat(listed["messages"][0]["timestamp"])
        assert first_sent >= datetime.fromisoformat(conversation["updated_at"])

    def test_message_to_foreign_conversation(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
    ) -> None:
        conversation = create_conversation(client, auth_headers)

        response = client.post(
            f"/api/v1/conversations/{conversation['id']}/messages",
            json={"role": "user", "content": "Hi"},
            headers=other_auth_headers,
        )

        assert response.status_code == 404
        listed = client.get(
            f"/api/v1/conversations/{conversation['id']}/messages", headers=auth_headers
        ).json()
        assert listed["total_count"] == 0

    def test_invalid_role(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        conversation = create_conversation(client, auth_headers)

        response = client.post(
            f"/api/v1/conversations/{conversation['id']}/messages",
            json={"role": "system", "content": "Hi"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "role"

    def test_delete_then_get(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        conversation = create_conversation(client, auth_headers)

        deleted = client.delete(
            f"/api/v1/conversations/{conversation['id']}", headers=auth_headers
        )

        assert deleted.status_code == 204
        response = client.get(
            f"/api/v1/conversations/{conversation['id']}", headers=auth_headers
        )
        assert response.status_code == 404


@pytest.mark.api
class TestRandomizationsAPI:
    """Test randomization session endpoints."""

    def test_no_session_returns_null(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/randomizations", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() is None

    def test_create_and_fetch_current(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        created = create_randomization(client, auth_headers)

        current = client.get("/api/v1/randomizations", headers=auth_headers).json()

        assert current["id"] == created["id"]
        assert current["status"] == "Ongoing"
        assert current["show_answer"] is False

    def test_update_and_clear_current_question(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        session = create_randomization(client, auth_headers)
        url = f"/api/v1/randomizations/{session['id']}"

        updated = client.put(
            url,
            json={"show_answer": True, "status": "Ongoing", "current_question_id": "q-1"},
            headers=auth_headers,
        )
        cleared = client.post(f"{url}/clear-current-question", headers=auth_headers)

        assert updated.status_code == 200
        assert updated.json()["current_question_id"] == "q-1"
        assert cleared.status_code == 204
        current = client.get("/api/v1/randomizations", headers=auth_headers).json()
        assert current["current_question_id"] is None
        assert current["show_answer"] is True

    def test_selected_categories(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        session = create_randomization(client, auth_headers)
        url = f"/api/v1/randomizations/{session['id']}/selected-categories"

        added = client.post(
            url,
            json={"category_id": "cat-1", "category_name": "Python"},
            headers=auth_headers,
        )
        removed = client.delete(f"{url}/cat-1", headers=auth_headers)
        removed_again = client.delete(f"{url}/cat-1", headers=auth_headers)

        assert added.status_code == 201
        assert added.json()["category_name"] == "Python"
        assert removed.status_code == 204
        assert removed_again.status_code == 404

    def test_used_questions_category_rename(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        session = create_randomization(client, auth_headers)
        url = f"/api/v1/randomizations/{session['id']}/used-questions"
        client.post(
            url,
            json={"question_id": "q-1", "category_id": "cat-1", "category_name": "Py"},
            headers=auth_headers,
        )

        response = client.put(
            f"{url}/category",
            json={"category_id": "cat-1", "category_name": "Python"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"updated_count": 1}
        listed = client.get(url, headers=auth_headers).json()
        assert [u["category_name"] for u in listed["used_questions"]] == ["Python"]

    def test_postponed_questions(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        session = create_randomization(client, auth_headers)
        url = f"/api/v1/randomizations/{session['id']}/postponed-questions"
        for question_id in ("q-1", "q-2"):
            response = client.post(
                url, json={"question_id": question_id}, headers=auth_headers
            )
            assert response.status_code == 201

        requeued = client.put(f"{url}/q-1/timestamp", headers=auth_headers)

        assert requeued.status_code == 204
        listed = client.get(url, headers=auth_headers).json()
        assert [p["question_id"] for p in listed["postponed_questions"]] == [
            "q-2",
            "q-1",
        ]

    def test_foreign_session_items_are_hidden(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
    ) -> None:
        session = create_randomization(client, auth_headers)

        response = client.get(
            f"/api/v1/randomizations/{session['id']}/used-questions",
            headers=other_auth_headers,
        )
        write = client.post(
            f"/api/v1/randomizations/{session['id']}/used-questions",
            json={"question_id": "q-1"},
            headers=other_auth_headers,
        )

        assert response.status_code == 404
        assert write.status_code == 404
        assert client.get("/api/v1/randomizations", headers=other_auth_headers).json() is None
