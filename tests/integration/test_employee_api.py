"""End-to-end tests for the employee API over a real SQLite store."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def app_client():
    """A client running the real dependency chain against the configured store."""
    from src.employee_api.api.http.app import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.mark.integration
class TestEmployeeLifecycle:
    """Create, read, update and delete through the HTTP surface."""

    def test_create_get_delete_scenario(self, app_client):
        created = app_client.post(
            "/api/employees",
            json={"firstName": "fuad", "lastName": "aliyev", "email": "aliyev@gmail.com"},
        )
        assert created.status_code == 201
        body = created.json()
        assert body["id"] is not None
        assert body["firstName"] == "fuad"
        assert body["lastName"] == "aliyev"
        assert body["email"] == "aliyev@gmail.com"

        fetched = app_client.get(f"/api/employees/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == body

        deleted = app_client.delete(f"/api/employees/{body['id']}")
        assert deleted.status_code == 200
        assert deleted.json() == {"message": "Employee deleted successfully!"}

        missing = app_client.get(f"/api/employees/{body['id']}")
        assert missing.status_code == 404

    def test_ids_are_unique(self, app_client):
        ids = {
            app_client.post(
                "/api/employees",
                json={
                    "firstName": "Fuad",
                    "lastName": "Aliyev",
                    "email": f"fuad{i}@gmail.com",
                },
            ).json()["id"]
            for i in range(3)
        }

        assert len(ids) == 3
        assert len(app_client.get("/api/employees").json()) == 3

    def test_duplicate_email_is_rejected(self, app_client):
        payload = {"firstName": "Fuad", "lastName": "Aliyev", "email": "fuad@gmail.com"}
        assert app_client.post("/api/employees", json=payload).status_code == 201

        second = app_client.post(
            "/api/employees", json={**payload, "firstName": "Other"}
        )

        assert second.status_code == 409
        assert second.json() == {
            "detail": "Employee already exists with given email: fuad@gmail.com"
        }
        assert len(app_client.get("/api/employees").json()) == 1

    def test_update_persists_new_email(self, app_client):
        created = app_client.post(
            "/api/employees",
            json={"firstName": "Fuad", "lastName": "Aliyev", "email": "fuad@gmail.com"},
        ).json()

        updated = app_client.put(
            f"/api/employees/{created['id']}",
            json={"firstName": "Fuad", "lastName": "Aliyev", "email": "aliyev@gmail.com"},
        )

        assert updated.status_code == 200
        assert updated.json()["id"] == created["id"]
        fetched = app_client.get(f"/api/employees/{created['id']}").json()
        assert fetched["email"] == "aliyev@gmail.com"

    def test_update_unknown_id_returns_404(self, app_client):
        response = app_client.put(
            "/api/employees/123",
            json={"firstName": "Fuad", "lastName": "Aliyev", "email": "fuad@gmail.com"},
        )

        assert response.status_code == 404
        assert app_client.get("/api/employees").json() == []

    def test_each_client_starts_with_empty_store(self, app_client):
        assert app_client.get("/api/employees").json() == []

    def test_get_id_beyond_integer_range_returns_404(self, app_client):
        response = app_client.get("/api/employees/9223372036854775808")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Employee not found with given id: 9223372036854775808"
        }

    def test_put_id_beyond_integer_range_returns_404(self, app_client):
        response = app_client.put(
            "/api/employees/9223372036854775808",
            json={"firstName": "Fuad", "lastName": "Aliyev", "email": "fuad@gmail.com"},
        )

        assert response.status_code == 404

    def test_delete_id_beyond_integer_range_succeeds(self, app_client):
        response = app_client.delete("/api/employees/9223372036854775808")

        assert response.status_code == 200
        assert response.json() == {"message": "Employee deleted successfully!"}


class TestEmployeeApiWithSharedSession:
    """Routes wired to the test session can be checked against the repository."""

    def test_post_is_visible_to_repository(self, client, employee_repository):
        response = client.post(
            "/api/employees",
            json={"firstName": "Fuad", "lastName": "Aliyev", "email": "fuad@gmail.com"},
        )

        saved = employee_repository.find_by_id(response.json()["id"])
        assert saved is not None
        assert saved.email == "fuad@gmail.com"

    def test_delete_removes_row(self, client, employee_repository, employee):
        saved = employee_repository.save(employee)

        response = client.delete(f"/api/employees/{saved.id}")

        assert response.status_code == 200
        assert employee_repository.count() == 0
