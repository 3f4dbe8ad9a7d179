import pytest
from fastapi.testclient import TestClient

from user_directory_api.app.main import create_app


@pytest.fixture
def client():
    # A new app per test gives every test an empty store.
    return TestClient(create_app())


@pytest.fixture
def sample_user():
    return {"name": "A", "email": "a@x.com", "role": "user", "status": "active"}


def test_list_users_empty(client):
    res = client.get("/api/users")
    assert res.status_code == 200
    assert res.json() == {"success": True, "data": []}


def test_create_user(client, sample_user):
    res = client.post("/api/users", json=sample_user)
    assert res.status_code == 201, res.text
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "User created successfully"
    assert body["data"] == {"id": 1, **sample_user}

    res = client.post("/api/users", json={**sample_user, "name": "B", "email": "b@x.com"})
    assert res.json()["data"]["id"] == 2


@pytest.mark.parametrize("field", ["name", "email", "role", "status"])
def test_create_user_missing_field(client, sample_user, field):
    payload = {k: v for k, v in sample_user.items() if k != field}
    res = client.post("/api/users", json=payload)
    assert res.status_code == 400
    assert res.json()["success"] is False
    assert res.json()["message"] == "All fields are required"
    assert client.get("/api/users").json()["data"] == []


def test_create_user_without_body(client):
    res = client.post("/api/users")
    assert res.status_code == 400
    assert res.json()["message"] == "All fields are required"


def test_malformed_json_is_bad_request(client):
    res = client.post(
        "/api/users",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["success"] is False


def test_list_reflects_updates_and_deletes(client, sample_user):
    for name in ("A", "B", "C"):
        client.post("/api/users", json={**sample_user, "name": name})
    client.put("/api/users/2", json={"role": "admin"})
    client.delete("/api/users/1")

    data = client.get("/api/users").json()["data"]
    assert [u["id"] for u in data] == [2, 3]
    assert data[0]["role"] == "admin"


def test_update_user_name_only(client, sample_user):
    client.post("/api/users", json=sample_user)
    res = client.put("/api/users/1", json={"name": "Renamed"})
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "User updated successfully"
    assert body["data"] == {**sample_user, "id": 1, "name": "Renamed"}


def test_update_unknown_user(client):
    res = client.put("/api/users/99", json={"name": "Nobody"})
    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "User not found"}


def test_update_without_fields(client, sample_user):
    client.post("/api/users", json=sample_user)
    res = client.put("/api/users/1", json={})
    assert res.status_code == 400
    assert "At least one field" in res.json()["message"]


def test_update_invalid_email(client, sample_user):
    client.post("/api/users", json=sample_user)
    res = client.put("/api/users/1", json={"email": "not-an-email"})
    assert res.status_code == 400
    body = res.json()
    assert body["message"].startswith("email:")
    assert client.get("/api/users").json()["data"][0]["email"] == "a@x.com"


@pytest.mark.parametrize("payload", [{"role": "owner"}, {"status": "archived"}, {"age": 3}])
def test_update_rejects_invalid_values(client, sample_user, payload):
    client.post("/api/users", json=sample_user)
    res = client.put("/api/users/1", json=payload)
    assert res.status_code == 400
    assert res.json()["success"] is False


@pytest.mark.parametrize("method", ["put", "delete"])
def test_invalid_user_id(client, method):
    kwargs = {"json": {"name": "X"}} if method == "put" else {}
    res = getattr(client, method)("/api/users/abc", **kwargs)
    assert res.status_code == 400
    assert res.json() == {"success": False, "message": "Invalid user ID"}


def test_delete_user_twice(client, sample_user):
    client.post("/api/users", json=sample_user)
    res = client.delete("/api/users/1")
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "User deleted successfully"}

    res = client.delete("/api/users/1")
    assert res.status_code == 404


def test_full_lifecycle(client, sample_user):
    res = client.post("/api/users", json=sample_user)
    assert res.status_code == 201
    assert res.json()["data"]["id"] == 1

    res = client.put("/api/users/1", json={"status": "inactive"})
    assert res.status_code == 200
    assert res.json()["data"] == {
        "id": 1,
        "name": "A",
        "email": "a@x.com",
        "role": "user",
        "status": "inactive",
    }

    assert client.delete("/api/users/1").status_code == 200
    assert client.get("/api/users").json()["data"] == []


def test_apps_do_not_share_state(sample_user):
    first = TestClient(create_app())
    second = TestClient(create_app())
    first.post("/api/users", json=sample_user)
    assert second.get("/api/users").json()["data"] == []


def test_email_is_stored_as_sent(client, sample_user):
    res = client.post("/api/users", json={**sample_user, "email": "Alice@Example.COM"})
    assert res.status_code == 201
    assert res.json()["data"]["email"] == "Alice@Example.COM"

    res = client.put("/api/users/1", json={"email": "Bob@Mail.COM"})
    assert res.status_code == 200
    assert res.json()["data"]["email"] == "Bob@Mail.COM"
    assert client.get("/api/users").json()["data"][0]["email"] == "Bob@Mail.COM"


def test_user_id_uses_leading_digits(client, sample_user):
    client.post("/api/users", json=sample_user)
    res = client.put("/api/users/1abc", json={"name": "B"})
    assert res.status_code == 200
    assert res.json()["data"]["name"] == "B"

    res = client.delete("/api/users/1.0")
    assert res.status_code == 200
    assert client.get("/api/users").json()["data"] == []


def test_openapi_documents_request_bodies(client):
    spec = client.get("/openapi.json").json()
    create_schema = spec["paths"]["/api/users"]["post"]["requestBody"]["content"]["application/json"]["schema"]
    assert sorted(create_schema["required"]) == ["email", "name", "role", "status"]
    update_schema = spec["paths"]["/api/users/{user_id}"]["put"]["requestBody"]["content"]["application/json"]["schema"]
    assert set(update_schema["properties"]) == {"name", "email", "role", "status"}
    assert update_schema["additionalProperties"] is False
    assert {"UserRole", "UserStatus"} <= set(spec["components"]["schemas"])
