# tests/helpers.py

from fastapi.testclient import TestClient


def register(client: TestClient, username: str = "alice", **overrides) -> dict:
    body = {
        "username": username,
        "password": "pw123",
        "email": f"{username}@x.com",
        "mobile": "555",
    }
    body.update(overrides)
    response = client.post("/api/auth/register", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
