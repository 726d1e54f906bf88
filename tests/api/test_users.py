"""
API tests for user endpoints.

Uses FastAPI TestClient against a fresh app per test.
"""

import pytest
from fastapi.testclient import TestClient

from devgraph.api.main import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


class TestUserEndpoints:
    """Tests for POST/GET/PUT /api/users and GET /api/users/{username}/connections."""

    def test_create_user(self, client):
        """POST /api/users creates a user and returns 201 with normalized interests."""
        payload = {
            "username": "ferris",
            "bio": "Friendly crab",
            "interests": ["Async", " wasm ", "async", ""],
        }
        r = client.post("/api/users", json=payload)
        assert r.status_code == 201
        data = r.json()
        assert data["username"] == "ferris"
        assert data["bio"] == "Friendly crab"
        assert data["interests"] == ["async", "wasm"]

    def test_create_user_minimal(self, client):
        """POST /api/users accepts a missing bio and interests."""
        r = client.post("/api/users", json={"username": "ferris"})
        assert r.status_code == 201
        assert r.json() == {"username": "ferris", "bio": "", "interests": []}

    def test_create_user_duplicate(self, client):
        """POST /api/users with a taken username returns 409 and keeps the original."""
        client.post("/api/users", json={"username": "ferris", "bio": "first", "interests": ["async"]})
        r = client.post("/api/users", json={"username": "ferris", "bio": "second", "interests": ["cli"]})
        assert r.status_code == 409
        assert "already exists" in r.json()["detail"]

        data = client.get("/api/users/ferris").json()
        assert data["bio"] == "first"
        assert data["interests"] == ["async"]

    def test_create_user_blank_interests(self, client):
        """POST /api/users whose interests are all blank returns 400."""
        r = client.post("/api/users", json={"username": "ferris", "interests": ["  ", ""]})
        assert r.status_code == 400

    def test_create_user_missing_username(self, client):
        r = client.post("/api/users", json={"bio": "anonymous"})
        assert r.status_code == 422

    def test_get_user(self, client):
        client.post("/api/users", json={"username": "ferris", "interests": ["async"]})
        r = client.get("/api/users/ferris")
        assert r.status_code == 200
        assert r.json()["username"] == "ferris"

    def test_get_user_not_found(self, client):
        """GET /api/users/{username} returns 404 for unknown user."""
        r = client.get("/api/users/nobody")
        assert r.status_code == 404
        assert "not found" in r.json()["detail"].lower()

    def test_list_users(self, client):
        for name in ["zed", "alice"]:
            client.post("/api/users", json={"username": name, "interests": ["rust"]})
        r = client.get("/api/users")
        assert r.status_code == 200
        data = r.json()
        assert data["total"] == 2
        assert [u["username"] for u in data["users"]] == ["alice", "zed"]

    def test_update_user_replaces_interests(self, client):
        """PUT /api/users/{username} replaces interests and re-indexes them."""
        client.post("/api/users", json={"username": "ferris", "bio": "crab", "interests": ["async"]})
        r = client.put("/api/users/ferris", json={"interests": ["CLI"]})
        assert r.status_code == 200
        assert r.json() == {"username": "ferris", "bio": "crab", "interests": ["cli"]}

        assert client.get("/api/interests/async/users").json()["usernames"] == []
        assert client.get("/api/interests/cli/users").json()["usernames"] == ["ferris"]

    def test_update_user_not_found(self, client):
        r = client.put("/api/users/nobody", json={"bio": "hi"})
        assert r.status_code == 404

    def test_get_user_connections(self, client):
        for name in ["ferris", "crab", "rustacean"]:
            client.post("/api/users", json={"username": name, "interests": ["rust"]})
        client.post("/api/connections", json={
            "from": "ferris", "to": "crab", "kind": "Mentor", "tags": [], "since": "2024-01-15",
        })
        client.post("/api/connections", json={
            "from": "rustacean", "to": "ferris", "kind": "Follower", "tags": [], "since": "2024-02-01",
        })

        r = client.get("/api/users/ferris/connections")
        assert r.status_code == 200
        data = r.json()
        assert data["username"] == "ferris"
        assert [(c["to"], c["kind"]) for c in data["outgoing"]] == [("crab", "Mentor")]
        assert [(c["from"], c["kind"]) for c in data["incoming"]] == [("rustacean", "Follower")]

    def test_get_user_connections_not_found(self, client):
        r = client.get("/api/users/nobody/connections")
        assert r.status_code == 404
