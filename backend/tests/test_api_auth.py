"""
Tests — Login endpoint and audit trail
=========================================
"""

from models.users import User
from services.auth import PlaintextAuthenticator
from utils.dependencies import get_authenticator
from utils.errors import InvalidCredentialsError


class TestLogin:
    def test_valid_credentials(self, client):
        resp = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
        assert resp.status_code == 200
        assert resp.json() == {"user": {"id": 1, "username": "admin"}}

    def test_wrong_password(self, client):
        resp = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})
        assert resp.status_code == 401
        assert resp.json()["message"] == "Invalid credentials"

    def test_unknown_user(self, client):
        resp = client.post("/api/auth/login", json={"username": "ghost", "password": "x"})
        assert resp.status_code == 401

    def test_missing_fields(self, client):
        resp = client.post("/api/auth/login", json={"username": ""})
        assert resp.status_code == 400
        body = resp.json()
        assert body["message"] == "Invalid input"
        fields = {e["field"] for e in body["errors"]}
        assert "body.username" in fields
        assert "body.password" in fields

    def test_attempts_are_audited(self, client):
        client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
        client.post("/api/auth/login", json={"username": "admin", "password": "bad"})

        page = client.get("/api/logs", params={"action": "LOGIN"}).json()
        assert page["total"] == 2
        assert [item["status"] for item in page["items"]] == ["FAIL", "SUCCESS"]
        assert page["items"][1]["userId"] == 1

    def test_authenticator_is_pluggable(self, client):
        from main import app

        class DenyAll:
            def authenticate(self, username, password):
                raise InvalidCredentialsError("Login disabled")

        app.dependency_overrides[get_authenticator] = lambda: DenyAll()
        try:
            resp = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
        finally:
            app.dependency_overrides.clear()
        assert resp.status_code == 401
        assert resp.json()["message"] == "Login disabled"


class TestPlaintextAuthenticator:
    def test_returns_matching_user(self, store):
        user = PlaintextAuthenticator(store).authenticate("admin", "admin123")
        assert isinstance(user, User)
        assert user.username == "admin"
