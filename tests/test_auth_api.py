"""
API tests for /auth and the error envelope.
"""
from datetime import datetime, timedelta, timezone

from restaurant_api.core.config import jwt_settings
from restaurant_api.security.tokens import create_access_token

from conftest import API, bearer, login, register


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"


# ==============================
# Register
# ==============================
class TestRegister:

    def test_register_creates_plain_user(self, client):
        response = register(client, "carol@example.com", name="Carol")

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "carol@example.com"
        assert data["name"] == "Carol"
        assert data["role"] == "user"
        assert "hashed_password" not in data
        assert "password" not in data

    def test_register_twice_is_conflict(self, client):
        assert register(client, "carol@example.com").status_code == 201

        response = register(client, "carol@example.com", name="Carol Bis")

        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "conflict"
        assert body["detail"] == "user with this email already exists"

    def test_register_validation_error(self, client):
        response = client.post(f"{API}/auth/register", json={"name": "C", "email": "nope", "password": "short"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["message"] == "Validation failed"
        fields = {tuple(err["loc"])[-1] for err in body["detail"]}
        assert {"name", "email", "password"} <= fields


# ==============================
# Login
# ==============================
class TestLogin:

    def test_login_returns_bearer_token(self, client):
        register(client, "dave@example.com", name="Dave")

        response = login(client, "dave@example.com")

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["expires_in"] == 24 * 3600
        assert data["user"]["email"] == "dave@example.com"
        assert data["access_token"]

    def test_wrong_password_is_unauthorized(self, client):
        register(client, "dave@example.com")

        response = login(client, "dave@example.com", password="wrong-password")

        assert response.status_code == 401
        assert response.json()["error"] == "unauthorized"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_unknown_email_is_unauthorized(self, client):
        response = login(client, "ghost@example.com")

        assert response.status_code == 401
        assert response.json()["detail"] == "invalid email or password"


# ==============================
# Bearer handling
# ==============================
class TestBearer:

    def test_me_returns_current_user(self, client, alice):
        alice_id, headers = alice

        response = client.get(f"{API}/auth/me", headers=headers)

        assert response.status_code == 200
        assert response.json()["id"] == alice_id

    def test_missing_header_is_unauthorized(self, client):
        response = client.get(f"{API}/users/1")
        assert response.status_code == 401
        assert response.json()["error"] == "unauthorized"

    def test_expired_token_is_unauthorized(self, client, alice):
        alice_id, _ = alice
        issued = datetime.now(timezone.utc) - timedelta(hours=25)
        token = create_access_token(
            user_id=alice_id,
            email="alice@example.com",
            role="user",
            settings=jwt_settings,
            now=issued,
        )

        response = client.get(f"{API}/users/{alice_id}", headers=bearer(token))

        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"

    def test_tampered_token_is_unauthorized(self, client, alice):
        alice_id, headers = alice
        headers = {"Authorization": headers["Authorization"] + "x"}

        response = client.get(f"{API}/users/{alice_id}", headers=headers)

        assert response.status_code == 401
