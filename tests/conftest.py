"""
Fixtures communes : base SQLite en mémoire par test et TestClient branché dessus.
Run with: pytest -v
"""
import os

os.environ.setdefault("ENV", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from restaurant_api.db.seed import seed_admin
from restaurant_api.db.session import get_session
from restaurant_api.main import app

API = "/api/v1"
PASSWORD = "s3cretpass"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


# ==============================
# Helpers
# ==============================
def register(client, email, name="Test User", password=PASSWORD):
    return client.post(f"{API}/auth/register", json={"name": name, "email": email, "password": password})


def login(client, email, password=PASSWORD):
    return client.post(f"{API}/auth/login", json={"email": email, "password": password})


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


def signup_and_login(client, email, name="Test User"):
    """Crée un compte et retourne (user_id, headers)."""
    user = register(client, email, name=name).json()
    token = login(client, email).json()["access_token"]
    return user["id"], bearer(token)


@pytest.fixture
def alice(client):
    return signup_and_login(client, "alice@example.com", name="Alice")


@pytest.fixture
def bob(client):
    return signup_and_login(client, "bob@example.com", name="Bob")


@pytest.fixture
def admin(client, session):
    user = seed_admin(session, email="admin@example.com", password=PASSWORD, name="Admin")
    token = login(client, "admin@example.com").json()["access_token"]
    return user.id, bearer(token)


def create_restaurant(client, headers, **overrides):
    body = {
        "name": "Chez Paulette",
        "description": "Bouchon lyonnais",
        "address": "12 rue des Lilas, Lyon",
        "phone": "0478000000",
    }
    body.update(overrides)
    return client.post(f"{API}/restaurants", json=body, headers=headers)
