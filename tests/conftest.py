# tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from builder_server.core.config import Settings
from builder_server.main import create_app


TEST_SETTINGS = {
    "database_url": "sqlite://",
    "bcrypt_rounds": 4,
    "cors_origins": ["*"],
    "log_level": "WARNING",
    "expose_internal_errors": False,
}


@pytest.fixture
def make_settings():
    def _make_settings(**overrides) -> Settings:
        return Settings(**{**TEST_SETTINGS, **overrides})
    return _make_settings


@pytest.fixture
def settings(make_settings):
    return make_settings()


@pytest.fixture
def app(settings):
    app = create_app(settings)
    yield app
    app.state.engine.dispose()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def signup(client):
    def _signup(username="alice", password="secret123"):
        return client.post("/api/signup", json={"username": username, "password": password})
    return _signup


@pytest.fixture
def login(client):
    def _login(username="alice", password="secret123"):
        return client.post("/api/login", json={"username": username, "password": password})
    return _login


@pytest.fixture
def user_id(signup, login):
    signup()
    return login().json()["userId"]
