"""Shared pytest fixtures for greeter-service tests."""

import socket

import pytest

from greeter_service.app import create_app
from greeter_service.config import Environment, GreeterConfig

_GREETER_ENV = ("PORT", "NAME", "APP_ENV", "PERMITTED_HOSTS")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without any greeter environment variables."""
    for var in _GREETER_ENV:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config():
    """Development-mode config (host authorization disabled)."""
    return GreeterConfig()


@pytest.fixture
def app(config):
    """Create a Flask test app."""
    return create_app(config, testing=True)


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def production_client():
    """Test client with host authorization enforced."""
    flask_app = create_app(
        GreeterConfig(
            environment=Environment.PRODUCTION,
            permitted_hosts=("greeter.example.com", ".internal"),
        ),
        testing=True,
    )
    return flask_app.test_client()


@pytest.fixture
def free_port():
    """A TCP port that was free a moment ago."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]
