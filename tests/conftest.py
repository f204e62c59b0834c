"""Pytest configuration and shared fixtures for domoscio-client tests."""

import pytest

from domoscio_client.auth import CredentialResolver, MemoryTokenStore
from domoscio_client.config import Configuration
from domoscio_client.testing import RecordingHandler


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear DOMOSCIO_* environment variables before each test."""
    import os

    for key in list(os.environ.keys()):
        if key.startswith("DOMOSCIO_"):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def resolver():
    """Resolver that never reads a stray .env file."""
    return CredentialResolver(load_dotenv=False)


@pytest.fixture
def config():
    return Configuration(
        root_url="https://api.example.com",
        client_id="42",
        client_passphrase="s3cret",
    )


@pytest.fixture
def token_store():
    return MemoryTokenStore()


@pytest.fixture
def handler():
    return RecordingHandler()
