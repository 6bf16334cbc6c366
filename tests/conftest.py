"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from slack_calculator.app import app
from slack_calculator.config import get_settings

TEST_ENV = {
    "STORAGE_BUCKET_NAME": "test-bucket",
    "SLACK_SIGNING_SECRET_PATH": "slack/signing-secret.enc",
    "CRYPTO_KEY_PATH": "projects/p/locations/global/keyRings/r/cryptoKeys/k",
}


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch):
    """Provide a complete environment and a fresh settings cache for every test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)
