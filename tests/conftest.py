import pytest
from fastapi.testclient import TestClient

from services.api.app import create_app
from services.api.config import APIConfig, reset_config
from shared.ai.factory import reset_ai_provider

TEST_API_KEY = "test-api-key-12345"


def make_config(**overrides) -> APIConfig:
    """APIConfig for tests: ignores any .env file and uses the mock provider."""
    values = {
        "api_key": TEST_API_KEY,
        "environment": "test",
        "log_level": "warn",
        "ai_provider": "mock",
        "rate_limit_per_minute": 1000,
    }
    values.update(overrides)
    return APIConfig(_env_file=None, **values)


@pytest.fixture(autouse=True)
def reset_singletons():
    reset_config()
    reset_ai_provider()
    yield
    reset_config()
    reset_ai_provider()


@pytest.fixture
def test_config():
    return make_config()


@pytest.fixture
def app(test_config):
    return create_app(test_config)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    return {"X-API-KEY": TEST_API_KEY}
