"""
Shared pytest fixtures for the Task API test suite.
"""
import pytest
from fastapi.testclient import TestClient

from task_api.core.config import Settings
from task_api.core.store import TaskStore
from task_api.main import create_app


@pytest.fixture
def settings(tmp_path):
    """Settings with the Swagger document redirected into tmp_path."""
    test_settings = Settings()
    test_settings.swagger_file = str(tmp_path / "swagger.json")
    return test_settings


@pytest.fixture
def store():
    """Freshly seeded store."""
    return TaskStore()


@pytest.fixture
def app(settings):
    """Fresh application, and therefore a fresh store, for each test."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client with startup events run."""
    with TestClient(app) as test_client:
        yield test_client
