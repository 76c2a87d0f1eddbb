# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Builds a fresh app + store for every test
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds the default app at import time from the environment

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.services.todo_store import TodoStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Settings for tests, independent of any local .env file."""
    return Settings(_env_file=None, ENVIRONMENT="development", LOG_LEVEL="WARNING")


@pytest.fixture
def store():
    """An empty todo store."""
    todo_store = TodoStore()
    yield todo_store
    todo_store.reset()


@pytest.fixture
def app(settings, store):
    """Application serving the test store."""
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    """HTTP client for the test application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_todo(client):
    """Create a todo over HTTP and return the response body."""
    def _create(text: str) -> dict:
        response = client.post("/api/todos", json={"text": text})
        assert response.status_code == 201
        return response.json()

    return _create
