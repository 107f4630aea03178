"""Pytest configuration and fixtures for testing.

This module provides shared fixtures that give every test its own empty
in-memory task store.
"""

import pytest
from fastapi.testclient import TestClient

from task_tracker_svc.api.app import app
from task_tracker_svc.store import TaskStore, get_store


@pytest.fixture(scope="function")
def store():
    """Create an empty task store for testing.

    Yields:
        TaskStore instance isolated to a single test.
    """
    task_store = TaskStore()

    yield task_store

    task_store.clear()


@pytest.fixture(scope="function")
def client(store):
    """Create a FastAPI test client with store dependency override.

    Args:
        store: Task store fixture for dependency injection.

    Yields:
        TestClient instance configured with the test store.
    """
    # Override the get_store dependency to use our test store
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    # Clean up dependency override
    app.dependency_overrides.clear()
