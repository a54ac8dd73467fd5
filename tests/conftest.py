"""
Pytest configuration and fixtures for Thingful tests.
"""

import pytest
from fastapi.testclient import TestClient

from fakes import FakeReviewsRepository, FakeThingsRepository, FakeUsersRepository, InMemoryStore
from thingful.api.deps import get_reviews_repository, get_things_repository, get_users_repository
from thingful.api.main import create_app


@pytest.fixture
def store() -> InMemoryStore:
    """Empty in-memory tables."""
    return InMemoryStore()


@pytest.fixture
def app(store: InMemoryStore):
    """App with the Postgres repositories swapped for in-memory fakes."""
    app = create_app()
    app.dependency_overrides[get_users_repository] = lambda: FakeUsersRepository(store)
    app.dependency_overrides[get_things_repository] = lambda: FakeThingsRepository(store)
    app.dependency_overrides[get_reviews_repository] = lambda: FakeReviewsRepository(store)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """Test client (lifespan not started, so no database connection is made)."""
    return TestClient(app)
