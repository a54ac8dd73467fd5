"""
Pytest configuration for integration tests.

Integration tests run the API against a real PostgreSQL database named by
TEST_DB_URL and are skipped when it is not set. Tables are created once per
session and truncated around every test.
"""

import pytest
from fastapi.testclient import TestClient

from pg_seed import TEST_DB_URL, run_with_db
from thingful.api.main import create_app
from thingful.cli.commands.db import install_sql_path
from thingful.services.postgres import PostgresService
from thingful.services.seed import clean_tables


def pytest_collection_modifyitems(items):
    """Add markers to integration tests."""
    for item in items:
        if "integration" in item.path.parts:
            item.add_marker(pytest.mark.integration)
            if not TEST_DB_URL:
                item.add_marker(pytest.mark.skip(reason="TEST_DB_URL not set"))


@pytest.fixture(scope="session", autouse=True)
def install_schema():
    if TEST_DB_URL:

        async def install(db: PostgresService) -> None:
            await db.execute(install_sql_path().read_text(encoding="utf-8"))

        run_with_db(install)
    yield


@pytest.fixture(autouse=True)
def clean_database():
    if TEST_DB_URL:
        run_with_db(clean_tables)
    yield
    if TEST_DB_URL:
        run_with_db(clean_tables)


@pytest.fixture
def pg_client():
    """Test client with the lifespan running against TEST_DB_URL."""
    with TestClient(create_app(db=PostgresService(TEST_DB_URL))) as client:
        yield client
