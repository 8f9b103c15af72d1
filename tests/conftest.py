"""
Global test fixtures for Ornament Ledger.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Request payload factories
- FastAPI test clients wired to the mock database
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# Cheap hashing for tests; must be set before settings are first read
os.environ.setdefault("BCRYPT_ROUNDS", "4")


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    Like the application client it is tz_aware, and indexes are created the
    same way the application does on startup.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
    except ImportError:
        pytest.skip("mongomock-motor not installed")

    from ornament_ledger.database.registry import create_indexes

    client = AsyncMongoMockClient(tz_aware=True)
    await create_indexes(client)
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_inventory_db(mock_async_mongo_client):
    """Provide mock inventory_db database."""
    yield mock_async_mongo_client["inventory_db"]


@pytest_asyncio.fixture
async def mock_pricing_db(mock_async_mongo_client):
    """Provide mock pricing_db database."""
    yield mock_async_mongo_client["pricing_db"]


@pytest_asyncio.fixture
async def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth_db database."""
    yield mock_async_mongo_client["auth_db"]


# =============================================================================
# Payload Fixtures
# =============================================================================

@pytest.fixture
def stock_payload() -> dict:
    """A valid create-active-stock request body."""
    return {
        "itemName": "Ring",
        "productGivenTo": "Alice",
        "weight": 10,
        "author": "bob",
    }


@pytest.fixture
def archive_payload() -> dict:
    """A valid append-archive request body, as a client copies it after delete."""
    return {
        "itemName": "Chain",
        "productGivenTo": "Carol",
        "weight": 24.5,
        "pieces": 2,
        "ornamentType": "Silver",
        "date": "2024-10-01T09:30:00Z",
        "author": "bob",
        "status": "Deleted",
        "deletionDate": "2024-10-15T12:00:00Z",
    }


@pytest.fixture
def catalog_payload() -> dict:
    """A valid add-catalog-item request body."""
    return {
        "itemname": "Bangle",
        "weight": 15.2,
        "pieces": 4,
        "type": "Gold",
        "author": "bob",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    Create FastAPI app for testing.

    Note: This imports the actual app and should be used with mocked
    database connections.
    """
    from ornament_ledger.main import app
    return app


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    The lifespan runs against an in-memory MongoDB so startup never tries to
    reach a real server.
    """
    from mongomock_motor import AsyncMongoMockClient

    mongo = AsyncMongoMockClient(tz_aware=True)
    with patch("ornament_ledger.main.get_mongo_client", AsyncMock(return_value=mongo)):
        with TestClient(app) as c:
            yield c


@pytest_asyncio.fixture
async def async_client(app, mock_async_mongo_client):
    """
    Create an async test client whose routes use the mock MongoDB.

    Use this for testing async endpoints.
    """
    from httpx import AsyncClient, ASGITransport
    from ornament_ledger.dependencies.database import get_client

    async def _get_client():
        return mock_async_mongo_client

    app.dependency_overrides[get_client] = _get_client
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


# =============================================================================
# Utility Fixtures
# =============================================================================

@pytest.fixture
def assert_datetime_recent():
    """
    Fixture providing a helper to assert a datetime is recent.

    Naive timestamps are read as UTC.

    Usage:
        def test_something(assert_datetime_recent):
            assert_datetime_recent(response["date"], max_age_seconds=60)
    """
    def _assert_recent(datetime_str: str, max_age_seconds: int = 60):
        if datetime_str.endswith("Z"):
            datetime_str = datetime_str.replace("Z", "+00:00")

        dt = datetime.fromisoformat(datetime_str)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        now = datetime.now(timezone.utc)
        age = (now - dt).total_seconds()

        assert age < max_age_seconds, f"Datetime {datetime_str} is {age}s old, expected < {max_age_seconds}s"
        assert age >= -1, f"Datetime {datetime_str} is in the future"

    return _assert_recent
