"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for testing
routes and services against failing or seeded stores.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError


# =============================================================================
# Store Failure Fixtures
# =============================================================================

@pytest.fixture
def store_failure() -> ServerSelectionTimeoutError:
    """A driver error whose text must never reach API clients."""
    return ServerSelectionTimeoutError("mongodb:27017: [Errno 111] Connection refused")


@pytest.fixture
def failing_collection(store_failure):
    """
    A collection mock whose every operation raises a driver error.

    Cursor-returning calls (find) fail when the cursor is consumed.
    """
    collection = MagicMock()
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.to_list = AsyncMock(side_effect=store_failure)
    collection.find.return_value = cursor
    for name in (
        "find_one",
        "insert_one",
        "find_one_and_update",
        "find_one_and_delete",
        "delete_one",
    ):
        setattr(collection, name, AsyncMock(side_effect=store_failure))
    return collection


@pytest.fixture
def transactional_db():
    """
    A database mock whose client hands out a session with an open transaction.

    Collections are MagicMocks with AsyncMock write methods, created on first
    access by name, so tests can check which session each write received.

    Usage:
        def test_x(transactional_db):
            ledger = PriceLedger(transactional_db.db, use_transactions=True)
            ...
            transactional_db.collections["prices"].find_one_and_update.assert_awaited()
    """
    txn = MagicMock()
    txn.__aenter__ = AsyncMock(return_value=txn)
    txn.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=False)
    session.start_transaction.return_value = txn

    collections: dict = {}

    def _collection(name):
        if name not in collections:
            collection = MagicMock()
            for method in ("insert_one", "find_one_and_update", "find_one_and_delete"):
                setattr(collection, method, AsyncMock())
            collections[name] = collection
        return collections[name]

    db = MagicMock()
    db.__getitem__.side_effect = _collection
    db.client.start_session = AsyncMock(return_value=session)

    return SimpleNamespace(db=db, session=session, txn=txn, collections=collections)


# =============================================================================
# Seed Fixtures
# =============================================================================

@pytest.fixture
def seed_user(mock_auth_db):
    """
    Factory that stores a user through CredentialService.

    Usage:
        async def test_x(seed_user):
            await seed_user("bob", "secret", "Bob Smith")
    """
    from ornament_ledger.services.credential_service import CredentialService

    async def _seed(username: str, password: str, name: str | None = None) -> str:
        return await CredentialService(mock_auth_db).create(username, password, name)

    return _seed


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert
