"""
Tests for database connections and initialization.

These tests cover:
- MongoDB connection initialization
- Transactions
- Index creation
- Database registry sync
"""

import pytest
from unittest.mock import MagicMock, patch


class TestMongoDBConnection:
    """Tests for MongoDB connection handling."""

    @pytest.mark.asyncio
    async def test_get_mongo_client_creates_connection(self):
        """get_mongo_client should create a tz-aware client on first call."""
        import ornament_ledger.database.connections as conn_module

        with patch("ornament_ledger.database.connections.AsyncIOMotorClient") as mock_client, \
             patch("ornament_ledger.database.connections.get_settings") as mock_settings:

            mock_settings.return_value.mongo_uri = "mongodb://test:27017"
            mock_instance = MagicMock()
            mock_client.return_value = mock_instance

            conn_module._mongo_client = None
            try:
                client = await conn_module.get_mongo_client()
                again = await conn_module.get_mongo_client()
            finally:
                conn_module._mongo_client = None

            mock_client.assert_called_once_with("mongodb://test:27017", tz_aware=True)
            assert client is mock_instance
            assert again is mock_instance

    @pytest.mark.asyncio
    async def test_close_connections_cleans_up(self):
        """close_connections should close and forget the client."""
        import ornament_ledger.database.connections as conn_module

        mock_mongo = MagicMock()
        conn_module._mongo_client = mock_mongo

        await conn_module.close_connections()

        mock_mongo.close.assert_called_once()
        assert conn_module._mongo_client is None

    @pytest.mark.asyncio
    async def test_close_connections_without_client_is_noop(self):
        import ornament_ledger.database.connections as conn_module

        conn_module._mongo_client = None

        await conn_module.close_connections()

        assert conn_module._mongo_client is None


class TestTransaction:
    """Tests for the transaction context manager."""

    @pytest.mark.asyncio
    async def test_disabled_yields_no_session(self):
        from ornament_ledger.database.connections import transaction

        db = MagicMock()
        async with transaction(db, enabled=False) as session:
            assert session is None

        db.client.start_session.assert_not_called()

    @pytest.mark.asyncio
    async def test_enabled_yields_session_in_transaction(self, transactional_db):
        from ornament_ledger.database.connections import transaction

        async with transaction(transactional_db.db, enabled=True) as yielded:
            assert yielded is transactional_db.session

        transactional_db.session.start_transaction.assert_called_once()
        transactional_db.txn.__aexit__.assert_awaited_once_with(None, None, None)

    @pytest.mark.asyncio
    async def test_enabled_passes_errors_to_transaction(self, transactional_db):
        """An error in the block reaches the transaction so it aborts."""
        from ornament_ledger.database.connections import transaction

        with pytest.raises(ValueError):
            async with transaction(transactional_db.db, enabled=True):
                raise ValueError("boom")

        exc_type = transactional_db.txn.__aexit__.await_args.args[0]
        assert exc_type is ValueError


class TestDatabaseRegistry:
    """Tests for database registry synchronization."""

    @pytest.mark.asyncio
    async def test_registry_lists_every_database(self, mock_async_mongo_client):
        """Registry sync should create one entry per database."""
        from ornament_ledger.database.registry import sync_registry

        await sync_registry(mock_async_mongo_client)

        registry = mock_async_mongo_client["system_db"].db_registry
        names = sorted(doc["_id"] for doc in await registry.find().to_list(length=None))
        assert names == ["auth_db", "inventory_db", "pricing_db", "system_db"]

        inventory = await registry.find_one({"_id": "inventory_db"})
        assert set(inventory["collections"]) >= {"active_stock", "archive", "catalog"}

    @pytest.mark.asyncio
    async def test_registry_sync_is_idempotent(self, mock_async_mongo_client):
        """Re-syncing keeps created_at and doesn't duplicate entries."""
        from ornament_ledger.database.registry import sync_registry

        registry = mock_async_mongo_client["system_db"].db_registry

        await sync_registry(mock_async_mongo_client)
        first = await registry.find_one({"_id": "pricing_db"})
        await sync_registry(mock_async_mongo_client)
        second = await registry.find_one({"_id": "pricing_db"})

        assert await registry.count_documents({}) == 4
        assert second["created_at"] == first["created_at"]


class TestIndexCreation:
    """Tests for index creation on collections."""

    @pytest.mark.asyncio
    async def test_username_index_is_unique(self, mock_auth_db):
        """Credentials collection should have a unique username index."""
        indexes = await mock_auth_db.credentials.index_information()

        username_indexes = [
            idx for idx in indexes.values() if idx["key"] == [("username", 1)]
        ]
        assert len(username_indexes) == 1
        assert username_indexes[0].get("unique") is True

    @pytest.mark.asyncio
    async def test_price_history_index(self, mock_pricing_db):
        """Price history is indexed newest first."""
        indexes = await mock_pricing_db.price_history.index_information()

        assert any("updated_at" in str(idx) for idx in indexes.values())

    @pytest.mark.asyncio
    async def test_active_stock_index(self, mock_inventory_db):
        """Active stock is indexed by date."""
        indexes = await mock_inventory_db.active_stock.index_information()

        assert any("date" in str(idx) for idx in indexes.values())
