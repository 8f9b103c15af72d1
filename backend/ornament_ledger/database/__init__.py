"""
Database module - MongoDB connection and database definitions.
"""
from ornament_ledger.database.connections import (
    get_mongo_client,
    close_connections,
    transaction,
)
from ornament_ledger.database.databases import auth_db, inventory_db, pricing_db, system_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "transaction",
    "auth_db",
    "inventory_db",
    "pricing_db",
    "system_db",
]
