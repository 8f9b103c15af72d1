"""
Database definitions and collection constants.
"""
from ornament_ledger.database.databases import auth_db, inventory_db, pricing_db, system_db

__all__ = ["auth_db", "inventory_db", "pricing_db", "system_db"]
