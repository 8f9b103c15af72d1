"""
API Routers module.
"""
from ornament_ledger.routers import active_stock, archive, catalog, credentials, health, prices

__all__ = ["active_stock", "archive", "catalog", "credentials", "health", "prices"]
