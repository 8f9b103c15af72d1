"""
Dependencies for dependency injection in routes.
"""
from ornament_ledger.dependencies.database import (
    get_client,
    get_active_stock_ledger,
    get_archive_log,
    get_inventory_lifecycle,
    get_price_ledger,
    get_catalog_service,
    get_credential_service,
)

__all__ = [
    "get_client",
    "get_active_stock_ledger",
    "get_archive_log",
    "get_inventory_lifecycle",
    "get_price_ledger",
    "get_catalog_service",
    "get_credential_service",
]
