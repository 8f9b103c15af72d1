"""
Services module - ledger and peripheral resource logic.
"""
from ornament_ledger.services.stock_service import ActiveStockLedger
from ornament_ledger.services.archive_service import ArchiveLog
from ornament_ledger.services.price_service import PriceLedger
from ornament_ledger.services.lifecycle_service import InventoryLifecycle, archive_copy
from ornament_ledger.services.catalog_service import CatalogService
from ornament_ledger.services.credential_service import CredentialService

__all__ = [
    "ActiveStockLedger",
    "ArchiveLog",
    "PriceLedger",
    "InventoryLifecycle",
    "archive_copy",
    "CatalogService",
    "CredentialService",
]
