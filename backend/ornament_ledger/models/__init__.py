"""
Pydantic models for database documents.
"""
from ornament_ledger.models.stock import StockEntry, ArchivedEntry, OrnamentType
from ornament_ledger.models.price import Metal, PriceSnapshot, PriceHistoryRecord
from ornament_ledger.models.catalog import CatalogItem
from ornament_ledger.models.credential import Credential

__all__ = [
    "StockEntry",
    "ArchivedEntry",
    "OrnamentType",
    "Metal",
    "PriceSnapshot",
    "PriceHistoryRecord",
    "CatalogItem",
    "Credential",
]
