"""
Request and response schemas for API endpoints.
"""
from ornament_ledger.schemas.stock import StockEntryCreate, StockEntryResponse, MessageResponse
from ornament_ledger.schemas.archive import (
    ArchiveEntryCreate,
    ArchiveEntryResponse,
    RetireRequest,
)
from ornament_ledger.schemas.price import (
    PriceUpdate,
    GoldPriceUpdate,
    SilverPriceUpdate,
    PriceSnapshotResponse,
    PriceHistoryResponse,
)
from ornament_ledger.schemas.catalog import (
    CatalogItemCreate,
    CatalogItemUpdate,
    CatalogItemResponse,
)
from ornament_ledger.schemas.credential import (
    LoginRequest,
    UserDetailsResponse,
    UserUpdateRequest,
)

__all__ = [
    # Active stock
    "StockEntryCreate",
    "StockEntryResponse",
    "MessageResponse",
    # Archive
    "ArchiveEntryCreate",
    "ArchiveEntryResponse",
    "RetireRequest",
    # Prices
    "PriceUpdate",
    "GoldPriceUpdate",
    "SilverPriceUpdate",
    "PriceSnapshotResponse",
    "PriceHistoryResponse",
    # Catalog
    "CatalogItemCreate",
    "CatalogItemUpdate",
    "CatalogItemResponse",
    # Credentials
    "LoginRequest",
    "UserDetailsResponse",
    "UserUpdateRequest",
]
