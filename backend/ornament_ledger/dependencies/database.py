"""
Database and service dependencies for routes.
"""
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorClient

from ornament_ledger.config import get_settings
from ornament_ledger.database.connections import get_mongo_client
from ornament_ledger.database.databases import auth_db, inventory_db, pricing_db
from ornament_ledger.services.archive_service import ArchiveLog
from ornament_ledger.services.catalog_service import CatalogService
from ornament_ledger.services.credential_service import CredentialService
from ornament_ledger.services.lifecycle_service import InventoryLifecycle
from ornament_ledger.services.price_service import PriceLedger
from ornament_ledger.services.stock_service import ActiveStockLedger


async def get_client() -> AsyncIOMotorClient:
    """Dependency to get the MongoDB client. Tests override this one."""
    return await get_mongo_client()


async def get_active_stock_ledger(
    client: AsyncIOMotorClient = Depends(get_client),
) -> ActiveStockLedger:
    """Dependency to get ActiveStockLedger instance."""
    return ActiveStockLedger(client[inventory_db.DB_NAME])


async def get_archive_log(
    client: AsyncIOMotorClient = Depends(get_client),
) -> ArchiveLog:
    """Dependency to get ArchiveLog instance."""
    return ArchiveLog(client[inventory_db.DB_NAME])


async def get_inventory_lifecycle(
    client: AsyncIOMotorClient = Depends(get_client),
) -> InventoryLifecycle:
    """Dependency to get InventoryLifecycle instance."""
    return InventoryLifecycle(
        client[inventory_db.DB_NAME],
        use_transactions=get_settings().mongo_transactions,
    )


async def get_price_ledger(
    client: AsyncIOMotorClient = Depends(get_client),
) -> PriceLedger:
    """Dependency to get PriceLedger instance."""
    return PriceLedger(
        client[pricing_db.DB_NAME],
        use_transactions=get_settings().mongo_transactions,
    )


async def get_catalog_service(
    client: AsyncIOMotorClient = Depends(get_client),
) -> CatalogService:
    """Dependency to get CatalogService instance."""
    return CatalogService(client[inventory_db.DB_NAME])


async def get_credential_service(
    client: AsyncIOMotorClient = Depends(get_client),
) -> CredentialService:
    """Dependency to get CredentialService instance."""
    return CredentialService(client[auth_db.DB_NAME])
