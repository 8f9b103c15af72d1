"""
Database registry management.
Ensures all databases and collections are registered on startup.
"""
from datetime import datetime, timezone
from motor.motor_asyncio import AsyncIOMotorClient

from ornament_ledger.database.databases import auth_db, inventory_db, pricing_db, system_db

# All database manifests
ALL_DB_MANIFESTS = [
    inventory_db.DB_MANIFEST,
    pricing_db.DB_MANIFEST,
    auth_db.DB_MANIFEST,
    system_db.DB_MANIFEST,
]


async def sync_registry(client: AsyncIOMotorClient) -> None:
    """
    Synchronize the database registry on application startup.
    Ensures all databases are registered in system_db.db_registry.
    """
    sys_db = client[system_db.DB_NAME]
    registry_collection = sys_db[system_db.Collections.DB_REGISTRY]
    now = datetime.now(timezone.utc)
    
    for manifest in ALL_DB_MANIFESTS:
        db_name = manifest["db_name"]
        
        await registry_collection.update_one(
            {"_id": db_name},
            {
                "$set": {
                    "purpose": manifest["purpose"],
                    "collections": manifest["collections"],
                    "access_level": manifest["access_level"],
                    "schema_version": "1.0",
                    "updated_at": now,
                },
                "$setOnInsert": {
                    "created_at": now,
                }
            },
            upsert=True,
        )


async def create_indexes(client: AsyncIOMotorClient) -> None:
    """Create necessary indexes for all databases."""
    
    # Inventory DB indexes
    inventory = client[inventory_db.DB_NAME]
    await inventory[inventory_db.Collections.ACTIVE_STOCK].create_index([("date", -1)])
    
    # Pricing DB indexes
    pricing = client[pricing_db.DB_NAME]
    await pricing[pricing_db.Collections.PRICE_HISTORY].create_index(
        [("updated_at", -1), ("_id", -1)]
    )
    await pricing[pricing_db.Collections.PRICE_HISTORY].create_index("type")
    
    # Auth DB indexes
    credentials = client[auth_db.DB_NAME][auth_db.Collections.CREDENTIALS]
    await credentials.create_index("username", unique=True)
