"""
Database connection management for MongoDB.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorClientSession,
    AsyncIOMotorDatabase,
)

from ornament_ledger.config import get_settings

logger = logging.getLogger(__name__)

# Global connection instance
_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    return _mongo_client


async def close_connections():
    """Close the MongoDB connection."""
    global _mongo_client
    
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None


@asynccontextmanager
async def transaction(
    db: AsyncIOMotorDatabase, enabled: bool
) -> AsyncIterator[Optional[AsyncIOMotorClientSession]]:
    """
    Yield a session bound to an open transaction, or None when disabled.
    
    Writes issued with the yielded session commit together when the block
    exits normally and abort together if it raises. With `enabled` False the
    block runs without a session and each write stands alone.
    """
    if not enabled:
        yield None
        return
    
    async with await db.client.start_session() as session:
        async with session.start_transaction():
            logger.debug("Transaction started on %s", db.name)
            yield session
