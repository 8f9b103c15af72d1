"""
Active stock ledger: outstanding ornament stock issued to recipients.
"""
import logging
from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClientSession, AsyncIOMotorDatabase

from ornament_ledger.core.exceptions import NotFoundError
from ornament_ledger.database.databases import inventory_db
from ornament_ledger.models.stock import StockEntry
from ornament_ledger.schemas.stock import StockEntryCreate, StockEntryResponse
from ornament_ledger.services.base import store_operation

logger = logging.getLogger(__name__)


class ActiveStockLedger:
    """
    Service for the active stock collection.
    
    Entries are only created and deleted, never updated. Deleting an entry
    does not archive it; see InventoryLifecycle for that.
    """
    
    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with inventory database."""
        self.db = db
        self.entries = db[inventory_db.Collections.ACTIVE_STOCK]
    
    @store_operation("fetch stock data")
    async def list_entries(self) -> list[StockEntryResponse]:
        """List all active entries, newest first."""
        cursor = self.entries.find().sort("date", -1)
        docs = await cursor.to_list(length=None)
        return [self._doc_to_response(doc) for doc in docs]
    
    @store_operation("add stock")
    async def create_entry(self, request: StockEntryCreate) -> StockEntryResponse:
        """
        Persist a new entry.
        
        Defaults: pieces=0, ornamentType=Gold, date=now.
        """
        entry = StockEntry(**request.model_dump(exclude_none=True))
        doc = entry.model_dump(by_alias=True, exclude={"id"})
        
        result = await self.entries.insert_one(doc)
        doc["_id"] = result.inserted_id
        
        logger.info(
            "Added stock %s: %s (%sg) given to %s",
            result.inserted_id, entry.item_name, entry.weight, entry.product_given_to,
        )
        return self._doc_to_response(doc)
    
    @store_operation("delete stock item")
    async def delete_entry(
        self,
        entry_id: str,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> StockEntryResponse:
        """
        Remove an entry and return what was removed.
        
        Raises:
            NotFoundError: If no entry has this ID (malformed IDs included)
        """
        if not ObjectId.is_valid(entry_id):
            raise NotFoundError("Stock item", entry_id)
        
        doc = await self.entries.find_one_and_delete(
            {"_id": ObjectId(entry_id)},
            session=session,
        )
        if doc is None:
            raise NotFoundError("Stock item", entry_id)
        
        logger.info("Deleted stock %s", entry_id)
        return self._doc_to_response(doc)
    
    # ==================== Helpers ====================
    
    def _doc_to_response(self, doc: dict) -> StockEntryResponse:
        """Convert MongoDB document to response."""
        entry = StockEntry(**{**doc, "_id": str(doc["_id"])})
        return StockEntryResponse(**entry.model_dump())
