"""
Archive log: append-only record of stock removed from circulation.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClientSession, AsyncIOMotorDatabase

from ornament_ledger.database.databases import inventory_db
from ornament_ledger.models.stock import ArchivedEntry
from ornament_ledger.schemas.archive import ArchiveEntryCreate, ArchiveEntryResponse
from ornament_ledger.services.base import store_operation

logger = logging.getLogger(__name__)


class ArchiveLog:
    """
    Write-once, read-many log of archived stock.
    
    There is no update or delete. Every append inserts a new record, so
    submitting the same copy twice yields two records.
    """
    
    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with inventory database."""
        self.db = db
        self.records = db[inventory_db.Collections.ARCHIVE]
    
    @store_operation("fetch history data")
    async def list_entries(self) -> list[ArchiveEntryResponse]:
        """List all archived records in insertion order."""
        cursor = self.records.find().sort("_id", 1)
        docs = await cursor.to_list(length=None)
        return [self._doc_to_response(doc) for doc in docs]
    
    @store_operation("add history item")
    async def append_entry(
        self,
        request: ArchiveEntryCreate,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> ArchiveEntryResponse:
        """Append one archived record."""
        record = ArchivedEntry(**request.model_dump(exclude_none=True))
        doc = record.model_dump(by_alias=True, exclude={"id"})
        
        result = await self.records.insert_one(doc, session=session)
        doc["_id"] = result.inserted_id
        
        logger.info(
            "Archived %s (%s) as %s",
            record.item_name, record.status, result.inserted_id,
        )
        return self._doc_to_response(doc)
    
    def _doc_to_response(self, doc: dict) -> ArchiveEntryResponse:
        record = ArchivedEntry(**{**doc, "_id": str(doc["_id"])})
        return ArchiveEntryResponse(**record.model_dump())
