"""
Inventory lifecycle: moving stock from the active ledger into the archive.

Two ways to retire stock:

1. Two calls, sequenced by the client: DELETE the active entry, then POST a
   copy of it (with status and deletion date) to the archive. Nothing ties
   the two together; skipping the second call loses the audit record.
2. `InventoryLifecycle.retire`, which does both in one request. With
   MONGO_TRANSACTIONS enabled the removal and the append commit together.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from ornament_ledger.database.connections import transaction
from ornament_ledger.schemas.archive import ArchiveEntryCreate, ArchiveEntryResponse
from ornament_ledger.schemas.stock import StockEntryResponse
from ornament_ledger.services.archive_service import ArchiveLog
from ornament_ledger.services.base import store_operation
from ornament_ledger.services.stock_service import ActiveStockLedger

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Deleted"


def archive_copy(
    entry: StockEntryResponse,
    status: str = DEFAULT_STATUS,
    deletion_date: Optional[datetime] = None,
) -> ArchiveEntryCreate:
    """Build the archive request for a removed active entry."""
    return ArchiveEntryCreate(
        item_name=entry.item_name,
        product_given_to=entry.product_given_to,
        weight=entry.weight,
        pieces=entry.pieces,
        ornament_type=entry.ornament_type,
        date=entry.date,
        author=entry.author,
        status=status,
        deletion_date=deletion_date or datetime.now(timezone.utc),
    )


class InventoryLifecycle:
    """Orchestrates ActiveStockLedger and ArchiveLog."""
    
    def __init__(self, db: AsyncIOMotorDatabase, use_transactions: bool = False):
        """Initialize with inventory database."""
        self.db = db
        self.stock = ActiveStockLedger(db)
        self.archive = ArchiveLog(db)
        self.use_transactions = use_transactions
    
    @store_operation("retire stock item")
    async def retire(self, entry_id: str, status: str = DEFAULT_STATUS) -> ArchiveEntryResponse:
        """
        Remove an active entry and archive a copy of it.
        
        Raises:
            NotFoundError: If the entry does not exist (nothing is archived)
            StoreError: If either write fails. Without transactions a failed
                append leaves the entry removed and unarchived.
        """
        async with transaction(self.db, self.use_transactions) as session:
            removed = await self.stock.delete_entry(entry_id, session=session)
            record = await self.archive.append_entry(
                archive_copy(removed, status=status),
                session=session,
            )
        
        logger.info("Retired stock %s into archive record %s", entry_id, record.id)
        return record
