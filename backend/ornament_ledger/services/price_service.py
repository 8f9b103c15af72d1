"""
Price ledger: the current gold/silver snapshot plus its audit trail.
"""
import logging
import math
from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from ornament_ledger.core.exceptions import ValidationError
from ornament_ledger.database.connections import transaction
from ornament_ledger.database.databases import pricing_db
from ornament_ledger.models.price import Metal, PriceHistoryRecord, PriceSnapshot
from ornament_ledger.schemas.price import PriceHistoryResponse, PriceSnapshotResponse
from ornament_ledger.services.base import store_operation

logger = logging.getLogger(__name__)


class PriceLedger:
    """
    Service for price reads and writes.
    
    Every write goes through `_record_prices`, which upserts the snapshot
    document and appends exactly one history record per metal present in the
    write. Absent metals keep their snapshot value and get no record.
    
    The snapshot upsert is a single atomic find_one_and_update. The history
    appends are separate inserts unless `use_transactions` is set, in which
    case all of them commit together.
    """
    
    def __init__(self, db: AsyncIOMotorDatabase, use_transactions: bool = False):
        """Initialize with pricing database."""
        self.db = db
        self.prices = db[pricing_db.Collections.PRICES]
        self.history = db[pricing_db.Collections.PRICE_HISTORY]
        self.use_transactions = use_transactions
    
    # ==================== Reads ====================
    
    @store_operation("fetch prices")
    async def get_current(self) -> Optional[PriceSnapshotResponse]:
        """Get the snapshot, or None if prices were never written."""
        doc = await self.prices.find_one({"_id": pricing_db.SNAPSHOT_ID})
        if doc is None:
            return None
        return self._snapshot_to_response(doc)
    
    @store_operation("fetch price history")
    async def get_history(self) -> list[PriceHistoryResponse]:
        """All history records, most recent write first."""
        cursor = self.history.find().sort([("updated_at", -1), ("_id", -1)])
        docs = await cursor.to_list(length=None)
        return [self._history_to_response(doc) for doc in docs]
    
    # ==================== Writes ====================
    
    @store_operation("update prices")
    async def update_both(
        self,
        gold_price: Optional[float] = None,
        silver_price: Optional[float] = None,
    ) -> PriceSnapshotResponse:
        """Set whichever prices are given, leaving the others unchanged."""
        return await self._record_prices(
            {Metal.GOLD: gold_price, Metal.SILVER: silver_price}
        )
    
    @store_operation("update gold price")
    async def update_gold(self, gold_price: Optional[float]) -> PriceSnapshotResponse:
        """
        Set the gold price only.
        
        Raises:
            ValidationError: If gold_price is missing
        """
        if gold_price is None:
            raise ValidationError("Gold price is required")
        return await self._record_prices({Metal.GOLD: gold_price})
    
    @store_operation("update silver price")
    async def update_silver(self, silver_price: Optional[float]) -> PriceSnapshotResponse:
        """
        Set the silver price only.
        
        Raises:
            ValidationError: If silver_price is missing
        """
        if silver_price is None:
            raise ValidationError("Silver price is required")
        return await self._record_prices({Metal.SILVER: silver_price})
    
    async def _record_prices(
        self, prices: dict[Metal, Optional[float]]
    ) -> PriceSnapshotResponse:
        present = {metal: price for metal, price in prices.items() if price is not None}
        for metal, price in present.items():
            if not math.isfinite(price):
                raise ValidationError(f"{metal.value.capitalize()} price must be a finite number")
            if price < 0:
                raise ValidationError(f"{metal.value.capitalize()} price must not be negative")
        
        now = datetime.now(timezone.utc)
        update: dict = {}
        if present:
            update["$set"] = {
                **{metal.price_field: price for metal, price in present.items()},
                "updated_at": now,
            }
        # A snapshot created by this write starts with null for absent metals
        absent = [metal.price_field for metal in Metal if metal not in present]
        if absent:
            update["$setOnInsert"] = {field: None for field in absent}
        
        async with transaction(self.db, self.use_transactions) as session:
            doc = await self.prices.find_one_and_update(
                {"_id": pricing_db.SNAPSHOT_ID},
                update,
                upsert=True,
                return_document=ReturnDocument.AFTER,
                session=session,
            )
            for metal, price in present.items():
                record = PriceHistoryRecord(type=metal, price=price, updated_at=now)
                await self.history.insert_one(
                    record.model_dump(exclude={"id"}),
                    session=session,
                )
                logger.info("Recorded %s price %s", metal.value, price)
        
        return self._snapshot_to_response(doc)
    
    # ==================== Helpers ====================
    
    def _snapshot_to_response(self, doc: dict) -> PriceSnapshotResponse:
        snapshot = PriceSnapshot(**doc)
        return PriceSnapshotResponse(
            gold_price=snapshot.gold_price,
            silver_price=snapshot.silver_price,
            updated_at=snapshot.updated_at,
        )
    
    def _history_to_response(self, doc: dict) -> PriceHistoryResponse:
        record = PriceHistoryRecord(**{**doc, "_id": str(doc["_id"])})
        return PriceHistoryResponse(
            id=record.id,
            type=record.type,
            price=record.price,
            updated_at=record.updated_at,
        )
