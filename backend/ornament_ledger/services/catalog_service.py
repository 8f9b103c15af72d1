"""
Stock catalog service: flat CRUD with no lifecycle.
"""
import logging
from datetime import datetime, timezone

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from ornament_ledger.core.exceptions import NotFoundError
from ornament_ledger.database.databases import inventory_db
from ornament_ledger.models.catalog import CatalogItem
from ornament_ledger.schemas.catalog import (
    CatalogItemCreate,
    CatalogItemResponse,
    CatalogItemUpdate,
)
from ornament_ledger.services.base import store_operation

logger = logging.getLogger(__name__)


class CatalogService:
    """Service for catalog items."""
    
    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with inventory database."""
        self.db = db
        self.items = db[inventory_db.Collections.CATALOG]
    
    @store_operation("fetch stock data")
    async def list_items(self) -> list[CatalogItemResponse]:
        """List all catalog items."""
        docs = await self.items.find().to_list(length=None)
        return [self._doc_to_response(doc) for doc in docs]
    
    @store_operation("add stock")
    async def create_item(self, request: CatalogItemCreate) -> CatalogItemResponse:
        """Add an item. `date` defaults to now."""
        item = CatalogItem(**request.model_dump(exclude_none=True))
        doc = item.model_dump(exclude={"id"})
        
        result = await self.items.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("Added catalog item %s (%s)", result.inserted_id, item.itemname)
        return self._doc_to_response(doc)
    
    @store_operation("update stock item")
    async def update_item(
        self, item_id: str, request: CatalogItemUpdate
    ) -> CatalogItemResponse:
        """
        Update the supplied fields and stamp `date` with the current time.
        
        Raises:
            NotFoundError: If no item has this ID
        """
        if not ObjectId.is_valid(item_id):
            raise NotFoundError("Stock item", item_id)
        
        update_data = {k: v for k, v in request.model_dump().items() if v is not None}
        update_data["date"] = datetime.now(timezone.utc)
        
        doc = await self.items.find_one_and_update(
            {"_id": ObjectId(item_id)},
            {"$set": update_data},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise NotFoundError("Stock item", item_id)
        
        return self._doc_to_response(doc)
    
    @store_operation("delete stock item")
    async def delete_item(self, item_id: str) -> None:
        """
        Delete an item.
        
        Raises:
            NotFoundError: If no item has this ID
        """
        if not ObjectId.is_valid(item_id):
            raise NotFoundError("Stock item", item_id)
        
        result = await self.items.delete_one({"_id": ObjectId(item_id)})
        if result.deleted_count == 0:
            raise NotFoundError("Stock item", item_id)
        logger.info("Deleted catalog item %s", item_id)
    
    def _doc_to_response(self, doc: dict) -> CatalogItemResponse:
        item = CatalogItem(**{**doc, "_id": str(doc["_id"])})
        return CatalogItemResponse(**item.model_dump())
