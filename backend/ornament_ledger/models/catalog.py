"""
Catalog item model for inventory database.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class CatalogItem(BaseModel):
    """
    Flat stock catalog document for MongoDB inventory_db.catalog collection.
    Unrelated to the active stock lifecycle.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    itemname: str = Field(..., min_length=1)
    weight: float = Field(default=0, ge=0, allow_inf_nan=False)
    pieces: int = Field(default=0, ge=0)
    type: Optional[str] = Field(None, description="Free-form item type")
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    author: Optional[str] = None

    class Config:
        populate_by_name = True
