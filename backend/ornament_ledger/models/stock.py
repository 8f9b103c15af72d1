"""
Stock models for inventory database.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OrnamentType(str, Enum):
    """Metal an ornament is made of."""
    GOLD = "Gold"
    SILVER = "Silver"


class StockEntry(BaseModel):
    """
    Active stock document for MongoDB inventory_db.active_stock collection.
    
    Field names on disk are camelCase.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    item_name: str = Field(..., min_length=1, alias="itemName", description="Ornament name")
    product_given_to: str = Field(
        ..., min_length=1, alias="productGivenTo", description="Recipient of the stock"
    )
    weight: float = Field(..., gt=0, allow_inf_nan=False, description="Weight in grams")
    pieces: int = Field(default=0, ge=0, description="Number of pieces")
    ornament_type: OrnamentType = Field(
        default=OrnamentType.GOLD.value, alias="ornamentType", description="Gold or Silver"
    )
    date: datetime = Field(default_factory=utc_now, description="When the stock was issued")
    author: str = Field(..., min_length=1, description="User who recorded the entry")

    class Config:
        populate_by_name = True
        use_enum_values = True


class ArchivedEntry(BaseModel):
    """
    Archived stock document for MongoDB inventory_db.archive collection.
    
    A denormalized copy of a removed StockEntry. The ornament type is kept as
    free text, and nothing links the record back to the entry it copies.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    item_name: str = Field(..., min_length=1, alias="itemName")
    product_given_to: str = Field(..., min_length=1, alias="productGivenTo")
    weight: float = Field(..., ge=0, allow_inf_nan=False)
    pieces: int = Field(default=0, ge=0)
    ornament_type: str = Field(default=OrnamentType.GOLD.value, alias="ornamentType")
    date: datetime = Field(default_factory=utc_now)
    author: str = Field(..., min_length=1)
    status: str = Field(default="Deleted", description="Why the entry left active stock")
    deletion_date: Optional[datetime] = Field(None, alias="deletionDate")

    class Config:
        populate_by_name = True
