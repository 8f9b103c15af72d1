"""
Price models for pricing database.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Metal(str, Enum):
    """Metals with a tracked price."""
    GOLD = "gold"
    SILVER = "silver"

    @property
    def price_field(self) -> str:
        """Snapshot field holding this metal's price."""
        return f"{self.value}_price"


class PriceSnapshot(BaseModel):
    """
    Current prices, stored as the single pricing_db.prices document whose
    _id is pricing_db.SNAPSHOT_ID.
    """
    id: Optional[str] = Field(None, alias="_id")
    gold_price: Optional[float] = Field(None, allow_inf_nan=False, description="Current gold price")
    silver_price: Optional[float] = Field(None, allow_inf_nan=False, description="Current silver price")
    updated_at: Optional[datetime] = Field(None, description="Last accepted write")

    class Config:
        populate_by_name = True


class PriceHistoryRecord(BaseModel):
    """
    Price change document for MongoDB pricing_db.price_history collection.
    Immutable once written.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    type: Metal = Field(..., description="gold or silver")
    price: float = Field(..., ge=0, allow_inf_nan=False, description="Accepted price")
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Server timestamp of the write",
    )

    class Config:
        populate_by_name = True
        use_enum_values = True
