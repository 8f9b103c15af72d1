"""
Price request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PriceUpdate(BaseModel):
    """Update both prices. Omitted prices are left unchanged."""
    gold_price: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="New gold price")
    silver_price: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="New silver price")


class GoldPriceUpdate(BaseModel):
    """Update gold price only."""
    gold_price: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="New gold price (required)")


class SilverPriceUpdate(BaseModel):
    """Update silver price only."""
    silver_price: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="New silver price (required)")


class PriceSnapshotResponse(BaseModel):
    """Current gold/silver prices."""
    gold_price: Optional[float] = Field(None, description="Current gold price")
    silver_price: Optional[float] = Field(None, description="Current silver price")
    updated_at: Optional[datetime] = Field(None, description="Last accepted write")


class PriceHistoryResponse(BaseModel):
    """One accepted price write for one metal."""
    id: str = Field(..., description="History record ID")
    type: str = Field(..., description="gold or silver")
    price: float = Field(..., description="Accepted price")
    updated_at: datetime = Field(..., description="Server timestamp of the write")
