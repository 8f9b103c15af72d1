"""
Active stock request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ornament_ledger.models.stock import OrnamentType


class StockEntryCreate(BaseModel):
    """Create active stock request. Field names are camelCase on the wire."""
    item_name: str = Field(..., min_length=1, alias="itemName", description="Ornament name")
    product_given_to: str = Field(
        ..., min_length=1, alias="productGivenTo", description="Who the stock is given to"
    )
    weight: float = Field(..., gt=0, allow_inf_nan=False, description="Weight, must be positive")
    author: str = Field(..., min_length=1, description="User recording the entry")
    pieces: Optional[int] = Field(None, ge=0, description="Number of pieces (default 0)")
    ornament_type: Optional[OrnamentType] = Field(
        None, alias="ornamentType", description="Gold or Silver (default Gold)"
    )

    class Config:
        populate_by_name = True


class StockEntryResponse(BaseModel):
    """Active stock entry."""
    id: str = Field(..., description="Entry ID")
    item_name: str = Field(..., alias="itemName")
    product_given_to: str = Field(..., alias="productGivenTo")
    weight: float
    pieces: int
    ornament_type: str = Field(..., alias="ornamentType")
    date: datetime
    author: str

    class Config:
        populate_by_name = True


class MessageResponse(BaseModel):
    """Plain acknowledgement."""
    message: str = Field(..., description="What happened")
