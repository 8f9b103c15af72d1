"""
Archive request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ArchiveEntryCreate(BaseModel):
    """
    Append archive record request.
    
    Carries a copy of a removed active stock entry. Only the fields the
    active ledger requires are required here; the rest default.
    """
    item_name: str = Field(..., min_length=1, alias="itemName")
    product_given_to: str = Field(..., min_length=1, alias="productGivenTo")
    weight: float = Field(..., ge=0, allow_inf_nan=False)
    author: str = Field(..., min_length=1)
    pieces: Optional[int] = Field(None, ge=0)
    ornament_type: Optional[str] = Field(None, alias="ornamentType")
    date: Optional[datetime] = Field(None, description="When the original entry was issued")
    status: Optional[str] = Field(None, description="Defaults to 'Deleted'")
    deletion_date: Optional[datetime] = Field(None, alias="deletionDate")

    class Config:
        populate_by_name = True


class ArchiveEntryResponse(BaseModel):
    """Archived stock record."""
    id: str = Field(..., description="Archive record ID")
    item_name: str = Field(..., alias="itemName")
    product_given_to: str = Field(..., alias="productGivenTo")
    weight: float
    pieces: int
    ornament_type: str = Field(..., alias="ornamentType")
    date: datetime
    author: str
    status: str
    deletion_date: Optional[datetime] = Field(None, alias="deletionDate")

    class Config:
        populate_by_name = True


class RetireRequest(BaseModel):
    """Optional body for retiring an active stock entry."""
    status: str = Field(default="Deleted", min_length=1, description="Archive status")
