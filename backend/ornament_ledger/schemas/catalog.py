"""
Stock catalog request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CatalogItemCreate(BaseModel):
    """Add catalog item request."""
    itemname: str = Field(..., min_length=1, description="Item name")
    weight: float = Field(default=0, ge=0, allow_inf_nan=False)
    pieces: int = Field(default=0, ge=0)
    type: Optional[str] = None
    date: Optional[datetime] = Field(None, description="Defaults to now")
    author: Optional[str] = None


class CatalogItemUpdate(BaseModel):
    """Update catalog item request. Only supplied fields change."""
    itemname: Optional[str] = Field(None, min_length=1)
    weight: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    pieces: Optional[int] = Field(None, ge=0)
    type: Optional[str] = None
    author: Optional[str] = None


class CatalogItemResponse(BaseModel):
    """Catalog item."""
    id: str
    itemname: str
    weight: float
    pieces: int
    type: Optional[str] = None
    date: datetime
    author: Optional[str] = None
