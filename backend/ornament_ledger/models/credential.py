"""
Credential model for authentication database.
"""
from typing import Optional

from pydantic import BaseModel, Field


class Credential(BaseModel):
    """
    Credential document for MongoDB auth_db.credentials collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    username: str = Field(..., min_length=1, description="Unique, case-sensitive username")
    hashed_password: str = Field(..., description="Bcrypt hashed password")
    name: Optional[str] = Field(None, description="Display name")

    class Config:
        populate_by_name = True
