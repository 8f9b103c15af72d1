"""
Credential request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Login request body."""
    username: str = Field(..., min_length=1, description="Username (case-sensitive)")
    password: str = Field(..., min_length=1, description="Password")


class UserDetailsResponse(BaseModel):
    """Public user details."""
    username: str = Field(..., description="Username")
    name: Optional[str] = Field(None, description="Display name")


class UserUpdateRequest(BaseModel):
    """Update the user identified by original_username."""
    original_username: str = Field(..., min_length=1, alias="originalUsername")
    username: Optional[str] = Field(None, min_length=1, description="New username")
    password: Optional[str] = Field(None, min_length=1, description="New password")
    name: Optional[str] = Field(None, description="New display name")

    class Config:
        populate_by_name = True
