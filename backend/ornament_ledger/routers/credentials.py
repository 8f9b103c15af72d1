"""
Credentials router for login and user details.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ornament_ledger.core.exceptions import AuthError, NotFoundError, ValidationError
from ornament_ledger.dependencies.database import get_credential_service
from ornament_ledger.schemas.credential import (
    LoginRequest,
    UserDetailsResponse,
    UserUpdateRequest,
)
from ornament_ledger.schemas.stock import MessageResponse
from ornament_ledger.services.credential_service import CredentialService

router = APIRouter(tags=["Credentials"])


@router.post(
    "/login",
    response_model=UserDetailsResponse,
    summary="Check username and password",
)
async def login(
    body: LoginRequest,
    credentials: CredentialService = Depends(get_credential_service),
):
    """Return the user's username and display name if the password matches."""
    try:
        return await credentials.find_by_username_and_password(body.username, body.password)
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        )


@router.get(
    "/user-details",
    response_model=UserDetailsResponse,
    summary="Get user details",
)
async def get_user_details(
    username: Optional[str] = Query(None, description="Username to look up"),
    credentials: CredentialService = Depends(get_credential_service),
):
    """Look up a user's display name by username."""
    try:
        return await credentials.find_by_username(username)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )


@router.put(
    "/login",
    response_model=MessageResponse,
    summary="Update user",
)
async def update_user(
    body: UserUpdateRequest,
    credentials: CredentialService = Depends(get_credential_service),
):
    """
    Update the user named by **originalUsername**.
    
    - **username**, **password**, **name**: each optional, only supplied
      fields change
    """
    try:
        await credentials.update_by_username(
            body.original_username,
            username=body.username,
            password=body.password,
            name=body.name,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    return MessageResponse(message="User updated successfully")
