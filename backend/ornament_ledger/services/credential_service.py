"""
Credential store: username/password lookup for the login screen.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from ornament_ledger.core.exceptions import AuthError, NotFoundError, ValidationError
from ornament_ledger.core.security import hash_password, verify_password
from ornament_ledger.database.databases import auth_db
from ornament_ledger.models.credential import Credential
from ornament_ledger.schemas.credential import UserDetailsResponse
from ornament_ledger.services.base import store_operation

logger = logging.getLogger(__name__)


class CredentialService:
    """
    Service for credential lookups.
    
    Usernames match exactly (case-sensitive). Passwords are stored as salted
    bcrypt hashes and never returned.
    """
    
    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with auth database."""
        self.db = db
        self.credentials = db[auth_db.Collections.CREDENTIALS]
    
    @store_operation("verify credentials")
    async def find_by_username_and_password(
        self, username: str, password: str
    ) -> UserDetailsResponse:
        """
        Look up a user by username and verify the password.
        
        Raises:
            AuthError: If the user does not exist or the password is wrong
        """
        credential = await self._get(username)
        if credential is None or not verify_password(password, credential.hashed_password):
            logger.info("Rejected login for %s", username)
            raise AuthError("Invalid credentials")
        
        return UserDetailsResponse(username=credential.username, name=credential.name)
    
    @store_operation("fetch user details")
    async def find_by_username(self, username: Optional[str]) -> UserDetailsResponse:
        """
        Look up a user's public details.
        
        Raises:
            ValidationError: If username is empty
            NotFoundError: If no user has this username
        """
        if not username:
            raise ValidationError("Username is required")
        
        credential = await self._get(username)
        if credential is None:
            raise NotFoundError("User", username)
        
        return UserDetailsResponse(username=credential.username, name=credential.name)
    
    @store_operation("update user")
    async def update_by_username(
        self,
        original_username: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        name: Optional[str] = None,
    ) -> UserDetailsResponse:
        """
        Update the supplied fields of a user. A new password is re-hashed.
        
        Raises:
            NotFoundError: If no user has original_username
            ValidationError: If the new username is taken
        """
        update_data: dict = {}
        if username is not None:
            update_data["username"] = username
        if password is not None:
            update_data["hashed_password"] = hash_password(password)
        if name is not None:
            update_data["name"] = name
        
        if not update_data:
            return await self.find_by_username(original_username)
        
        try:
            doc = await self.credentials.find_one_and_update(
                {"username": original_username},
                {"$set": update_data},
                return_document=True,
            )
        except DuplicateKeyError:
            raise ValidationError(f"Username '{username}' is already taken")
        
        if doc is None:
            raise NotFoundError("User", original_username)
        
        logger.info("Updated user %s", original_username)
        return UserDetailsResponse(username=doc["username"], name=doc.get("name"))
    
    @store_operation("create user")
    async def create(self, username: str, password: str, name: Optional[str] = None) -> str:
        """
        Store a new user and return its ID.
        
        Raises:
            ValidationError: If the username is taken
        """
        credential = Credential(
            username=username,
            hashed_password=hash_password(password),
            name=name,
        )
        try:
            result = await self.credentials.insert_one(
                credential.model_dump(exclude={"id"})
            )
        except DuplicateKeyError:
            raise ValidationError(f"Username '{username}' is already taken")
        
        logger.info("Created user %s", username)
        return str(result.inserted_id)
    
    async def _get(self, username: str) -> Optional[Credential]:
        doc = await self.credentials.find_one({"username": username})
        if doc is None:
            return None
        doc["_id"] = str(doc["_id"])
        return Credential(**doc)
