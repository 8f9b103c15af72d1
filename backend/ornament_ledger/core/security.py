"""
Password hashing for the credential store.

Only hashes are persisted. The bcrypt cost comes from BCRYPT_ROUNDS, so
tests can run with a cheap factor while production keeps the default.
"""
from passlib.context import CryptContext

from ornament_ledger.config import get_settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().bcrypt_rounds,
)


def hash_password(plain_password: str) -> str:
    """Return a salted bcrypt hash of `plain_password`."""
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a login attempt against a stored hash.
    
    Usernames are matched before this is called; a False here means the
    password alone was wrong.
    """
    return pwd_context.verify(plain_password, hashed_password)
