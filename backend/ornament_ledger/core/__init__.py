"""
Core module - Errors, logging and password hashing.
"""
from ornament_ledger.core.exceptions import (
    LedgerError,
    ValidationError,
    AuthError,
    NotFoundError,
    StoreError,
)
from ornament_ledger.core.security import hash_password, verify_password

__all__ = [
    "LedgerError",
    "ValidationError",
    "AuthError",
    "NotFoundError",
    "StoreError",
    "hash_password",
    "verify_password",
]
