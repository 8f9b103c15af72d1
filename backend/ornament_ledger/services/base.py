"""
Shared helpers for services backed by MongoDB.
"""
import functools
import logging

from pymongo.errors import PyMongoError

from ornament_ledger.core.exceptions import StoreError

logger = logging.getLogger(__name__)


def store_operation(action: str):
    """
    Decorator for async service methods that talk to MongoDB.
    
    Driver failures are logged with the driver's message and re-raised as
    StoreError carrying only `Failed to <action>`, so the driver text never
    reaches API clients. Ledger errors pass through untouched.
    
    Usage:
        @store_operation("fetch stock data")
        async def list_entries(self): ...
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except PyMongoError as e:
                logger.error("Failed to %s: %s", action, e)
                raise StoreError(f"Failed to {action}", cause=e) from e
        return wrapper
    return decorator
