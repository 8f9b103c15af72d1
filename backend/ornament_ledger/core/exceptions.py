"""
Typed error hierarchy for the ledger services.

Services raise these instead of bare ValueError so routers can map them to
HTTP status codes by type:

    LedgerError (base)
    |
    +-- ValidationError   -> 400  required field missing or invalid
    +-- AuthError         -> 401  credential mismatch
    +-- NotFoundError     -> 404  identifier has no matching record
    +-- StoreError        -> 500  backing-store failure of any kind
"""
from typing import Any, Optional


class LedgerError(Exception):
    """Base class for all ledger errors."""

    status_code: int = 500
    code: str = "LEDGER_ERROR"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(LedgerError):
    """A required field is missing or has an invalid value."""

    status_code = 400
    code = "VALIDATION_ERROR"


class AuthError(LedgerError):
    """Credentials did not match a stored user."""

    status_code = 401
    code = "AUTH_ERROR"


class NotFoundError(LedgerError):
    """No record matches the given identifier."""

    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: Optional[str] = None):
        super().__init__(f"{resource} not found", resource=resource, identifier=identifier)
        self.resource = resource
        self.identifier = identifier


class StoreError(LedgerError):
    """The backing store failed. The original exception is kept on `cause`."""

    status_code = 500
    code = "STORE_ERROR"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
