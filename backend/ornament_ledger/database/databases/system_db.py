"""
system_db: bookkeeping about the other databases.

The lifespan hook writes one db_registry document per manifest so operators
can see which databases and collections the ledger owns.
"""

DB_NAME = "system_db"


class Collections:
    """Collection names in system_db."""
    DB_REGISTRY = "db_registry"  # One document per ledger database, keyed by name


DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Registry of ledger databases and their collections",
    "collections": [Collections.DB_REGISTRY],
    "access_level": "system",
}
