"""
Auth database configuration.
Stores user credentials for the login lookup.
"""

DB_NAME = "auth_db"


class Collections:
    """Collection names in auth_db."""
    CREDENTIALS = "credentials"


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "User credentials and display names",
    "collections": [Collections.CREDENTIALS],
    "access_level": "restricted",
}
