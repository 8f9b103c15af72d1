"""
Pricing database configuration.
Stores the current gold/silver price snapshot and the price audit trail.
"""

DB_NAME = "pricing_db"

# Well-known _id of the single price snapshot document
SNAPSHOT_ID = "current"


class Collections:
    """Collection names in pricing_db."""
    PRICES = "prices"                # Single snapshot document
    PRICE_HISTORY = "price_history"  # Append-only, one record per metal per write


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Current gold/silver prices and price change history",
    "collections": [Collections.PRICES, Collections.PRICE_HISTORY],
    "access_level": "standard",
}
