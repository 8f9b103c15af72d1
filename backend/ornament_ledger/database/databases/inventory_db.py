"""
Inventory database configuration.
Stores ornament stock: outstanding entries, the removal archive and the
general stock catalog.
"""

DB_NAME = "inventory_db"


class Collections:
    """Collection names in inventory_db."""
    ACTIVE_STOCK = "active_stock"  # Stock currently issued to recipients
    ARCHIVE = "archive"            # Append-only log of removed stock
    CATALOG = "catalog"            # Flat stock catalog, no lifecycle


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Ornament stock, removal archive and stock catalog",
    "collections": [Collections.ACTIVE_STOCK, Collections.ARCHIVE, Collections.CATALOG],
    "access_level": "standard",
}
