#!/usr/bin/env python3
"""
Create a login for the shop staff.

Usage:
    ornament-ledger-create-user USERNAME --name "Display Name"

The password is prompted for and stored as a bcrypt hash.

Environment Variables:
    MONGO_URI: MongoDB connection string
    LOG_LEVEL: Logging level (default: INFO)
"""
import argparse
import asyncio
import getpass
import logging
import sys
from typing import Optional

from ornament_ledger.core.exceptions import LedgerError
from ornament_ledger.core.logging import setup_logging
from ornament_ledger.database.connections import close_connections, get_mongo_client
from ornament_ledger.database.databases import auth_db
from ornament_ledger.database.registry import create_indexes
from ornament_ledger.services.credential_service import CredentialService

logger = logging.getLogger("create_user")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a staff login.")
    parser.add_argument("username", help="Login name (case-sensitive)")
    parser.add_argument("--name", default=None, help="Display name")
    parser.add_argument(
        "--password",
        default=None,
        help="Password (prompted for when omitted)",
    )
    return parser.parse_args(argv)


async def create_user(username: str, password: str, name: Optional[str]) -> str:
    """Create the user, making sure the username index exists first."""
    client = await get_mongo_client()
    try:
        await create_indexes(client)
        service = CredentialService(client[auth_db.DB_NAME])
        return await service.create(username, password, name)
    finally:
        await close_connections()


def main(argv: Optional[list[str]] = None) -> int:
    setup_logging()
    args = parse_args(argv)
    
    password = args.password or getpass.getpass("Password: ")
    if not password:
        logger.error("Password must not be empty")
        return 1
    
    try:
        user_id = asyncio.run(create_user(args.username, password, args.name))
    except LedgerError as e:
        logger.error("Could not create user %s: %s", args.username, e.message)
        return 1
    
    logger.info("Created user %s (%s)", args.username, user_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
