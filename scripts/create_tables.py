#!/usr/bin/env python3
"""
Create the users, plants, favorites and cart tables on an empty database.

Usage:
    python scripts/create_tables.py

Existing tables are left untouched.
"""
import asyncio
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
    stream=sys.stdout,
)

import app.models  # noqa: F401  registers the tables on Base.metadata
from app.db.base import Base
from app.db.session import engine


async def main() -> None:
    print("Creating tables...\n")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()
    print("\nDone.")


if __name__ == "__main__":
    asyncio.run(main())
