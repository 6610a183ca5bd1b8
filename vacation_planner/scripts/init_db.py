"""
Database initialization for fresh installs.

Creates every table and seeds the scheduling year anchor.
Idempotent - safe to run multiple times.

Usage:
    python -m vacation_planner.scripts.init_db [--year 2026]

Environment variables:
    DEFAULT_CURRENT_YEAR        Year seeded when --year is not given
"""

import argparse
import asyncio
import sys
from datetime import date

from sqlalchemy import select

from vacation_planner.config import get_settings
from vacation_planner.database import Base, close_db, get_db_context, get_engine
from vacation_planner.models import CurrentYear


async def create_schema() -> None:
    """Create all tables that don't exist yet."""
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("  Schema is up to date")


async def seed_current_year(year: int) -> bool:
    """Insert the scheduling year anchor unless one is already set."""
    async with get_db_context() as session:
        result = await session.execute(select(CurrentYear).where(CurrentYear.id == 1))
        current = result.scalar_one_or_none()
        if current is not None:
            print(f"  Scheduling year already set to {current.year}")
            return False

        session.add(CurrentYear(id=1, year=year))
        print(f"  Scheduling year set to {year}")
        return True


async def main(year: int | None = None) -> int:
    settings = get_settings()
    year = year or settings.default_current_year or date.today().year

    print(f"Initializing database '{settings.db_name}' on {settings.db_host}:{settings.db_port}")
    try:
        await create_schema()
        await seed_current_year(year)
    finally:
        await close_db()

    print("Done")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create tables and seed the scheduling year")
    parser.add_argument("--year", type=int, default=None, help="scheduling year anchor (March to February)")
    args = parser.parse_args()
    sys.exit(asyncio.run(main(args.year)))
