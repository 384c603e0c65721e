#!/usr/bin/env python
"""Seed a development database with demo employees and contracts."""

import asyncio
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from invoice_api.config import configure_logging, get_settings
from invoice_api.database import async_session_maker, engine
from invoice_api.services.seeding_service import DataSeedingService


async def seed(clear: bool) -> bool:
    """Seed demo data, optionally clearing existing rows first."""
    async with async_session_maker() as session:
        service = DataSeedingService(session)
        if clear:
            await service.clear_all_data()
        seeded = await service.seed_if_empty()
    await engine.dispose()
    return seeded


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Seed demo employees and contracts")
    parser.add_argument("--clear", action="store_true", help="Delete all existing data first")
    args = parser.parse_args()

    settings = get_settings()
    if settings.environment == "production":
        print("Refusing to seed a production database")
        sys.exit(1)

    configure_logging(settings)
    if asyncio.run(seed(args.clear)):
        print("Demo data seeded")
    else:
        print("Database already contains employees; nothing seeded")
