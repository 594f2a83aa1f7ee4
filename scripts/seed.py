#!/usr/bin/env python3
"""Seed the catalog with the initial products."""

import argparse
import asyncio

from fba_planner.db.base import async_session_maker
from fba_planner.services.catalog import CatalogService


async def seed(force: bool = False) -> None:
    """Load the initial products unless the catalog already has entries."""
    async with async_session_maker() as session:
        catalog = CatalogService(session)

        existing = await catalog.count()
        if existing and not force:
            print(f"Catalog already has {existing} products (use --force to reset)")
            return

        products = await catalog.reset()
        await session.commit()

        for product in products:
            print(f"  Seeded {product.sku} ({product.id})")
        print(f"Seeded {len(products)} products")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the product catalog")
    parser.add_argument("--force", action="store_true", help="Replace existing products")
    args = parser.parse_args()
    asyncio.run(seed(force=args.force))
