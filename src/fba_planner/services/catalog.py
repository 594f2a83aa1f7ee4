"""Catalog Service - persisted, ordered list of product inputs.

The catalog stores raw inputs only. Reads go through the metrics calculator
and portfolio aggregator on every call, so there is nothing to invalidate.

Usage:
    catalog = CatalogService(db_session)
    await catalog.add_product(sku="Koala 25CM", selling_price_inr=799)
    kpis = await catalog.portfolio()
"""

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fba_planner.db.models import CatalogEntry
from fba_planner.metrics.calculator import enrich_products
from fba_planner.metrics.defaults import INITIAL_PRODUCTS, new_product
from fba_planner.metrics.models import (
    FeeSchedule,
    PortfolioKPIs,
    Product,
    ProductInput,
)
from fba_planner.metrics.portfolio import aggregate_portfolio

logger = logging.getLogger(__name__)

# Fields a caller may change; id is assigned by the catalog
EDITABLE_FIELDS = frozenset(ProductInput.model_fields) - {"id"}


class ProductNotFoundError(LookupError):
    """Raised when a catalog entry does not exist."""

    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class CatalogService:
    """Ordered product catalog backed by the database.

    Usage:
        catalog = CatalogService(db_session)
        products = await catalog.list_products()
    """

    def __init__(self, db_session: AsyncSession):
        """Initialize catalog service.

        Args:
            db_session: Async database session.
        """
        self.session = db_session

    async def _entries(self) -> list[CatalogEntry]:
        result = await self.session.execute(
            select(CatalogEntry).order_by(CatalogEntry.position, CatalogEntry.created_at)
        )
        return list(result.scalars().all())

    async def _get_entry(self, product_id: str) -> CatalogEntry:
        entry = await self.session.get(CatalogEntry, product_id)
        if entry is None:
            logger.warning(f"Catalog entry {product_id} not found")
            raise ProductNotFoundError(product_id)
        return entry

    async def count(self) -> int:
        """Number of products in the catalog."""
        result = await self.session.execute(select(func.count()).select_from(CatalogEntry))
        return result.scalar_one()

    async def list_inputs(self) -> list[ProductInput]:
        """All stored inputs in catalog order."""
        return [entry.to_input() for entry in await self._entries()]

    async def get_input(self, product_id: str) -> ProductInput:
        """Stored inputs for one product.

        Raises:
            ProductNotFoundError: If no entry has this id.
        """
        entry = await self._get_entry(product_id)
        return entry.to_input()

    async def add_product(self, **overrides: Any) -> ProductInput:
        """Append a new product built from the default template.

        Args:
            **overrides: Input field values replacing the template's.

        Returns:
            The stored ProductInput (with its generated id).
        """
        count = await self.count()
        fields = {k: v for k, v in overrides.items() if k in EDITABLE_FIELDS}
        product = new_product(count + 1, **fields)

        self.session.add(CatalogEntry(position=count, **product.model_dump()))
        await self.session.flush()

        logger.info(f"Added product {product.id} ({product.sku}) at position {count}")
        return product

    async def update_product(self, product_id: str, changes: dict[str, Any]) -> ProductInput:
        """Apply a partial update to one product's inputs.

        Args:
            product_id: Catalog entry id.
            changes: Field name to new value; the id cannot be changed.

        Returns:
            The updated ProductInput.

        Raises:
            ProductNotFoundError: If no entry has this id.
        """
        entry = await self._get_entry(product_id)

        for name, value in changes.items():
            if name in EDITABLE_FIELDS:
                setattr(entry, name, value)
        await self.session.flush()

        logger.info(f"Updated product {product_id}: {sorted(changes)}")
        return entry.to_input()

    async def delete_product(self, product_id: str) -> None:
        """Remove a product and close the gap in positions.

        Raises:
            ProductNotFoundError: If no entry has this id.
        """
        entry = await self._get_entry(product_id)
        await self.session.delete(entry)
        await self.session.flush()

        await self._renumber(await self._entries())
        logger.info(f"Deleted product {product_id}")

    async def move_product(self, product_id: str, new_index: int) -> list[ProductInput]:
        """Move a product to a new index in the catalog.

        The index is clamped to the catalog bounds.

        Returns:
            All inputs in their new order.

        Raises:
            ProductNotFoundError: If no entry has this id.
        """
        entry = await self._get_entry(product_id)
        entries = [e for e in await self._entries() if e.id != product_id]

        new_index = max(0, min(new_index, len(entries)))
        entries.insert(new_index, entry)
        await self._renumber(entries)

        logger.info(f"Moved product {product_id} to index {new_index}")
        return [e.to_input() for e in entries]

    async def reset(self) -> list[ProductInput]:
        """Replace the whole catalog with the initial products."""
        for entry in await self._entries():
            await self.session.delete(entry)
        await self.session.flush()

        for position, product in enumerate(INITIAL_PRODUCTS):
            self.session.add(CatalogEntry(position=position, **product.model_dump()))
        await self.session.flush()

        logger.info(f"Reset catalog to {len(INITIAL_PRODUCTS)} initial products")
        return list(INITIAL_PRODUCTS)

    async def list_products(self, schedule: FeeSchedule | None = None) -> list[Product]:
        """All products with freshly derived metrics, in catalog order."""
        return enrich_products(await self.list_inputs(), schedule)

    async def portfolio(self, schedule: FeeSchedule | None = None) -> PortfolioKPIs:
        """Portfolio KPIs over the current catalog."""
        return aggregate_portfolio(await self.list_products(schedule))

    async def _renumber(self, entries: list[CatalogEntry]) -> None:
        for position, entry in enumerate(entries):
            entry.position = position
        await self.session.flush()
