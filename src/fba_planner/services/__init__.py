"""Business logic services."""

from fba_planner.services.catalog import (
    CatalogService,
    ProductNotFoundError,
)

__all__ = [
    "CatalogService",
    "ProductNotFoundError",
]
