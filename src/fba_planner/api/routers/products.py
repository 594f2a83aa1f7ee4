"""Catalog API endpoints.

Endpoints:
- GET /products - list products with derived metrics, in catalog order
- POST /products - add a product from the default template
- GET /products/{id} - one product with derived metrics
- PATCH /products/{id} - partial update of a product's inputs
- DELETE /products/{id} - remove a product
- POST /products/{id}/move - move a product to a new index
- POST /products/reset - replace the catalog with the initial products
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from fba_planner.db import get_db
from fba_planner.metrics.calculator import enrich_product, enrich_products
from fba_planner.metrics.models import Product
from fba_planner.services.catalog import CatalogService, ProductNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


class ProductFields(BaseModel):
    """Editable product inputs with the catalog editor's range checks.

    Every field is optional so the same schema serves create (template
    overrides) and partial update.
    """

    sku: str | None = Field(None, max_length=255)

    # Sourcing
    units_required: int | None = Field(None, ge=0)
    unit_price_usd: float | None = Field(None, ge=0)
    fx_rate: float | None = Field(None, gt=0)
    shipping_and_customs_inr: float | None = Field(None, ge=0)
    packaging_inr: float | None = Field(None, ge=0)

    # Pricing
    selling_price_inr: float | None = Field(None, ge=0)

    # Marketplace
    pick_and_pack_fee: float | None = Field(None, ge=0)
    shipping_weight_fee: float | None = Field(None, ge=0)
    storage_fee: float | None = Field(None, ge=0)
    returns_rate_percent: float | None = Field(None, ge=0, le=100)

    # Operations
    est_monthly_sales_units: int | None = Field(None, ge=0)
    ads_cost_percent: float | None = Field(None, ge=0, le=100)
    monthly_fixed_costs: float | None = Field(None, ge=0)


class MoveRequest(BaseModel):
    """Target index for a reorder."""

    index: int = Field(..., ge=0, description="New 0-based position")


def _not_found(exc: ProductNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=str(exc),
    )


@router.get("", response_model=list[Product])
async def list_products(
    db: AsyncSession = Depends(get_db),
) -> list[Product]:
    """List all products with freshly derived metrics."""
    return await CatalogService(db).list_products()


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    fields: ProductFields | None = None,
    db: AsyncSession = Depends(get_db),
) -> Product:
    """Add a product built from the template, with optional overrides."""
    overrides = fields.model_dump(exclude_none=True) if fields else {}
    product = await CatalogService(db).add_product(**overrides)
    return enrich_product(product)


@router.post("/reset", response_model=list[Product])
async def reset_catalog(
    db: AsyncSession = Depends(get_db),
) -> list[Product]:
    """Replace the catalog with the initial products."""
    inputs = await CatalogService(db).reset()
    return enrich_products(inputs)


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    db: AsyncSession = Depends(get_db),
) -> Product:
    """Get one product with derived metrics."""
    try:
        product = await CatalogService(db).get_input(product_id)
    except ProductNotFoundError as e:
        raise _not_found(e)
    return enrich_product(product)


@router.patch("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    fields: ProductFields,
    db: AsyncSession = Depends(get_db),
) -> Product:
    """Update some of a product's inputs."""
    changes = fields.model_dump(exclude_unset=True, exclude_none=True)
    try:
        product = await CatalogService(db).update_product(product_id, changes)
    except ProductNotFoundError as e:
        raise _not_found(e)
    return enrich_product(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    db: AsyncSession = Depends(get_db),
) -> None:
    """Remove a product from the catalog."""
    try:
        await CatalogService(db).delete_product(product_id)
    except ProductNotFoundError as e:
        raise _not_found(e)


@router.post("/{product_id}/move", response_model=list[Product])
async def move_product(
    product_id: str,
    move: MoveRequest,
    db: AsyncSession = Depends(get_db),
) -> list[Product]:
    """Move a product and return the reordered catalog."""
    try:
        inputs = await CatalogService(db).move_product(product_id, move.index)
    except ProductNotFoundError as e:
        raise _not_found(e)
    logger.debug(f"Catalog order: {[p.id for p in inputs]}")
    return enrich_products(inputs)
