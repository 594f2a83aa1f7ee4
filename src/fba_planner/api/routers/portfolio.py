"""Portfolio API endpoints.

Endpoints:
- GET /portfolio - KPIs over the stored catalog
- GET /portfolio/unit-economics - per-unit cost split for each product
- POST /portfolio/calculate - products and KPIs for posted inputs (not stored)
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from fba_planner.db import get_db
from fba_planner.metrics.calculator import enrich_products
from fba_planner.metrics.models import (
    PortfolioKPIs,
    Product,
    ProductInput,
    UnitEconomics,
)
from fba_planner.metrics.portfolio import aggregate_portfolio, unit_economics
from fba_planner.services.catalog import CatalogService

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


class PortfolioResponse(BaseModel):
    """Enriched products with their portfolio KPIs."""

    products: list[Product]
    kpis: PortfolioKPIs


@router.get("", response_model=PortfolioKPIs)
async def get_portfolio(
    db: AsyncSession = Depends(get_db),
) -> PortfolioKPIs:
    """KPIs over the current catalog."""
    return await CatalogService(db).portfolio()


@router.get("/unit-economics", response_model=list[UnitEconomics])
async def get_unit_economics(
    db: AsyncSession = Depends(get_db),
) -> list[UnitEconomics]:
    """Per-unit split of selling price into costs and profit."""
    products = await CatalogService(db).list_products()
    return unit_economics(products)


@router.post("/calculate", response_model=PortfolioResponse)
async def calculate_portfolio(
    inputs: list[ProductInput],
) -> PortfolioResponse:
    """Derive metrics and KPIs for the posted inputs without storing them."""
    products = enrich_products(inputs)
    return PortfolioResponse(products=products, kpis=aggregate_portfolio(products))
