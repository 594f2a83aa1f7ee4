"""Product profitability metrics."""

from fba_planner.metrics.calculator import (
    derive_metrics,
    enrich_product,
    enrich_products,
    safe_divide,
)
from fba_planner.metrics.fees import (
    DEFAULT_FEE_SCHEDULE,
    closing_fee,
    gst_on_marketplace_fees,
    gst_on_sale,
    referral_fee,
)
from fba_planner.metrics.models import (
    CalculatedMetrics,
    ClosingFeeTier,
    FeeSchedule,
    PortfolioKPIs,
    Product,
    ProductInput,
    UnitEconomics,
)
from fba_planner.metrics.portfolio import (
    aggregate_portfolio,
    contribution_per_unit,
    unit_economics,
)

__all__ = [
    # Models
    "CalculatedMetrics",
    "ClosingFeeTier",
    "FeeSchedule",
    "PortfolioKPIs",
    "Product",
    "ProductInput",
    "UnitEconomics",
    # Fees
    "DEFAULT_FEE_SCHEDULE",
    "closing_fee",
    "gst_on_marketplace_fees",
    "gst_on_sale",
    "referral_fee",
    # Calculator
    "derive_metrics",
    "enrich_product",
    "enrich_products",
    "safe_divide",
    # Portfolio
    "aggregate_portfolio",
    "contribution_per_unit",
    "unit_economics",
]
