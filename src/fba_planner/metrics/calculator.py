"""Per-product cost and profit calculations.

Formulas (all amounts per unit, INR):
    Landed COGS     = Unit Price (USD × FX) + Shipping & Customs + Packaging
    Marketplace Fees = Referral + Closing + Pick & Pack + Weight + Storage
                       + GST on those fees + Returns Cost
    Returns Cost    = (Selling Price + Referral Fee) × Returns Rate
    Total Cost      = Landed COGS + Marketplace Fees + GST on Sale + Ads + Overhead
    Net Profit      = Selling Price - Total Cost
    ROI             = Net Profit / Landed COGS
"""

from collections.abc import Iterable

from fba_planner.metrics import fees
from fba_planner.metrics.models import (
    CalculatedMetrics,
    FeeSchedule,
    Product,
    ProductInput,
)


def safe_divide(
    numerator: float,
    denominator: float,
    fallback: float | None = 0.0,
) -> float | None:
    """Divide, returning fallback when the denominator is zero or negative.

    Args:
        numerator: Dividend
        denominator: Divisor
        fallback: Value returned for a non-positive divisor

    Returns:
        numerator / denominator, or fallback
    """
    if denominator <= 0:
        return fallback
    return numerator / denominator


def derive_metrics(
    product: ProductInput,
    schedule: FeeSchedule | None = None,
) -> CalculatedMetrics:
    """Calculate the full cost and profit breakdown for one product.

    Never raises for well-typed input. Ratios whose denominator is not
    positive are reported as 0.

    Args:
        product: Catalog entry inputs
        schedule: Fee schedule (uses defaults if None)

    Returns:
        CalculatedMetrics for the product
    """
    price = product.selling_price_inr

    # --- Sourcing ---
    unit_price_inr = product.unit_price_usd * product.fx_rate
    landed_cogs = unit_price_inr + product.shipping_and_customs_inr + product.packaging_inr

    gross_profit = price - landed_cogs
    gross_profit_margin = safe_divide(gross_profit, price) * 100

    # --- Marketplace ---
    referral_fee = fees.referral_fee(price, schedule)
    fixed_closing_fee = fees.closing_fee(price, schedule)

    sum_fees = (
        referral_fee
        + fixed_closing_fee
        + product.pick_and_pack_fee
        + product.shipping_weight_fee
        + product.storage_fee
    )
    gst_on_mkt_fee = fees.gst_on_marketplace_fees(sum_fees, schedule)
    gst_on_sale = fees.gst_on_sale(price, schedule)

    # Refund of the price plus the referral fee already paid on the sale
    returns_cost = (price + referral_fee) * (product.returns_rate_percent / 100)

    total_mkt_fees_per_unit = sum_fees + gst_on_mkt_fee + returns_cost
    total_mkt_fees_percent = safe_divide(total_mkt_fees_per_unit, price) * 100

    # --- Operations ---
    monthly_revenue = product.est_monthly_sales_units * price
    ads_cost_per_unit = price * (product.ads_cost_percent / 100)
    overhead_per_unit = safe_divide(product.monthly_fixed_costs, product.est_monthly_sales_units)

    # --- Take home ---
    total_cost_per_unit = (
        landed_cogs
        + total_mkt_fees_per_unit
        + gst_on_sale
        + ads_cost_per_unit
        + overhead_per_unit
    )
    real_net_profit = price - total_cost_per_unit
    real_net_profit_margin = safe_divide(real_net_profit, price) * 100
    total_monthly_take_home = real_net_profit * product.est_monthly_sales_units

    roi = safe_divide(real_net_profit, landed_cogs) * 100

    return CalculatedMetrics(
        unit_price_inr=unit_price_inr,
        landed_cogs=landed_cogs,
        gross_profit=gross_profit,
        gross_profit_margin=gross_profit_margin,
        referral_fee=referral_fee,
        fixed_closing_fee=fixed_closing_fee,
        gst_on_mkt_fee=gst_on_mkt_fee,
        gst_on_sale=gst_on_sale,
        returns_cost=returns_cost,
        total_mkt_fees_per_unit=total_mkt_fees_per_unit,
        total_mkt_fees_percent=total_mkt_fees_percent,
        monthly_revenue=monthly_revenue,
        ads_cost_per_unit=ads_cost_per_unit,
        overhead_per_unit=overhead_per_unit,
        total_cost_per_unit=total_cost_per_unit,
        real_net_profit=real_net_profit,
        real_net_profit_margin=real_net_profit_margin,
        total_monthly_take_home=total_monthly_take_home,
        roi=roi,
    )


def enrich_product(
    product: ProductInput,
    schedule: FeeSchedule | None = None,
) -> Product:
    """Pair a catalog entry with its derived metrics."""
    return Product(input=product, metrics=derive_metrics(product, schedule))


def enrich_products(
    products: Iterable[ProductInput],
    schedule: FeeSchedule | None = None,
) -> list[Product]:
    """Enrich every catalog entry, keeping catalog order."""
    return [enrich_product(p, schedule) for p in products]
