"""Portfolio-level KPIs over an enriched catalog.

Investment outlook (whole purchase order):
    Inventory Value   = Σ Landed COGS × Units Required
    Inventory Revenue = Σ Selling Price × Units Required
    Gross / Net Margin = Σ profit × Units Required / Inventory Revenue

Capital efficiency (monthly run rate):
    Days of Inventory   = Inventory Value / Monthly COGS × 30
    Contribution Margin = Σ (Price - COGS - Mkt Fees - GST on Sale) × Monthly Units
                          / Monthly Revenue
    Months to Payback   = Inventory Value / Monthly Take-Home (N/A if take-home <= 0)
"""

import math
from collections.abc import Sequence

from fba_planner.metrics.calculator import safe_divide
from fba_planner.metrics.models import PortfolioKPIs, Product, UnitEconomics

DAYS_PER_MONTH = 30


def contribution_per_unit(product: Product) -> float:
    """Selling price minus variable costs (COGS, marketplace fees, sale GST).

    Ads and overhead are left out on purpose; they are discretionary spend.
    """
    m = product.metrics
    variable_cost = m.landed_cogs + m.total_mkt_fees_per_unit + m.gst_on_sale
    return product.input.selling_price_inr - variable_cost


def aggregate_portfolio(products: Sequence[Product]) -> PortfolioKPIs:
    """Reduce an enriched catalog to portfolio KPIs.

    Sums go through math.fsum, so the result does not depend on the
    order of the products.

    Args:
        products: Enriched catalog entries (may be empty)

    Returns:
        PortfolioKPIs; months_to_payback is None when take-home is not positive
    """
    inventory_value = math.fsum(
        p.metrics.landed_cogs * p.input.units_required for p in products
    )
    inventory_revenue = math.fsum(
        p.input.selling_price_inr * p.input.units_required for p in products
    )
    inventory_gross_profit = math.fsum(
        (p.input.selling_price_inr - p.metrics.landed_cogs) * p.input.units_required
        for p in products
    )
    inventory_net_profit = math.fsum(
        p.metrics.real_net_profit * p.input.units_required for p in products
    )

    monthly_revenue = math.fsum(p.metrics.monthly_revenue for p in products)
    monthly_cogs = math.fsum(
        p.metrics.landed_cogs * p.input.est_monthly_sales_units for p in products
    )
    monthly_contribution = math.fsum(
        contribution_per_unit(p) * p.input.est_monthly_sales_units for p in products
    )
    monthly_take_home = math.fsum(p.metrics.total_monthly_take_home for p in products)

    return PortfolioKPIs(
        product_count=len(products),
        total_inventory_value=inventory_value,
        total_inventory_revenue=inventory_revenue,
        total_inventory_gross_profit=inventory_gross_profit,
        inventory_gross_profit_margin=safe_divide(inventory_gross_profit, inventory_revenue) * 100,
        total_inventory_net_profit=inventory_net_profit,
        inventory_net_profit_margin=safe_divide(inventory_net_profit, inventory_revenue) * 100,
        total_monthly_revenue=monthly_revenue,
        total_monthly_cogs=monthly_cogs,
        total_monthly_contribution=monthly_contribution,
        total_monthly_take_home=monthly_take_home,
        days_of_inventory=safe_divide(inventory_value, monthly_cogs) * DAYS_PER_MONTH,
        contribution_margin_percent=safe_divide(monthly_contribution, monthly_revenue) * 100,
        months_to_payback=safe_divide(inventory_value, monthly_take_home, fallback=None),
    )


def unit_economics(products: Sequence[Product]) -> list[UnitEconomics]:
    """Split each product's selling price into cost buckets and profit.

    cogs + marketplace_fees + taxes + operations + net_profit == selling_price.
    """
    rows = []
    for p in products:
        m = p.metrics
        rows.append(
            UnitEconomics(
                product_id=p.input.id,
                sku=p.input.sku,
                selling_price=p.input.selling_price_inr,
                cogs=m.landed_cogs,
                marketplace_fees=m.total_mkt_fees_per_unit - m.gst_on_mkt_fee,
                taxes=m.gst_on_mkt_fee + m.gst_on_sale,
                operations=m.ads_cost_per_unit + m.overhead_per_unit,
                net_profit=m.real_net_profit,
            )
        )
    return rows
