"""Data models for product profitability calculations."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ClosingFeeTier(BaseModel):
    """Flat closing fee charged when the selling price is at most max_price."""

    model_config = ConfigDict(frozen=True)

    max_price: float = Field(..., description="Inclusive upper bound of the price band (INR)")
    fee: float = Field(..., description="Closing fee for the band (INR)")


class FeeSchedule(BaseModel):
    """Marketplace fee and tax policy."""

    model_config = ConfigDict(frozen=True)

    # Referral fee: exempt below the threshold, percentage of price above
    referral_fee_threshold: float = Field(
        300.0, description="No referral fee when selling price is below this (INR)"
    )
    referral_fee_rate: float = Field(0.105, description="Referral fee rate (default 10.5%)")

    # Closing fee: ordered bands, first band whose bound covers the price wins
    closing_fee_tiers: tuple[ClosingFeeTier, ...] = Field(
        (
            ClosingFeeTier(max_price=500.0, fee=13.0),
            ClosingFeeTier(max_price=1000.0, fee=26.0),
        ),
        description="Closing fee bands sorted by max_price",
    )
    closing_fee_above_tiers: float = Field(
        71.0, description="Closing fee when price exceeds every band (INR)"
    )

    # GST
    gst_on_fees_rate: float = Field(0.18, description="GST on marketplace services (default 18%)")
    gst_on_sale_rate: float = Field(0.05, description="GST on the product sale (default 5%)")


class ProductInput(BaseModel):
    """Raw inputs for one catalog entry.

    No range checks here: the calculator accepts whatever the catalog holds
    and lets out-of-range values flow through the arithmetic.
    """

    model_config = ConfigDict(frozen=True)

    # Identification
    id: str = Field(..., description="Unique catalog entry identifier")
    sku: str = Field(..., description="Display label")

    # Sourcing
    units_required: int = Field(..., description="Units in the purchase order")
    unit_price_usd: float = Field(..., description="Supplier price per unit (USD)")
    fx_rate: float = Field(..., description="INR per USD")
    shipping_and_customs_inr: float = Field(..., description="Freight and duty per unit (INR)")
    packaging_inr: float = Field(..., description="Packaging per unit (INR)")

    # Pricing
    selling_price_inr: float = Field(..., description="Retail price per unit (INR)")

    # Marketplace
    pick_and_pack_fee: float = Field(..., description="Fulfilment pick & pack fee per unit")
    shipping_weight_fee: float = Field(..., description="Weight-based shipping fee per unit")
    storage_fee: float = Field(..., description="Storage fee per unit")
    returns_rate_percent: float = Field(..., description="Share of units returned (0-100)")

    # Operations
    est_monthly_sales_units: int = Field(..., description="Expected units sold per month")
    ads_cost_percent: float = Field(..., description="Ad spend as % of selling price (0-100)")
    monthly_fixed_costs: float = Field(..., description="Monthly overhead carried by this SKU (INR)")


class CalculatedMetrics(BaseModel):
    """Per-unit and monthly figures derived from a ProductInput."""

    model_config = ConfigDict(frozen=True)

    # Sourcing
    unit_price_inr: float
    landed_cogs: float
    gross_profit: float
    gross_profit_margin: float

    # Marketplace
    referral_fee: float
    fixed_closing_fee: float
    gst_on_mkt_fee: float
    gst_on_sale: float
    returns_cost: float
    total_mkt_fees_per_unit: float = Field(..., description="Fees + GST on fees + returns cost")
    total_mkt_fees_percent: float = Field(..., description="Marketplace fees as % of selling price")

    # Operations
    monthly_revenue: float
    ads_cost_per_unit: float
    overhead_per_unit: float

    # Final
    total_cost_per_unit: float
    real_net_profit: float
    real_net_profit_margin: float
    total_monthly_take_home: float
    roi: float


class Product(BaseModel):
    """A catalog entry together with its derived metrics."""

    model_config = ConfigDict(frozen=True)

    input: ProductInput
    metrics: CalculatedMetrics

    @property
    def id(self) -> str:
        return self.input.id

    @property
    def sku(self) -> str:
        return self.input.sku


class PortfolioKPIs(BaseModel):
    """Catalog-wide investment and efficiency figures."""

    model_config = ConfigDict(frozen=True)

    product_count: int = 0

    # Investment outlook (whole purchase order)
    total_inventory_value: float = Field(0.0, description="Landed cost of all units required")
    total_inventory_revenue: float = Field(0.0, description="Revenue if all units sell")
    total_inventory_gross_profit: float = 0.0
    inventory_gross_profit_margin: float = 0.0
    total_inventory_net_profit: float = 0.0
    inventory_net_profit_margin: float = 0.0

    # Monthly run rate
    total_monthly_revenue: float = 0.0
    total_monthly_cogs: float = 0.0
    total_monthly_contribution: float = 0.0
    total_monthly_take_home: float = 0.0

    # Capital efficiency
    days_of_inventory: float = 0.0
    contribution_margin_percent: float = Field(
        0.0, description="Contribution after COGS, fees and sale GST (before ads/overhead)"
    )
    months_to_payback: Optional[float] = Field(
        None, description="None when monthly take-home is not positive"
    )

    @property
    def payback_applicable(self) -> bool:
        """Whether the investment is ever recovered at the current run rate."""
        return self.months_to_payback is not None


class UnitEconomics(BaseModel):
    """Per-unit split of the selling price, one stacked bar per product."""

    product_id: str
    sku: str
    selling_price: float
    cogs: float = Field(..., description="Landed cost incl. packaging")
    marketplace_fees: float = Field(..., description="Marketplace fees and returns, before GST")
    taxes: float = Field(..., description="GST on fees + GST on sale")
    operations: float = Field(..., description="Ads + overhead")
    net_profit: float
