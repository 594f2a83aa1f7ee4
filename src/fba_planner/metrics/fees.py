"""Marketplace fee schedule.

Referral Fee = 0 if Selling Price < 300, else Selling Price × 10.5%
Closing Fee  = 13 up to 500, 26 up to 1000, 71 above
GST on Fees  = 18% of (Referral + Closing + Pick & Pack + Weight + Storage)
GST on Sale  = 5% of Selling Price
"""

from fba_planner.metrics.models import FeeSchedule

DEFAULT_FEE_SCHEDULE = FeeSchedule()


def referral_fee(
    selling_price: float,
    schedule: FeeSchedule | None = None,
) -> float:
    """Calculate the referral (commission) fee for one unit.

    Args:
        selling_price: Selling price in INR
        schedule: Fee schedule (uses defaults if None)

    Returns:
        Referral fee in INR
    """
    if schedule is None:
        schedule = DEFAULT_FEE_SCHEDULE

    if selling_price < schedule.referral_fee_threshold:
        return 0.0
    return selling_price * schedule.referral_fee_rate


def closing_fee(
    selling_price: float,
    schedule: FeeSchedule | None = None,
) -> float:
    """Calculate the fixed closing fee for one unit.

    Band bounds are inclusive: a price of exactly 500 is in the lowest band.

    Args:
        selling_price: Selling price in INR
        schedule: Fee schedule (uses defaults if None)

    Returns:
        Closing fee in INR
    """
    if schedule is None:
        schedule = DEFAULT_FEE_SCHEDULE

    for tier in sorted(schedule.closing_fee_tiers, key=lambda t: t.max_price):
        if selling_price <= tier.max_price:
            return tier.fee
    return schedule.closing_fee_above_tiers


def gst_on_marketplace_fees(
    sum_fees: float,
    schedule: FeeSchedule | None = None,
) -> float:
    """GST charged on the marketplace's services."""
    if schedule is None:
        schedule = DEFAULT_FEE_SCHEDULE
    return sum_fees * schedule.gst_on_fees_rate


def gst_on_sale(
    selling_price: float,
    schedule: FeeSchedule | None = None,
) -> float:
    """GST charged on the product sale."""
    if schedule is None:
        schedule = DEFAULT_FEE_SCHEDULE
    return selling_price * schedule.gst_on_sale_rate
