"""Seed catalog and new-product template."""

import random
import string
import time

from fba_planner.metrics.models import ProductInput

DEFAULT_PRODUCT_TEMPLATE = ProductInput(
    id="temp",
    sku="New Product",
    units_required=1000,
    unit_price_usd=1.0,
    fx_rate=90,
    shipping_and_customs_inr=30,
    packaging_inr=5,
    selling_price_inr=500,
    pick_and_pack_fee=15,
    shipping_weight_fee=65,
    storage_fee=5,
    returns_rate_percent=7,
    est_monthly_sales_units=100,
    ads_cost_percent=10,
    monthly_fixed_costs=1000,
)

INITIAL_PRODUCTS: tuple[ProductInput, ...] = (
    ProductInput(
        id="1",
        sku="Penguin 20CM",
        units_required=1500,
        unit_price_usd=2.0,
        fx_rate=90,
        shipping_and_customs_inr=29,
        packaging_inr=20,
        selling_price_inr=659,
        pick_and_pack_fee=17,
        shipping_weight_fee=65,
        storage_fee=5,
        returns_rate_percent=7,
        est_monthly_sales_units=200,
        ads_cost_percent=10,
        monthly_fixed_costs=1000,
    ),
    ProductInput(
        id="2",
        sku="Elephant 20CM",
        units_required=1500,
        unit_price_usd=0.85,
        fx_rate=90,
        shipping_and_customs_inr=29,
        packaging_inr=3,
        selling_price_inr=299,
        pick_and_pack_fee=17,
        shipping_weight_fee=65,
        storage_fee=5,
        returns_rate_percent=3,
        est_monthly_sales_units=500,
        ads_cost_percent=10,
        monthly_fixed_costs=1000,
    ),
)


def generate_product_id() -> str:
    """Millisecond timestamp plus a random suffix, unique across rapid adds."""
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"{int(time.time() * 1000)}-{suffix}"


def new_product(position: int, **overrides) -> ProductInput:
    """Build a catalog entry from the template.

    Args:
        position: 1-based position used in the default SKU label
        **overrides: Field values replacing the template's

    Returns:
        New ProductInput with a fresh id
    """
    data = DEFAULT_PRODUCT_TEMPLATE.model_dump()
    data["sku"] = f"New Product {position}"
    data.update(overrides)
    data["id"] = generate_product_id()
    return ProductInput(**data)
