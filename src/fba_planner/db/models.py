"""Database models for the product catalog."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from fba_planner.db.base import Base
from fba_planner.metrics.models import ProductInput


class CatalogEntry(Base):
    """Stored inputs for one catalog product.

    Only raw inputs are persisted; metrics are recomputed on every read.
    """

    __tablename__ = "catalog_entries"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, index=True)
    sku: Mapped[str] = mapped_column(String(255), default="")

    # Sourcing
    units_required: Mapped[int] = mapped_column(Integer, default=0)
    unit_price_usd: Mapped[float] = mapped_column(Float, default=0.0)
    fx_rate: Mapped[float] = mapped_column(Float, default=0.0)
    shipping_and_customs_inr: Mapped[float] = mapped_column(Float, default=0.0)
    packaging_inr: Mapped[float] = mapped_column(Float, default=0.0)

    # Pricing
    selling_price_inr: Mapped[float] = mapped_column(Float, default=0.0)

    # Marketplace
    pick_and_pack_fee: Mapped[float] = mapped_column(Float, default=0.0)
    shipping_weight_fee: Mapped[float] = mapped_column(Float, default=0.0)
    storage_fee: Mapped[float] = mapped_column(Float, default=0.0)
    returns_rate_percent: Mapped[float] = mapped_column(Float, default=0.0)

    # Operations
    est_monthly_sales_units: Mapped[int] = mapped_column(Integer, default=0)
    ads_cost_percent: Mapped[float] = mapped_column(Float, default=0.0)
    monthly_fixed_costs: Mapped[float] = mapped_column(Float, default=0.0)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_input(self) -> ProductInput:
        """Convert the row to the calculator's input model."""
        return ProductInput(
            **{name: getattr(self, name) for name in ProductInput.model_fields}
        )
