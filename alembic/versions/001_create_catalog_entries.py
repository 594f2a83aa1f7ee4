"""Create catalog_entries table.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "catalog_entries",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("position", sa.Integer(), nullable=False, index=True),
        sa.Column("sku", sa.String(255), nullable=False, server_default=""),
        # Sourcing
        sa.Column("units_required", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("unit_price_usd", sa.Float(), nullable=False, server_default="0"),
        sa.Column("fx_rate", sa.Float(), nullable=False, server_default="0"),
        sa.Column("shipping_and_customs_inr", sa.Float(), nullable=False, server_default="0"),
        sa.Column("packaging_inr", sa.Float(), nullable=False, server_default="0"),
        # Pricing
        sa.Column("selling_price_inr", sa.Float(), nullable=False, server_default="0"),
        # Marketplace
        sa.Column("pick_and_pack_fee", sa.Float(), nullable=False, server_default="0"),
        sa.Column("shipping_weight_fee", sa.Float(), nullable=False, server_default="0"),
        sa.Column("storage_fee", sa.Float(), nullable=False, server_default="0"),
        sa.Column("returns_rate_percent", sa.Float(), nullable=False, server_default="0"),
        # Operations
        sa.Column("est_monthly_sales_units", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("ads_cost_percent", sa.Float(), nullable=False, server_default="0"),
        sa.Column("monthly_fixed_costs", sa.Float(), nullable=False, server_default="0"),
        # Timestamps
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("catalog_entries")
