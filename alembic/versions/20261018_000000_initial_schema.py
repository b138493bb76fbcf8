"""Initial schema for minishop

Revision ID: 20261018_000000
Revises: None
Create Date: 2026-10-18 00:00:00.000000

Creates the shop tables:
- member (with embedded address columns)
- item
- delivery (with embedded address columns)
- orders
- order_item

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261018_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _address_columns() -> list:
    return [
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("street", sa.String(200), nullable=True),
        sa.Column("zipcode", sa.String(20), nullable=True),
    ]


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        "member",
        *_address_columns(),
        sa.Column("created_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_modified_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_member_name", "member", ["name"])

    op.create_table(
        "item",
        sa.Column("created_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_modified_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("stock_quantity", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "delivery",
        *_address_columns(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("status", sa.Enum("READY", "COMP", name="deliverystatus"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "orders",
        sa.Column("created_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_modified_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", sa.String(64), nullable=True),
        sa.Column("last_modified_by", sa.String(64), nullable=True),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("member_id", sa.Integer(), nullable=True),
        sa.Column("delivery_id", sa.Integer(), nullable=True),
        sa.Column("order_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.Enum("ORDER", "CANCEL", name="orderstatus"), nullable=False),
        sa.ForeignKeyConstraint(["member_id"], ["member.id"]),
        sa.ForeignKeyConstraint(["delivery_id"], ["delivery.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("delivery_id"),
    )
    op.create_index("ix_orders_member_id", "orders", ["member_id"])
    op.create_index("ix_orders_order_date", "orders", ["order_date"])
    op.create_index("ix_orders_status", "orders", ["status"])

    op.create_table(
        "order_item",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("order_id", sa.Integer(), nullable=True),
        sa.Column("item_id", sa.String(64), nullable=True),
        sa.Column("order_price", sa.Integer(), nullable=False),
        sa.Column("count", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["order_id"], ["orders.id"]),
        sa.ForeignKeyConstraint(["item_id"], ["item.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_order_item_order_id", "order_item", ["order_id"])
    op.create_index("ix_order_item_item_id", "order_item", ["item_id"])


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("order_item")
    op.drop_table("orders")
    op.drop_table("delivery")
    op.drop_table("item")
    op.drop_table("member")

    if op.get_bind().dialect.name == "postgresql":
        op.execute("DROP TYPE IF EXISTS orderstatus")
        op.execute("DROP TYPE IF EXISTS deliverystatus")
