"""Create order_line table

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `order_line` table behind the /api/order-lines resource.
How:   BIGINT identity primary key (INTEGER AUTOINCREMENT on SQLite so ids are
       never reused), NUMERIC(21,2) unit price.

Rollback: downgrade() drops the table (all order lines are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "order_line",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
            autoincrement=True,
            nullable=False,
        ),
        sa.Column(
            "product_name",
            sa.String(255),
            nullable=False,
            comment="Display name of the ordered product",
        ),
        sa.Column(
            "quantity",
            sa.Integer(),
            nullable=False,
            comment="Number of units ordered (>= 1)",
        ),
        sa.Column(
            "unit_price",
            sa.Numeric(21, 2),
            nullable=False,
            comment="Price of one unit at order time",
        ),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("order_line")
