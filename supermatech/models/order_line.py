"""
Supermatech Backend: OrderLine SQLAlchemy Model
=================================================

What:  ORM model for the `order_line` table.
Who:   Used by SqlAlchemyOrderLineStore and by Alembic for schema management.

Table Design:
    - id: BIGINT identity assigned by the database on insert. SQLite only
      auto-increments INTEGER primary keys, hence the variant, and
      sqlite_autoincrement keeps ids from being reused after a delete.
    - unit_price: NUMERIC(21,2) returned as float to the API layer.
"""

from sqlalchemy import BigInteger, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from supermatech.database import Base


class OrderLine(Base):
    """One line of a customer cart: a product, how many, at what unit price."""

    __tablename__ = "order_line"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    product_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name of the ordered product",
    )

    quantity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Number of units ordered (>= 1)",
    )

    unit_price: Mapped[float] = mapped_column(
        Numeric(21, 2, asdecimal=False),
        nullable=False,
        comment="Price of one unit at order time",
    )

    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return (
            f"<OrderLine(id={self.id}, product_name='{self.product_name}', "
            f"quantity={self.quantity})>"
        )
