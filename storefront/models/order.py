from decimal import Decimal
from typing import Optional

from sqlalchemy import ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.models.base import Base, IdMixin, TimestampMixin


class Order(IdMixin, TimestampMixin, Base):
    __tablename__ = "shop_orders"

    shop_customer_id: Mapped[int | None] = mapped_column(
        ForeignKey("shop_customers.id", ondelete="CASCADE"),
        nullable=True,
    )
    number: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    total_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="new")
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    shipping_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(8, 2), nullable=True)
    shipping_method: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Order id={self.id!r} number={self.number!r}>"


class OrderItem(IdMixin, TimestampMixin, Base):
    __tablename__ = "shop_order_items"

    sort: Mapped[int] = mapped_column(nullable=False, default=0)
    shop_order_id: Mapped[int] = mapped_column(
        ForeignKey("shop_orders.id", ondelete="CASCADE"),
        nullable=False,
    )
    shop_product_id: Mapped[int] = mapped_column(
        ForeignKey("shop_products.id", ondelete="CASCADE"),
        nullable=False,
    )
    qty: Mapped[int] = mapped_column(nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    def __repr__(self) -> str:
        return f"<OrderItem id={self.id!r} shop_order_id={self.shop_order_id!r}>"
