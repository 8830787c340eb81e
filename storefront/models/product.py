from decimal import Decimal

from sqlalchemy import CheckConstraint, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.models.base import Base, IdMixin, TimestampMixin


class Product(IdMixin, TimestampMixin, Base):
    __tablename__ = "shop_products"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_shop_products_price_non_negative"),
    )

    shop_brand_id: Mapped[int | None] = mapped_column(
        ForeignKey("shop_brands.id", ondelete="SET NULL"),
        nullable=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    def __repr__(self) -> str:
        return f"<Product id={self.id!r} slug={self.slug!r}>"
