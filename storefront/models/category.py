from sqlalchemy import Column, DateTime, ForeignKey, String, Table, func
from sqlalchemy.orm import Mapped, mapped_column

from storefront.models.base import Base, IdMixin, TimestampMixin

category_product = Table(
    "shop_category_product",
    Base.metadata,
    Column(
        "shop_category_id",
        ForeignKey("shop_categories.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "shop_product_id",
        ForeignKey("shop_products.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), server_default=func.now()),
)


class Category(IdMixin, TimestampMixin, Base):
    __tablename__ = "shop_categories"

    parent_id: Mapped[int | None] = mapped_column(
        ForeignKey("shop_categories.id", ondelete="CASCADE"),
        nullable=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Category id={self.id!r} slug={self.slug!r}>"
