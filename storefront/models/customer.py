from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.models.base import Base, IdMixin, TimestampMixin


class Customer(IdMixin, TimestampMixin, Base):
    __tablename__ = "shop_customers"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Customer id={self.id!r} email={self.email!r}>"
