from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.models.base import Base, IdMixin, TimestampMixin


class Comment(IdMixin, TimestampMixin, Base):
    __tablename__ = "comments"
    __table_args__ = (
        Index("ix_comments_commentable", "commentable_type", "commentable_id"),
    )

    customer_id: Mapped[int | None] = mapped_column(
        ForeignKey("shop_customers.id", ondelete="CASCADE"),
        nullable=True,
    )
    # Tag of storefront.schemas.commentable.CommentableKind
    commentable_type: Mapped[str] = mapped_column(String(50), nullable=False)
    commentable_id: Mapped[int] = mapped_column(nullable=False)
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Comment id={self.id!r} commentable_type={self.commentable_type!r}>"
