from datetime import date
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, Date, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.models.base import Base, IdMixin, TimestampMixin


class BlogCategory(IdMixin, TimestampMixin, Base):
    __tablename__ = "blog_categories"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    seo_title: Mapped[Optional[str]] = mapped_column(String(60), nullable=True)
    seo_description: Mapped[Optional[str]] = mapped_column(String(160), nullable=True)

    def __repr__(self) -> str:
        return f"<BlogCategory id={self.id!r} slug={self.slug!r}>"


class BlogAuthor(IdMixin, TimestampMixin, Base):
    __tablename__ = "blog_authors"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    photo: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    github_handle: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    twitter_handle: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<BlogAuthor id={self.id!r} email={self.email!r}>"


class BlogPost(IdMixin, TimestampMixin, Base):
    __tablename__ = "blog_posts"

    blog_author_id: Mapped[int | None] = mapped_column(
        ForeignKey("blog_authors.id", ondelete="CASCADE"),
        nullable=True,
    )
    blog_category_id: Mapped[int | None] = mapped_column(
        ForeignKey("blog_categories.id", ondelete="SET NULL"),
        nullable=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    published_at: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    seo_title: Mapped[Optional[str]] = mapped_column(String(60), nullable=True)
    seo_description: Mapped[Optional[str]] = mapped_column(String(160), nullable=True)

    def __repr__(self) -> str:
        return f"<BlogPost id={self.id!r} slug={self.slug!r}>"


class BlogLink(IdMixin, TimestampMixin, Base):
    __tablename__ = "blog_links"

    url: Mapped[str] = mapped_column(String(255), nullable=False)
    # Localized {"en": "..."} maps
    title: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    description: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON, nullable=True)
    color: Mapped[Optional[str]] = mapped_column(String(7), nullable=True)

    def __repr__(self) -> str:
        return f"<BlogLink id={self.id!r} url={self.url!r}>"
