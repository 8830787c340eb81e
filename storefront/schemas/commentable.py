"""Target of a comment: either a shop product or a blog post.

Comments are polymorphic.  Instead of carrying a free-form type string, the
seeder builds a :class:`Commentable` whose ``kind`` is one of a closed set of
tags, so every stored ``commentable_type`` maps back to a seeded table.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, PositiveInt


class CommentableKind(StrEnum):
    PRODUCT = "shop_product"
    BLOG_POST = "blog_post"

    @property
    def table(self) -> str:
        """Name of the table holding targets of this kind."""
        return _KIND_TABLES[self]


_KIND_TABLES: dict[CommentableKind, str] = {
    CommentableKind.PRODUCT: "shop_products",
    CommentableKind.BLOG_POST: "blog_posts",
}


class Commentable(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: CommentableKind
    id: PositiveInt

    @classmethod
    def product(cls, product_id: int) -> "Commentable":
        return cls(kind=CommentableKind.PRODUCT, id=product_id)

    @classmethod
    def blog_post(cls, post_id: int) -> "Commentable":
        return cls(kind=CommentableKind.BLOG_POST, id=post_id)

    def as_columns(self) -> dict[str, str | int]:
        """Return the ``commentable_type`` / ``commentable_id`` column pair."""
        return {"commentable_type": self.kind.value, "commentable_id": self.id}
