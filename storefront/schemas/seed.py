from pydantic import BaseModel, ConfigDict, PositiveInt


class SeedTargets(BaseModel):
    """Row counts for each seeded table.

    ``category_parents`` counts top-level categories only; each one gets
    ``category_children`` children, so the table ends up with
    ``category_parents * (1 + category_children)`` rows.
    """

    model_config = ConfigDict(frozen=True)

    brands: PositiveInt = 20
    category_parents: PositiveInt = 100
    category_children: PositiveInt = 3
    customers: PositiveInt = 100_000
    products: PositiveInt = 5_000
    orders: PositiveInt = 500_000
    comments: PositiveInt = 200_000
    blog_categories: PositiveInt = 50
    blog_authors: PositiveInt = 500
    blog_posts: PositiveInt = 1_000_000
    blog_links: PositiveInt = 100


class ChunkSizes(BaseModel):
    """Rows per bulk insert, per table."""

    model_config = ConfigDict(frozen=True)

    brands: PositiveInt = 1_000
    categories: PositiveInt = 1_000
    customers: PositiveInt = 5_000
    products: PositiveInt = 1_000
    category_product: PositiveInt = 5_000
    orders: PositiveInt = 5_000
    order_items: PositiveInt = 5_000
    comments: PositiveInt = 5_000
    blog_categories: PositiveInt = 100
    blog_authors: PositiveInt = 500
    blog_posts: PositiveInt = 5_000
    blog_links: PositiveInt = 100

    @classmethod
    def uniform(cls, size: int) -> "ChunkSizes":
        """Return a :class:`ChunkSizes` using *size* for every table."""
        return cls(**{name: size for name in cls.model_fields})
