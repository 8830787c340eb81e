from storefront.models.base import Base

SEEDED_TABLES = {
    "users",
    "shop_brands",
    "shop_categories",
    "shop_customers",
    "shop_products",
    "shop_category_product",
    "shop_orders",
    "shop_order_items",
    "comments",
    "blog_categories",
    "blog_authors",
    "blog_posts",
    "blog_links",
}


def test_all_seeded_tables_declared():
    import storefront.models  # noqa: F401

    assert SEEDED_TABLES <= set(Base.metadata.tables)


def test_category_parent_is_self_reference():
    table = Base.metadata.tables["shop_categories"]
    (fk,) = table.c.parent_id.foreign_keys
    assert fk.column.table is table


def test_category_product_has_composite_key():
    table = Base.metadata.tables["shop_category_product"]
    assert [c.name for c in table.primary_key] == ["shop_category_id", "shop_product_id"]


def test_comment_target_columns():
    table = Base.metadata.tables["comments"]
    assert {"commentable_type", "commentable_id", "customer_id"} <= set(table.c.keys())
    assert not table.c.commentable_id.foreign_keys
