"""End-to-end runs of :class:`SqlAlchemyBulkStore` and ``bulk_load`` on SQLite.

The seeder writes to a real database file created from the declared tables,
so column names, JSON, Decimal and date values and identity resets all go
through SQLAlchemy and the aiosqlite driver.
"""

import datetime
import random
from decimal import Decimal

import pytest
from sqlalchemy import func, select

from seed.seed import Seeder
from storefront.database import create_engine_from_url
from storefront.models.base import Base
from storefront.services.bulk_store import bulk_load
from tests.conftest import FIXED_NOW

ID_TABLES = [
    "users",
    "shop_brands",
    "shop_categories",
    "shop_customers",
    "shop_products",
    "shop_orders",
    "shop_order_items",
    "comments",
    "blog_categories",
    "blog_authors",
    "blog_posts",
    "blog_links",
]


@pytest.fixture
async def sqlite_engine(tmp_path):
    engine = create_engine_from_url(f"sqlite+aiosqlite:///{tmp_path / 'storefront.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


async def _seed(engine, storage, progress, targets, seed_value: int) -> None:
    async with bulk_load(engine) as store:
        seeder = Seeder(
            store,
            storage,
            progress,
            targets=targets,
            rng=random.Random(seed_value),
            now=FIXED_NOW,
        )
        await seeder.run()


async def _id_stats(engine, table_name: str) -> tuple[int, int, int]:
    table = Base.metadata.tables[table_name]
    async with engine.connect() as conn:
        result = await conn.execute(
            select(func.count(), func.min(table.c.id), func.max(table.c.id))
        )
        count, low, high = result.one()
    return count, low, high


async def test_seed_twice_restarts_ids(sqlite_engine, storage, progress, small_targets):
    await _seed(sqlite_engine, storage, progress, small_targets, 1)
    first = {name: await _id_stats(sqlite_engine, name) for name in ID_TABLES}

    await _seed(sqlite_engine, storage, progress, small_targets, 2)
    second = {name: await _id_stats(sqlite_engine, name) for name in ID_TABLES}

    t = small_targets
    expected = {
        "users": 1,
        "shop_brands": t.brands,
        "shop_categories": t.category_parents * (1 + t.category_children),
        "shop_customers": t.customers,
        "shop_products": t.products,
        "shop_orders": t.orders,
        "comments": t.comments,
        "blog_categories": t.blog_categories,
        "blog_authors": t.blog_authors,
        "blog_posts": t.blog_posts,
        "blog_links": t.blog_links,
    }
    for name, count in expected.items():
        assert first[name][0] == second[name][0] == count, name

    for name, (count, low, high) in second.items():
        assert (low, high) == (1, count), name


async def test_values_round_trip(sqlite_engine, storage, progress, small_targets):
    await _seed(sqlite_engine, storage, progress, small_targets, 3)
    tables = Base.metadata.tables

    async with sqlite_engine.connect() as conn:
        link = (
            await conn.execute(select(tables["blog_links"]).order_by(tables["blog_links"].c.id))
        ).first()
        product = (
            await conn.execute(
                select(tables["shop_products"]).order_by(tables["shop_products"].c.id)
            )
        ).first()
        post = (
            await conn.execute(select(tables["blog_posts"]).order_by(tables["blog_posts"].c.id))
        ).first()
        link_count = (
            await conn.execute(select(func.count()).select_from(tables["shop_category_product"]))
        ).scalar_one()

    assert link.title == {"en": "Link Title 1"}
    assert link.description == {"en": "This is link 1 description"}
    assert isinstance(product.price, Decimal)
    assert Decimal("10.00") <= product.price <= Decimal("500.00")
    assert product.slug == "product-1"
    assert isinstance(post.published_at, datetime.date)
    assert 3 * small_targets.products <= link_count <= 6 * small_targets.products


async def test_category_children_reference_parents(
    sqlite_engine, storage, progress, small_targets
):
    await _seed(sqlite_engine, storage, progress, small_targets, 4)
    categories = Base.metadata.tables["shop_categories"]

    async with sqlite_engine.connect() as conn:
        rows = (await conn.execute(select(categories.c.id, categories.c.parent_id))).all()

    parent_ids = {row.id for row in rows if row.parent_id is None}
    assert len(parent_ids) == small_targets.category_parents
    assert {row.parent_id for row in rows if row.parent_id is not None} == parent_ids
