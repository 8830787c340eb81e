"""Seed script: fill the storefront and blog tables with synthetic demo data.

Run as:
    python -m seed

Requires DATABASE_URL (or a .env file).  Row counts and chunk sizes can be
overridden per table with ``SEED_TARGETS__<NAME>`` and ``SEED_CHUNKS__<NAME>``,
e.g. ``SEED_TARGETS__BLOG_POSTS=10000``.

Every stage truncates its table first, so a failed run is recovered by simply
running the script again.
"""

import datetime
import logging
import random
import string
from collections.abc import AsyncGenerator, Callable, Mapping, Sequence
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from storefront.config import settings
from storefront.database import create_engine_from_url
from storefront.schemas.commentable import Commentable
from storefront.schemas.seed import ChunkSizes, SeedTargets
from storefront.services.auth import (
    DEMO_ADMIN_EMAIL,
    DEMO_ADMIN_NAME,
    DEMO_ADMIN_PASSWORD,
    hash_password,
)
from storefront.services.bulk_store import BulkLoadMode, BulkStore, bulk_load
from storefront.services.progress import LoggingProgress, ProgressReporter
from storefront.services.storage import PublicStorage
from storefront.utils.batching import BatchAccumulator
from storefront.utils.slug import slug

logger = logging.getLogger(__name__)

Row = dict[str, Any]

# ---------------------------------------------------------------------------
# Enumerations sampled uniformly
# ---------------------------------------------------------------------------

ORDER_STATUSES = ("new", "processing", "shipped", "delivered", "cancelled")
CURRENCIES = ("USD", "EUR", "GBP")
SHIPPING_METHODS = ("UPS", "FedEx", "USPS")
LINK_COLORS = ("#F2A649", "#F2D59A", "#8DC63F", "#2E7D32", "#ff3951")

# ---------------------------------------------------------------------------
# Ranges (inclusive).  Money ranges are in cents.
# ---------------------------------------------------------------------------

PRODUCT_PRICE_CENTS = (1_000, 50_000)
ORDER_TOTAL_CENTS = (1_000, 100_000)
SHIPPING_PRICE_CENTS = (500, 2_500)
UNIT_PRICE_CENTS = (1_000, 50_000)
ITEM_QTY = (1, 4)
ITEMS_PER_ORDER = (2, 5)
CATEGORIES_PER_PRODUCT = (3, 6)
PUBLISHED_DAYS_AGO = (0, 365)

ORDER_NUMBER_LENGTH = 12
_ORDER_NUMBER_ALPHABET = string.ascii_letters + string.digits


# Stage name used for failures of the bulk-load session itself.
SESSION_STAGE = "session"


class SeedStageError(Exception):
    """A persistence failure aborted stage :attr:`table`.

    :attr:`table` is the table being seeded, or :data:`SESSION_STAGE` when
    the bulk-load session could not be opened, configured or restored.
    """

    def __init__(self, table: str) -> None:
        super().__init__(f"Seed stage {table!r} failed")
        self.table = table


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def money(rng: random.Random, cents: tuple[int, int]) -> Decimal:
    """Return a uniformly drawn amount in *cents* range as a two-place Decimal."""
    return (Decimal(rng.randint(*cents)) / 100).quantize(Decimal("0.01"))


def round_robin(ids: Sequence[int], i: int) -> int:
    """Return ``ids[i % len(ids)]``; spreads children evenly over parents."""
    return ids[i % len(ids)]


def order_number(rng: random.Random) -> str:
    return "".join(rng.choices(_ORDER_NUMBER_ALPHABET, k=ORDER_NUMBER_LENGTH)).upper()


# ---------------------------------------------------------------------------
# Seeder
# ---------------------------------------------------------------------------


class Seeder:
    """Generates every demo table in dependency order.

    Each stage clears its table, streams rows through a
    :class:`~storefront.utils.batching.BatchAccumulator` and returns the new
    primary keys, which later stages use for their foreign keys.
    """

    def __init__(
        self,
        store: BulkStore,
        storage: PublicStorage,
        reporter: ProgressReporter,
        *,
        targets: SeedTargets | None = None,
        chunks: ChunkSizes | None = None,
        public_disk: str = "public",
        rng: random.Random | None = None,
        now: datetime.datetime | None = None,
    ) -> None:
        self.store = store
        self.storage = storage
        self.reporter = reporter
        self.targets = targets or SeedTargets()
        self.chunks = chunks or ChunkSizes()
        self.public_disk = public_disk
        self.rng = rng or random.Random()
        self.now = now or datetime.datetime.now(datetime.UTC)

    # -- plumbing -----------------------------------------------------------

    def _stamp(self, row: Row) -> Row:
        row["created_at"] = self.now
        row["updated_at"] = self.now
        return row

    @asynccontextmanager
    async def _stage(self, table: str) -> AsyncGenerator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            raise SeedStageError(table) from exc

    def _batch(self, table: str, chunk_size: int, total: int | None = None) -> BatchAccumulator:
        return BatchAccumulator(self.store, table, chunk_size, total=total, reporter=self.reporter)

    async def populate(
        self,
        table: str,
        count: int,
        build_row: Callable[[int], Row],
        chunk_size: int,
    ) -> list[int]:
        """Replace *table* with ``build_row(i)`` for ``i`` in ``1..count``.

        Returns the table's ids in ascending order.
        """
        async with self._stage(table):
            await self.store.truncate(table)
            async with self._batch(table, chunk_size, total=count) as batch:
                for i in range(1, count + 1):
                    await batch.add(self._stamp(build_row(i)))
            return await self.store.list_ids(table)

    # -- stages -------------------------------------------------------------

    async def seed_admin_user(self) -> None:
        async with self._stage("users"):
            await self.store.truncate("users")
            await self.store.insert_batch(
                "users",
                [
                    self._stamp(
                        {
                            "name": DEMO_ADMIN_NAME,
                            "email": DEMO_ADMIN_EMAIL,
                            "password": hash_password(DEMO_ADMIN_PASSWORD),
                        }
                    )
                ],
            )
        self.reporter.info("Admin user created.")

    async def seed_brands(self) -> list[int]:
        ids = await self.populate(
            "shop_brands",
            self.targets.brands,
            lambda i: {
                "name": f"Brand {i}",
                "slug": slug(f"Brand {i}"),
                "website": f"https://brand{i}.example.com",
                "description": f"Description for Brand {i}",
                "is_visible": True,
                "sort": i,
            },
            self.chunks.brands,
        )
        self.reporter.info("Shop brands created.")
        return ids

    async def seed_categories(self) -> list[int]:
        """Create top-level categories, then their children.

        Parents are persisted and listed before any child is built, so
        every ``parent_id`` is a real parent row id.
        """
        table = "shop_categories"
        parents = self.targets.category_parents
        children = self.targets.category_children

        async with self._stage(table):
            await self.store.truncate(table)

            async with self._batch(table, self.chunks.categories, total=parents) as batch:
                for i in range(1, parents + 1):
                    name = f"Category {i}"
                    row = {"name": name, "slug": slug(name), "parent_id": None}
                    await batch.add(self._stamp(row))
            parent_ids = await self.store.list_ids(table)

            total = len(parent_ids) * children
            async with self._batch(table, self.chunks.categories, total=total) as batch:
                for i, parent_id in enumerate(parent_ids, start=1):
                    for j in range(1, children + 1):
                        name = f"Category {i}-{j}"
                        await batch.add(
                            self._stamp({"name": name, "slug": slug(name), "parent_id": parent_id})
                        )
            ids = await self.store.list_ids(table)

        self.reporter.info("Shop categories created.")
        return ids

    async def seed_customers(self) -> list[int]:
        ids = await self.populate(
            "shop_customers",
            self.targets.customers,
            lambda i: {"name": f"Customer {i}", "email": f"customer{i}@example.test"},
            self.chunks.customers,
        )
        self.reporter.info("Shop customers created.")
        return ids

    async def seed_products(self, brand_ids: Sequence[int]) -> list[int]:
        ids = await self.populate(
            "shop_products",
            self.targets.products,
            lambda i: {
                "name": f"Product {i}",
                "slug": slug(f"Product {i}"),
                "shop_brand_id": round_robin(brand_ids, i),
                "price": money(self.rng, PRODUCT_PRICE_CENTS),
            },
            self.chunks.products,
        )
        self.reporter.info("Shop products created.")
        return ids

    async def seed_category_product(
        self, product_ids: Sequence[int], category_ids: Sequence[int]
    ) -> None:
        """Link every product to 3-6 distinct random categories."""
        table = "shop_category_product"
        low, high = CATEGORIES_PER_PRODUCT
        async with self._stage(table):
            await self.store.truncate(table)
            async with self._batch(table, self.chunks.category_product) as batch:
                for product_id in product_ids:
                    k = min(self.rng.randint(low, high), len(category_ids))
                    for category_id in self.rng.sample(category_ids, k):
                        await batch.add(
                            self._stamp(
                                {"shop_product_id": product_id, "shop_category_id": category_id}
                            )
                        )
        self.reporter.info("Product-category relations created.")

    async def seed_orders(self, customer_ids: Sequence[int]) -> list[int]:
        rng = self.rng
        ids = await self.populate(
            "shop_orders",
            self.targets.orders,
            lambda i: {
                "shop_customer_id": round_robin(customer_ids, i),
                "number": order_number(rng),
                "total_price": money(rng, ORDER_TOTAL_CENTS),
                "status": rng.choice(ORDER_STATUSES),
                "currency": rng.choice(CURRENCIES),
                "shipping_price": money(rng, SHIPPING_PRICE_CENTS),
                "shipping_method": rng.choice(SHIPPING_METHODS),
                "notes": "Order seeded for demo",
            },
            self.chunks.orders,
        )
        self.reporter.info("Shop orders created.")
        return ids

    async def seed_order_items(
        self, order_ids: Sequence[int], product_ids: Sequence[int]
    ) -> None:
        """Give every order 2-5 line items.

        Item ``j`` of order ``oid`` is product ``product_ids[(oid + j) % n]``;
        ``sort`` runs across the whole table starting at 1.
        """
        table = "shop_order_items"
        low, high = ITEMS_PER_ORDER
        sort = 1
        async with self._stage(table):
            await self.store.truncate(table)
            async with self._batch(table, self.chunks.order_items) as batch:
                for order_id in order_ids:
                    for j in range(self.rng.randint(low, high)):
                        await batch.add(
                            self._stamp(
                                {
                                    "sort": sort,
                                    "shop_order_id": order_id,
                                    "shop_product_id": round_robin(product_ids, order_id + j),
                                    "qty": self.rng.randint(*ITEM_QTY),
                                    "unit_price": money(self.rng, UNIT_PRICE_CENTS),
                                }
                            )
                        )
                        sort += 1
        self.reporter.info("Order items created.")

    async def seed_blog_categories(self) -> list[int]:
        self.reporter.warn("\nCreating blog categories...")
        ids = await self.populate(
            "blog_categories",
            self.targets.blog_categories,
            lambda i: {
                "name": f"Category {i}",
                "slug": slug(f"Category {i}"),
                "description": f"This is category {i} description.",
                "is_visible": True,
                "seo_title": f"SEO Title for Category {i}",
                "seo_description": f"SEO description for Category {i}",
            },
            self.chunks.blog_categories,
        )
        self.reporter.info("Blog categories created.")
        return ids

    async def seed_blog_authors(self) -> list[int]:
        self.reporter.warn("\nCreating blog authors...")
        ids = await self.populate(
            "blog_authors",
            self.targets.blog_authors,
            lambda i: {
                "name": f"Author {i}",
                "email": f"author{i}@example.test",
                "photo": None,
                "bio": f"This is the bio for Author {i}.",
                "github_handle": f"author{i}",
                "twitter_handle": f"author{i}",
            },
            self.chunks.blog_authors,
        )
        self.reporter.info("Blog authors created.")
        return ids

    async def seed_blog_posts(
        self, author_ids: Sequence[int], category_ids: Sequence[int]
    ) -> list[int]:
        count = self.targets.blog_posts
        today = self.now.date()
        self.reporter.warn(f"\nCreating {count:,} blog posts (this may take a few minutes)...")
        ids = await self.populate(
            "blog_posts",
            count,
            lambda i: {
                "blog_author_id": round_robin(author_ids, i),
                "blog_category_id": round_robin(category_ids, i),
                "title": f"Post Title {i}",
                "slug": slug(f"Post Title {i}"),
                "content": (
                    f"This is the content for post {i}. "
                    "Generated quickly for performance testing."
                ),
                "published_at": today
                - datetime.timedelta(days=self.rng.randint(*PUBLISHED_DAYS_AGO)),
                "seo_title": f"SEO Title {i}",
                "seo_description": f"SEO Description {i}",
            },
            self.chunks.blog_posts,
        )
        self.reporter.info(f"{count:,} blog posts created.")
        return ids

    async def seed_blog_links(self) -> None:
        self.reporter.warn("\nCreating blog links...")
        await self.populate(
            "blog_links",
            self.targets.blog_links,
            lambda i: {
                "url": f"https://example.com/link-{i}",
                "title": {"en": f"Link Title {i}"},
                "description": {"en": f"This is link {i} description"},
                "color": self.rng.choice(LINK_COLORS),
            },
            self.chunks.blog_links,
        )
        self.reporter.info("Blog links created.")

    async def seed_comments(
        self,
        customer_ids: Sequence[int],
        product_ids: Sequence[int],
        post_ids: Sequence[int],
    ) -> None:
        """Alternate comments between products (even ``i``) and blog posts (odd ``i``)."""

        def build(i: int) -> Row:
            if i % 2 == 0:
                target = Commentable.product(round_robin(product_ids, i))
            else:
                target = Commentable.blog_post(round_robin(post_ids, i))
            return {
                "customer_id": round_robin(customer_ids, i),
                **target.as_columns(),
                "title": f"Comment Title {i}",
                "content": f"This is seeded comment #{i}.",
                "is_visible": True,
            }

        await self.populate("comments", self.targets.comments, build, self.chunks.comments)
        self.reporter.info("Comments created.")

    # -- entry point --------------------------------------------------------

    async def run(self) -> None:
        """Reset public storage and seed every table in dependency order."""
        self.storage.delete_directory(self.public_disk)

        await self.seed_admin_user()

        brand_ids = await self.seed_brands()
        category_ids = await self.seed_categories()
        customer_ids = await self.seed_customers()
        product_ids = await self.seed_products(brand_ids)
        await self.seed_category_product(product_ids, category_ids)

        order_ids = await self.seed_orders(customer_ids)
        await self.seed_order_items(order_ids, product_ids)

        blog_category_ids = await self.seed_blog_categories()
        author_ids = await self.seed_blog_authors()
        post_ids = await self.seed_blog_posts(author_ids, blog_category_ids)
        await self.seed_blog_links()

        # Comments may target blog posts, so they come last.
        await self.seed_comments(customer_ids, product_ids, post_ids)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


async def seed() -> None:
    """Seed the configured database in bulk-load mode.

    Persistence failures while opening, configuring or restoring the
    bulk-load session are reported as stage ``"session"``.
    """
    engine = create_engine_from_url(settings.database_url, echo=settings.database_echo)
    mode = BulkLoadMode(disable_foreign_key_checks=settings.bulk_load_disable_fk_checks)
    try:
        async with bulk_load(engine, mode) as store:
            seeder = Seeder(
                store,
                PublicStorage(settings.storage_root),
                LoggingProgress(),
                targets=settings.seed_targets,
                chunks=settings.seed_chunks,
                public_disk=settings.public_disk,
                rng=random.Random(settings.random_seed),
            )
            await seeder.run()
    except SQLAlchemyError as exc:
        raise SeedStageError(SESSION_STAGE) from exc
    finally:
        await engine.dispose()


async def main() -> None:
    logging.basicConfig(level=settings.log_level.upper(), format="%(message)s")

    logger.info("Storefront Seed Script")
    logger.info("=" * 50)

    try:
        await seed()
    except SeedStageError:
        logger.exception("Seeding aborted")
        raise SystemExit(1) from None

    logger.info("\n✓ Seed complete!")
