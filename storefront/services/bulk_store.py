"""Bulk persistence boundary used by the seeder.

The seeder only ever needs three operations on a table: clear it, insert a
chunk of rows, and list its primary keys.  :class:`SqlAlchemyBulkStore`
implements them with SQLAlchemy Core over a single :class:`AsyncConnection`
obtained from :func:`bulk_load`, which also relaxes session-level checks for
the duration of the run and restores them afterwards.
"""

import logging
import re
from collections.abc import AsyncGenerator, Mapping, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, Protocol

from sqlalchemy import MetaData, Table, delete, insert, select, text
from sqlalchemy.engine import Dialect
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine
from sqlalchemy.sql.expression import Executable

import storefront.models  # noqa: F401  registers every table on Base.metadata
from storefront.models.base import Base

logger = logging.getLogger(__name__)

_UTC_OFFSET_RE = re.compile(r"^[+-]\d{2}:\d{2}$")


class BulkStore(Protocol):
    async def truncate(self, table: str) -> None: ...

    async def insert_batch(self, table: str, rows: Sequence[Mapping[str, Any]]) -> None: ...

    async def list_ids(self, table: str) -> list[int]: ...


# ---------------------------------------------------------------------------
# Bulk-load session settings
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BulkLoadMode:
    """Session settings relaxed while bulk loading.

    ``time_zone`` is a UTC offset such as ``"+00:00"``; ``None`` leaves the
    session time zone alone.
    """

    time_zone: str | None = "+00:00"
    disable_foreign_key_checks: bool = True
    disable_unique_checks: bool = True
    disable_query_log: bool = True

    def __post_init__(self) -> None:
        if self.time_zone is not None and not _UTC_OFFSET_RE.match(self.time_zone):
            raise ValueError(f"time_zone must look like '+00:00', got {self.time_zone!r}")


def session_statements(dialect_name: str, mode: BulkLoadMode) -> tuple[list[str], list[str]]:
    """Return ``(apply, restore)`` SQL statements for *mode* on *dialect_name*.

    ``restore`` is already in the order it must run, i.e. the reverse of
    ``apply``.  Settings a dialect cannot change are skipped.
    """
    pairs: list[tuple[str, str]] = []

    if dialect_name == "postgresql":
        if mode.time_zone is not None:
            pairs.append(
                (
                    f"SET TIME ZONE INTERVAL '{mode.time_zone}' HOUR TO MINUTE",
                    "RESET TIME ZONE",
                )
            )
        if mode.disable_foreign_key_checks:
            # Replica role skips FK triggers; requires superuser.
            pairs.append(
                (
                    "SET session_replication_role = replica",
                    "SET session_replication_role = DEFAULT",
                )
            )
    elif dialect_name in ("mysql", "mariadb"):
        if mode.time_zone is not None:
            pairs.append(
                (f"SET time_zone = '{mode.time_zone}'", "SET time_zone = @@global.time_zone")
            )
        if mode.disable_foreign_key_checks:
            pairs.append(("SET foreign_key_checks = 0", "SET foreign_key_checks = 1"))
        if mode.disable_unique_checks:
            pairs.append(("SET unique_checks = 0", "SET unique_checks = 1"))
    elif dialect_name == "sqlite":
        if mode.disable_foreign_key_checks:
            pairs.append(("PRAGMA foreign_keys = OFF", "PRAGMA foreign_keys = ON"))
    else:
        logger.warning("No bulk-load session settings known for dialect %r", dialect_name)

    apply = [stmt for stmt, _ in pairs]
    restore = [stmt for _, stmt in reversed(pairs)]
    return apply, restore


def truncate_statement(dialect: Dialect, table: Table) -> Executable:
    """Return the statement that empties *table* and resets its identity."""
    if dialect.name == "postgresql":
        name = dialect.identifier_preparer.format_table(table)
        return text(f"TRUNCATE TABLE {name} RESTART IDENTITY CASCADE")
    if dialect.name in ("mysql", "mariadb"):
        name = dialect.identifier_preparer.format_table(table)
        return text(f"TRUNCATE TABLE {name}")
    return delete(table)


# ---------------------------------------------------------------------------
# SQLAlchemy implementation
# ---------------------------------------------------------------------------


class SqlAlchemyBulkStore:
    """:class:`BulkStore` over one connection, committing after every call."""

    def __init__(self, conn: AsyncConnection, metadata: MetaData = Base.metadata) -> None:
        self._conn = conn
        self._metadata = metadata

    def _table(self, name: str) -> Table:
        try:
            return self._metadata.tables[name]
        except KeyError:
            raise KeyError(f"Unknown table {name!r}") from None

    async def truncate(self, table: str) -> None:
        await self._conn.execute(truncate_statement(self._conn.dialect, self._table(table)))
        await self._conn.commit()

    async def insert_batch(self, table: str, rows: Sequence[Mapping[str, Any]]) -> None:
        if not rows:
            return
        await self._conn.execute(insert(self._table(table)), list(rows))
        await self._conn.commit()

    async def list_ids(self, table: str) -> list[int]:
        tbl = self._table(table)
        result = await self._conn.execute(select(tbl.c.id).order_by(tbl.c.id))
        return list(result.scalars().all())


@asynccontextmanager
async def bulk_load(
    engine: AsyncEngine,
    mode: BulkLoadMode = BulkLoadMode(),
) -> AsyncGenerator[SqlAlchemyBulkStore]:
    """Yield a :class:`SqlAlchemyBulkStore` with *mode* applied to its session.

    Every relaxed setting is restored on exit, including when the body
    raised.  Statement echo is switched off for the duration when
    ``mode.disable_query_log`` is set.
    """
    sync_engine = engine.sync_engine
    previous_echo = sync_engine.echo
    if mode.disable_query_log:
        sync_engine.echo = False

    try:
        async with engine.connect() as conn:
            apply, restore = session_statements(conn.dialect.name, mode)
            for stmt in apply:
                await conn.execute(text(stmt))
            await conn.commit()
            logger.debug("Bulk-load mode applied: %s", apply)

            try:
                yield SqlAlchemyBulkStore(conn)
            finally:
                if conn.in_transaction():
                    await conn.rollback()
                for stmt in restore:
                    await conn.execute(text(stmt))
                await conn.commit()
                logger.debug("Bulk-load mode restored: %s", restore)
    finally:
        sync_engine.echo = previous_echo
