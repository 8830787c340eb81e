"""Bounded row buffer that submits full chunks to a :class:`BulkStore`."""

from collections.abc import Mapping
from types import TracebackType
from typing import Any

from storefront.services.bulk_store import BulkStore
from storefront.services.progress import ProgressReporter

# Progress is reported every this many chunks on stages larger than
# _PROGRESS_MIN_ROWS.
_PROGRESS_EVERY_CHUNKS = 10
_PROGRESS_MIN_ROWS = 2_000


class BatchAccumulator:
    """Collect rows for *table* and insert them *chunk_size* at a time.

    Use as an async context manager so the final partial chunk is flushed::

        async with BatchAccumulator(store, "shop_customers", 5000) as batch:
            for row in rows:
                await batch.add(row)

    When *total* is unknown (``None``) progress lines omit it, and the size
    threshold applies to the rows inserted so far instead.
    """

    def __init__(
        self,
        store: BulkStore,
        table: str,
        chunk_size: int,
        *,
        total: int | None = None,
        reporter: ProgressReporter | None = None,
    ) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
        self.store = store
        self.table = table
        self.chunk_size = chunk_size
        self.total = total
        self.reporter = reporter
        self.inserted = 0
        self.chunks = 0
        self._buffer: list[Mapping[str, Any]] = []

    def __len__(self) -> int:
        return len(self._buffer)

    async def add(self, row: Mapping[str, Any]) -> None:
        self._buffer.append(row)
        if len(self._buffer) >= self.chunk_size:
            await self.flush()

    async def flush(self) -> None:
        """Insert buffered rows, if any, and clear the buffer."""
        if not self._buffer:
            return
        chunk, self._buffer = self._buffer, []
        await self.store.insert_batch(self.table, chunk)
        self.inserted += len(chunk)
        self.chunks += 1
        self._report()

    def _report(self) -> None:
        if self.reporter is None or self.chunks % _PROGRESS_EVERY_CHUNKS:
            return
        if self.total is None:
            if self.inserted > _PROGRESS_MIN_ROWS:
                self.reporter.line(f"  → {self.table}: {self.inserted}")
        elif self.total > _PROGRESS_MIN_ROWS:
            self.reporter.line(f"  → {self.table}: {self.inserted}/{self.total}")

    async def __aenter__(self) -> "BatchAccumulator":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        # Rows buffered before a failure are dropped with the failed run.
        if exc_type is None:
            await self.flush()
