import ssl as _ssl
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def _asyncpg_url(url: str) -> tuple[str, dict]:
    """Convert a database URL for asyncpg compatibility.

    asyncpg does not accept ``sslmode`` as a query parameter; it expects
    ``ssl`` to be passed via ``connect_args``.  This helper strips
    ``sslmode`` from the URL and returns the cleaned URL plus any extra
    ``connect_args`` needed.  URLs for other drivers pass through unchanged.
    """
    parts = urlsplit(url)
    if not parts.scheme.startswith("postgresql+asyncpg"):
        return url, {}

    qs = parse_qs(parts.query)
    connect_args: dict = {}

    if "sslmode" in qs:
        mode = qs.pop("sslmode")[0]
        if mode in ("require", "verify-ca", "verify-full"):
            connect_args["ssl"] = _ssl.create_default_context()
        new_query = urlencode(qs, doseq=True)
        url = urlunsplit(parts._replace(query=new_query))

    return url, connect_args


def create_engine_from_url(url: str, *, echo: bool = False) -> AsyncEngine:
    """Return an :class:`AsyncEngine` for *url*.

    The seeder holds a single connection for the whole run, so no pool
    sizing is configured beyond the dialect defaults.
    """
    url, connect_args = _asyncpg_url(url)
    return create_async_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )
