"""PostgreSQL connection pools opened from a database URL."""

import logging
import urllib.parse
from typing import Any

logger = logging.getLogger(__name__)

SCHEMES: tuple[str, ...] = ("postgresql", "postgres")


def parse_url(url: str) -> urllib.parse.ParseResult:
    """Parse ``url``, accepting ``postgresql``, ``postgres`` and ``postgresql+<driver>`` schemes."""
    parsed = urllib.parse.urlparse(url)
    if parsed.scheme.split("+")[0].lower() not in SCHEMES:
        raise ValueError(f"Unsupported database scheme: {parsed.scheme}")
    return parsed


async def open_pool(url: str, min_size: int = 1, max_size: int = 10, **options: Any):
    """Open a psycopg async pool whose connections bind ``$n`` parameters server-side.

    Rows come back as dicts. Extra options (e.g. ``timeout``) go to ``AsyncConnectionPool``.
    """
    parsed = parse_url(url)

    import psycopg  # pylint: disable=import-outside-toplevel
    from psycopg.rows import dict_row  # pylint: disable=import-outside-toplevel
    from psycopg_pool import AsyncConnectionPool  # pylint: disable=import-outside-toplevel

    parameters = {
        "host": parsed.hostname,
        "user": parsed.username,
        "password": parsed.password,
        "dbname": (parsed.path or "")[1:] or None,
        "port": parsed.port,
    }
    kwargs = {key: value for key, value in parameters.items() if value is not None}
    kwargs["cursor_factory"] = psycopg.AsyncRawCursor
    kwargs["row_factory"] = dict_row
    logger.info("Opening PostgreSQL pool on %s:%s/%s", parsed.hostname, parsed.port or 5432, kwargs.get("dbname", ""))
    pool = AsyncConnectionPool(
        min_size=min_size,
        max_size=max_size,
        kwargs=kwargs,
        open=False,
        **options,
    )
    await pool.open()
    return pool
