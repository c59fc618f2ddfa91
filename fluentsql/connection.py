"""Named database URLs and the Database opened for each of them."""

from typing import Any, Callable

from .database import Database


_urls: dict[str, str | Callable[[], str]] = {}
_databases: dict[str, Database] = {}


def connect(database_url: str | Callable[[], str], name: str = "default") -> None:
    """Register a database URL (or a function returning one) under ``name``.

    Nothing is opened until ``get_database(name)`` is awaited.
    """
    if not isinstance(database_url, str) and not callable(database_url):
        raise ValueError("database_url should be a str, or a method returning a str")
    _urls[name] = database_url


def _get_url(name: str = "default") -> str:
    try:
        url = _urls[name]
    except KeyError as error:
        raise ValueError(f"No connection configured with name=`{name}`") from error
    if callable(url):
        url = url()
    return url


async def get_database(name: str = "default", **options: Any) -> Database:
    """Return the Database registered as ``name``, opening its pool on first use.

    Options are passed to ``Database.open()`` the first time only.
    """
    if name not in _databases:
        _databases[name] = await Database.open(_get_url(name), **options)
    return _databases[name]


async def disconnect(name: str = "default") -> None:
    """Close and forget the Database opened for ``name`` (no-op if none is open)."""
    database = _databases.pop(name, None)
    if database is not None:
        await database.close()
