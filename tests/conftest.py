"""Shared fixtures: a recording executor, a fake psycopg pool, and a clean connection registry."""

from contextlib import asynccontextmanager

import pytest

from fluentsql import connection
from fluentsql.query import QueryResult


class RecordingDatabase:
    """Executor stand-in: records every (sql, values) and replies with queued results."""

    def __init__(self):
        self.calls = []
        self.results = []

    async def query(self, sql, values=()):
        self.calls.append((sql, tuple(values)))
        if self.results:
            return self.results.pop(0)
        return QueryResult()


class FakeCursor:
    """Mock psycopg async cursor."""

    def __init__(self, rows=None, description=True, rowcount=-1, statusmessage=None):
        self.rows = rows or []
        self.description = description
        self.rowcount = rowcount
        self.statusmessage = statusmessage

    async def fetchall(self):
        return self.rows


class FakeConnection:
    """Mock psycopg async connection."""

    def __init__(self, cursor):
        self.cursor = cursor
        self.executed = []

    async def execute(self, sql, params=None):
        self.executed.append((sql, params))
        return self.cursor


class FakePool:
    """Mock psycopg_pool.AsyncConnectionPool."""

    def __init__(self, cursor):
        self.fake_connection = FakeConnection(cursor)
        self.closed = False

    @asynccontextmanager
    async def connection(self):
        yield self.fake_connection

    async def close(self):
        self.closed = True


@pytest.fixture
def recorder():
    """A fresh RecordingDatabase."""
    return RecordingDatabase()


@pytest.fixture
def make_pool():
    """Build a FakePool whose connections return a FakeCursor with the given settings."""
    def factory(**cursor_kwargs):
        return FakePool(FakeCursor(**cursor_kwargs))
    return factory


@pytest.fixture(autouse=True)
def reset_connections():
    """Forget registered URLs and opened databases after each test."""
    yield
    connection._urls.clear()
    connection._databases.clear()
