"""fluentsql: parameterized SQL statements for PostgreSQL, built fluently and run on demand."""

from .connection import connect, disconnect, get_database
from .database import Database
from .expressions import build_updates, build_where, where_value
from .query import (
    CompiledQuery,
    DeleteQuery,
    InsertQuery,
    QueryDescriptor,
    QueryError,
    QueryResult,
    SelectQuery,
    UpdateQuery,
)

__all__ = [
    "CompiledQuery",
    "Database",
    "DeleteQuery",
    "InsertQuery",
    "QueryDescriptor",
    "QueryError",
    "QueryResult",
    "SelectQuery",
    "UpdateQuery",
    "build_updates",
    "build_where",
    "connect",
    "disconnect",
    "get_database",
    "where_value",
]
