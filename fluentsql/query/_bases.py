"""Base statement type: compile to SQL text and values, then dispatch to a database."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, Field

from ..expressions import Clause


class QueryError(ValueError):
    """Invalid statement configuration, detected before anything reaches the database."""


class CompiledQuery(Clause):
    """A complete SQL statement with its positional values."""


class QueryResult(BaseModel):
    """What a database returns for one statement."""

    rows: list[dict[str, Any]] = Field(default_factory=list)
    """Returned rows as dicts (empty for statements without a result set)."""
    rowcount: int = -1
    """Rows affected or returned, as reported by the driver (-1 if unknown)."""
    status: Optional[str] = None
    """Command status tag (e.g. ``UPDATE 3``)."""


class Statement(BaseModel, ABC):
    """One SQL statement on one table.

    Subclasses carry a ``kind`` tag and their own configuration, and implement
    ``compile()``. Building and configuring a statement performs no I/O; only
    ``execute()`` talks to the database, once per call. Executing the same
    statement twice compiles and sends it twice.
    """

    model_config = {"arbitrary_types_allowed": True}

    database: Any = Field(default=None, exclude=True, repr=False)
    """Executor: any object with ``async query(sql, values) -> QueryResult``."""
    table: str

    @abstractmethod
    def compile(self) -> CompiledQuery:
        """Return the SQL text and values for this statement (pure, synchronous)."""
        ...  # pylint: disable=unnecessary-ellipsis

    async def dispatch(self) -> QueryResult:
        """Compile, then send the statement to the database and return its result."""
        compiled = self.compile()
        if self.database is None:
            raise QueryError(f"{type(self).__name__} on {self.table!r} is not bound to a database")
        return await self.database.query(compiled.sql, compiled.values)

    async def execute(self) -> Any:
        """Run the statement and return its QueryResult (SelectQuery returns the rows)."""
        return await self.dispatch()
