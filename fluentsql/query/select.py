"""SELECT statements and their transportable descriptor."""

from __future__ import annotations

import copy
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..expressions import build_where
from ..utils import as_field_list, as_pairs, quote_identifier, quote_identifiers
from ._bases import CompiledQuery, QueryError, Statement


class SelectOptions(BaseModel):
    """ORDER BY / LIMIT / OFFSET settings. ``order`` and ``desc`` exclude each other."""

    order: Optional[list[str]] = None
    desc: Optional[list[str]] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class QueryDescriptor(BaseModel):
    """Plain-data form of a SelectQuery, for sending an unexecuted query elsewhere."""

    table: str
    fields: list[str] = Field(default_factory=lambda: ["*"])
    where: list[list[tuple[str, Any]]] = Field(default_factory=list)
    """Conditions as ordered (key, value) pairs; mappings are accepted too."""
    options: SelectOptions = Field(default_factory=SelectOptions)

    @field_validator("fields", mode="before")
    @classmethod
    def _normalize_fields(cls, value: Any) -> list[str]:
        return as_field_list(value)

    @field_validator("where", mode="before")
    @classmethod
    def _normalize_where(cls, value: Any) -> list[list[tuple[str, Any]]]:
        return [as_pairs(condition) for condition in value]


def _row_count(clause: str, count: Any) -> int:
    value = int(count)
    if value < 0 or (isinstance(count, float) and not count.is_integer()):
        raise QueryError(f"{clause} must be a non-negative integer, got {count!r}")
    return value


class SelectQuery(Statement):
    """``SELECT <fields> FROM <table> [WHERE ...] [ORDER BY ...] [LIMIT n] [OFFSET n]``.

    Conditions are OR-ed together; keys within a condition are AND-ed.
    Setters return the query itself, so calls can be chained::

        rows = await db.select("city", ["name"], {"population": ">1000000"}).desc("population").limit(10).execute()
    """

    kind: Literal["select"] = "select"
    fields: list[str] = Field(default_factory=lambda: ["*"])
    where: list[list[tuple[str, Any]]] = Field(default_factory=list)
    options: SelectOptions = Field(default_factory=SelectOptions)

    @field_validator("fields", mode="before")
    @classmethod
    def _normalize_fields(cls, value: Any) -> list[str]:
        return as_field_list(value)

    @field_validator("where", mode="before")
    @classmethod
    def _normalize_where(cls, value: Any) -> list[list[tuple[str, Any]]]:
        return [as_pairs(condition) for condition in value]

    def order(self, field: str | list[str]) -> SelectQuery:
        """Sort ascending by the given field(s); clears any ``desc()``."""
        self.options.desc = None
        self.options.order = as_field_list(field)
        return self

    def desc(self, field: str | list[str]) -> SelectQuery:
        """Sort descending by the given field(s); clears any ``order()``."""
        self.options.order = None
        self.options.desc = as_field_list(field)
        return self

    def limit(self, count: int) -> SelectQuery:
        """Set LIMIT (a non-negative integer)."""
        self.options.limit = _row_count("LIMIT", count)
        return self

    def offset(self, count: int) -> SelectQuery:
        """Set OFFSET (a non-negative integer)."""
        self.options.offset = _row_count("OFFSET", count)
        return self

    def compile(self) -> CompiledQuery:
        if not self.fields or self.fields[0] == "*":
            names = "*"
        else:
            names = quote_identifiers(self.fields)
        sql = [f"SELECT {names} FROM {quote_identifier(self.table)}"]
        values = []
        if self.where:
            where = build_where(self.where)
            sql.append("WHERE " + where.sql)
            values.extend(where.values)
        options = self.options
        if options.order:
            sql.append("ORDER BY " + quote_identifiers(options.order))
        if options.desc:
            sql.append("ORDER BY " + ", ".join(f"{quote_identifier(name)} DESC" for name in options.desc))
        if options.limit is not None:
            sql.append(f"LIMIT {options.limit}")
        if options.offset is not None:
            sql.append(f"OFFSET {options.offset}")
        return CompiledQuery(sql=" ".join(sql), values=values)

    async def execute(self) -> list[dict[str, Any]]:
        """Run the query and return its rows."""
        result = await self.dispatch()
        return result.rows

    def to_object(self) -> dict[str, Any]:
        """Return a descriptor dict, independent of later changes to this query."""
        return {
            "table": self.table,
            "fields": list(self.fields),
            "where": copy.deepcopy(self.where),
            "options": self.options.model_dump(exclude_none=True),
        }

    @classmethod
    def from_object(cls, database: Any, descriptor: dict[str, Any] | QueryDescriptor) -> SelectQuery:
        """Rebuild a query from ``to_object()`` output, bound to the given database."""
        metadata = QueryDescriptor.model_validate(descriptor)
        return cls(
            database=database,
            table=metadata.table,
            fields=list(metadata.fields),
            where=copy.deepcopy(metadata.where),
            options=metadata.options.model_copy(deep=True),
        )
