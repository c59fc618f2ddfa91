"""INSERT statements, with optional ON CONFLICT handling."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..expressions import build_updates
from ..utils import as_field_list, as_pairs, quote_identifier, quote_identifiers
from ._bases import CompiledQuery, QueryError
from .upsert import UpsertQuery


class ConflictSpec(BaseModel):
    """Unique/exclusion columns that trigger ON CONFLICT, and what to do then."""

    fields: list[str] = Field(default_factory=list)
    action: Literal["none", "nothing", "update"] = "none"
    exclude_fields: list[str] = Field(default_factory=list)


class ConflictClause:
    """Returned by ``InsertQuery.on_conflict()``: pick the conflict action."""

    def __init__(self, query: InsertQuery):
        self._query = query

    def do_nothing(self) -> InsertQuery:
        """``ON CONFLICT (...) DO NOTHING``."""
        self._query.conflict.action = "nothing"
        return self._query

    def do_update(self, exclude: Optional[str | list[str]] = None) -> InsertQuery:
        """``ON CONFLICT (...) DO UPDATE SET ...`` with every record field not in ``exclude``.

        A leading ``!`` on an exclusion entry is ignored (older exclusion syntax).
        """
        names = as_field_list(exclude) if exclude is not None else []
        exclude_fields = [name[1:] if name.startswith("!") else name for name in names]
        self._query._update_delta(exclude_fields)
        conflict = self._query.conflict
        conflict.action = "update"
        conflict.exclude_fields = exclude_fields
        return self._query


class InsertQuery(UpsertQuery):
    """``INSERT INTO <table> (<columns>) VALUES (<placeholders>) [ON CONFLICT ...] [RETURNING ...]``.

    Columns, values, and placeholders all follow the record's key order.
    Values from an ON CONFLICT DO UPDATE come after the inserted values.
    """

    kind: Literal["insert"] = "insert"
    record: list[tuple[str, Any]] = Field(default_factory=list)
    conflict: Optional[ConflictSpec] = None

    @field_validator("record", mode="before")
    @classmethod
    def _normalize_record(cls, value: Any) -> list[tuple[str, Any]]:
        return as_pairs(value if value is not None else ())

    def on_conflict(self, fields: str | list[str]) -> ConflictClause:
        """Attach an ON CONFLICT clause on the given columns (allowed once per statement)."""
        if self.conflict is not None:
            raise QueryError(f"ON CONFLICT is already configured for INSERT into {self.table!r}")
        self.conflict = ConflictSpec(fields=as_field_list(fields))
        return ConflictClause(self)

    def _update_delta(self, exclude_fields: Optional[list[str]] = None) -> list[tuple[str, Any]]:
        """Record fields written by DO UPDATE (the record minus excluded fields)."""
        if not self.conflict.fields:
            raise QueryError("ON CONFLICT DO UPDATE requires at least one conflict column")
        excluded = set(self.conflict.exclude_fields if exclude_fields is None else exclude_fields)
        delta = [(key, value) for key, value in self.record if key not in excluded]
        if not delta:
            raise QueryError(f"ON CONFLICT DO UPDATE on {self.table!r} has no fields left to update")
        return delta

    @property
    def sql_conflict(self) -> tuple[str, tuple[Any, ...]]:
        """ON CONFLICT clause and its values, numbered after the inserted values."""
        conflict = self.conflict
        if conflict is None:
            return "", ()
        target = f" ({quote_identifiers(conflict.fields)})" if conflict.fields else ""
        if conflict.action == "nothing":
            return f"ON CONFLICT{target} DO NOTHING", ()
        if conflict.action == "update":
            updates = build_updates(self._update_delta(), len(self.record) + 1)
            return f"ON CONFLICT{target} DO UPDATE SET {updates.sql}", updates.values
        raise QueryError("on_conflict() must be followed by do_nothing() or do_update()")

    def compile(self) -> CompiledQuery:
        table = quote_identifier(self.table)
        if self.record:
            columns = quote_identifiers(key for key, _ in self.record)
            placeholders = ", ".join(f"${index}" for index in range(1, len(self.record) + 1))
            sql = [f"INSERT INTO {table} ({columns}) VALUES ({placeholders})"]
        else:
            sql = [f"INSERT INTO {table} DEFAULT VALUES"]
        values = [value for _, value in self.record]
        conflict_sql, conflict_values = self.sql_conflict
        if conflict_sql:
            sql.append(conflict_sql)
            values.extend(conflict_values)
        if self.sql_returning:
            sql.append(self.sql_returning)
        return CompiledQuery(sql=" ".join(sql), values=values)
