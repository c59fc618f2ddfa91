"""UPDATE statements."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator

from ..expressions import build_updates, build_where
from ..utils import as_pairs, quote_identifier
from ._bases import CompiledQuery, QueryError
from .upsert import UpsertQuery


class UpdateQuery(UpsertQuery):
    """``UPDATE <table> SET ... WHERE ... [RETURNING ...]``.

    WHERE placeholders are numbered after the SET placeholders. An empty delta,
    no condition, or an empty condition is rejected: it would either be invalid
    SQL or update every row.
    """

    kind: Literal["update"] = "update"
    delta: list[tuple[str, Any]] = Field(default_factory=list)
    conditions: list[list[tuple[str, Any]]] = Field(default_factory=list)

    @field_validator("delta", mode="before")
    @classmethod
    def _normalize_delta(cls, value: Any) -> list[tuple[str, Any]]:
        return as_pairs(value if value is not None else ())

    @field_validator("conditions", mode="before")
    @classmethod
    def _normalize_conditions(cls, value: Any) -> list[list[tuple[str, Any]]]:
        return [as_pairs(condition) for condition in value]

    def compile(self) -> CompiledQuery:
        if not self.delta:
            raise QueryError(f"UPDATE on {self.table!r} requires at least one field to set")
        if not self.conditions:
            raise QueryError(f"UPDATE on {self.table!r} requires at least one condition")
        if not all(self.conditions):
            raise QueryError(f"UPDATE on {self.table!r} has an empty condition, which would match every row")
        updates = build_updates(self.delta)
        where = build_where(self.conditions, updates.placeholder_count + 1)
        sql = [f"UPDATE {quote_identifier(self.table)} SET {updates.sql} WHERE {where.sql}"]
        if self.sql_returning:
            sql.append(self.sql_returning)
        return CompiledQuery(sql=" ".join(sql), values=updates.values + where.values)
