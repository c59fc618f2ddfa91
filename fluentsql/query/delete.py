"""DELETE statements."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator

from ..expressions import build_where
from ..utils import as_pairs, quote_identifier
from ._bases import CompiledQuery, Statement


class DeleteQuery(Statement):
    """``DELETE FROM <table> [WHERE ...]``. Without conditions, every row is deleted."""

    kind: Literal["delete"] = "delete"
    conditions: list[list[tuple[str, Any]]] = Field(default_factory=list)

    @field_validator("conditions", mode="before")
    @classmethod
    def _normalize_conditions(cls, value: Any) -> list[list[tuple[str, Any]]]:
        return [as_pairs(condition) for condition in value]

    def compile(self) -> CompiledQuery:
        sql = f"DELETE FROM {quote_identifier(self.table)}"
        where = build_where(self.conditions)
        if where.sql:
            sql += f" WHERE {where.sql}"
        return CompiledQuery(sql=sql, values=where.values)
