"""Shared RETURNING configuration for INSERT and UPDATE."""

from __future__ import annotations

from pydantic import Field

from ..utils import as_field_list, quote_identifiers
from ._bases import Statement


class UpsertQuery(Statement):
    """Base for statements that write rows and can report them back with RETURNING."""

    returning_fields: list[str] = Field(default_factory=list)

    def returning(self, fields: str | list[str]) -> UpsertQuery:
        """Replace the RETURNING list; an empty list removes the clause."""
        self.returning_fields = as_field_list(fields)
        return self

    @property
    def sql_returning(self) -> str:
        """``RETURNING "a", "b"``, or an empty string."""
        if not self.returning_fields:
            return ""
        return "RETURNING " + quote_identifiers(self.returning_fields)
