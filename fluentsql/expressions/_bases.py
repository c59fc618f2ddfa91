"""Base value type for SQL fragments."""

from typing import Any, Tuple

from pydantic import BaseModel, Field as PydanticField


class Clause(BaseModel):
    """SQL fragment with ``$n`` placeholders and the values bound to them, in order."""

    sql: str = ""
    values: Tuple[Any, ...] = PydanticField(default_factory=tuple)

    @property
    def placeholder_count(self) -> int:
        """Number of placeholders in ``sql`` (one per bound value)."""
        return len(self.values)
