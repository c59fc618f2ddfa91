"""SET clause builder."""

from typing import Any

from ..utils import as_pairs, quote_identifier
from ._bases import Clause


def assignment_value(value: Any) -> Any:
    """Parameter for one SET value: ``None`` and bytes pass through, anything else is bound as ``str(value)``."""
    if value is None or isinstance(value, (bytes, bytearray, memoryview)):
        return value
    return str(value)


def build_updates(delta: Any, first_index: int = 1) -> Clause:
    """Build ``"a" = $1, "b" = $2`` from a delta mapping (or sequence of pairs).

    Values are bound as their ``str()`` form, unlike condition values which
    are passed through unconverted. ``None`` stays ``None`` and sets the column
    to NULL; bytes stay binary.
    """
    assignments = []
    values = []
    for index, (key, value) in enumerate(as_pairs(delta), start=first_index):
        assignments.append(f"{quote_identifier(key)} = ${index}")
        values.append(assignment_value(value))
    return Clause(sql=", ".join(assignments), values=values)
