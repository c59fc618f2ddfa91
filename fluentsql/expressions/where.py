"""WHERE clause builder: OR of AND-groups."""

from typing import Any, Iterable

from ..utils import as_pairs, quote_identifier
from ._bases import Clause
from .operators import where_value


def build_where(conditions: Iterable[Any], first_index: int = 1, quote: bool = True) -> Clause:
    """Build a disjunction of conjunctions from a sequence of conditions.

    Each condition is a mapping (or sequence of pairs); its keys are AND-ed,
    and the conditions are OR-ed together. Placeholders start at ``$first_index``.
    Pass ``quote=False`` only for schema-qualified catalog names
    (e.g. ``columns.table_name``).

    An empty sequence gives an empty clause: the caller omits WHERE.
    """
    disjunction = []
    values = []
    index = first_index
    for condition in conditions:
        conjunction = []
        for key, value in as_pairs(condition):
            operator, literal = where_value(value)
            conjunction.append(f"{quote_identifier(key, quote)} {operator} ${index}")
            values.append(literal)
            index += 1
        # an empty AND-group is always true
        disjunction.append(" AND ".join(conjunction) if conjunction else "TRUE")
    return Clause(sql=" OR ".join(disjunction), values=values)
