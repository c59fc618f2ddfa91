"""Parameterized SQL fragments.

The builders in this package turn plain Python mappings into SQL text with
``$n`` placeholders. Each returns a :class:`Clause` whose ``.sql`` holds the
fragment and whose ``.values`` holds the bound values in placeholder order.
"""

from ._bases import Clause
from .assignment import assignment_value, build_updates
from .operators import OPERATORS, where_value
from .where import build_where

__all__ = [
    "OPERATORS",
    "Clause",
    "assignment_value",
    "build_updates",
    "build_where",
    "where_value",
]
