"""Small helpers shared by the clause builders and the statement compilers."""

from .fields import as_field_list
from .pairs import Pair, as_pairs
from .quote import quote_identifier, quote_identifiers

__all__ = [
    "Pair",
    "as_field_list",
    "as_pairs",
    "quote_identifier",
    "quote_identifiers",
]
