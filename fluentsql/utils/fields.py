"""Field list normalization."""

from typing import Iterable


def as_field_list(fields: str | Iterable[str]) -> list[str]:
    """Return a list of field names from one name or an iterable of names."""
    if isinstance(fields, str):
        return [fields]
    return list(fields)
