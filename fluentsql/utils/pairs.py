"""Normalize mappings into explicit ordered (key, value) pairs."""

from collections.abc import Mapping
from typing import Any

Pair = tuple[str, Any]


def as_pairs(thing: Any) -> list[Pair]:
    """Return thing as a list of (key, value) pairs, preserving key order.

    Accepts a mapping or an iterable of 2-item pairs (e.g. the output of a
    previous call). Keys must be strings.
    """
    if isinstance(thing, Mapping):
        items = list(thing.items())
    elif isinstance(thing, (str, bytes)):
        raise TypeError(f"Expected a mapping or a sequence of pairs, got {type(thing).__name__}")
    else:
        try:
            items = [tuple(item) for item in thing]
        except TypeError as error:
            raise TypeError(
                f"Expected a mapping or a sequence of pairs, got {type(thing).__name__}"
            ) from error
    for item in items:
        if len(item) != 2 or not isinstance(item[0], str):
            raise TypeError(f"Invalid (key, value) pair: {item!r}")
    return [(key, value) for key, value in items]
