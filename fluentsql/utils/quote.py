"""Identifier quoting. Identifiers are trusted: embedded quotes are not escaped."""

from typing import Iterable


def quote_identifier(name: str, quote: bool = True) -> str:
    """Wrap name in double quotes (or return it as is when quote is False)."""
    return f'"{name}"' if quote else name


def quote_identifiers(names: Iterable[str]) -> str:
    """Comma-separated list of quoted identifiers (e.g. ``"a", "b"``)."""
    return ", ".join(quote_identifier(name) for name in names)
