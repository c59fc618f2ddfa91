"""Operator inference for condition values."""

from typing import Any

# Two-character operators come first so that ">=" is not read as ">".
OPERATORS: tuple[str, ...] = (">=", "<=", "<>", ">", "<")


def where_value(value: Any) -> tuple[str, Any]:
    """Classify a condition value into ``(operator, literal)``.

    - ``">=5"`` -> ``(">=", "5")`` (same for ``<=``, ``<>``, ``>``, ``<``)
    - ``"J*n?"`` -> ``("LIKE", "J%n_")``; existing ``%`` and ``_`` are not escaped
    - anything else, including non-text values -> ``("=", value)``
    """
    if isinstance(value, str):
        for operator in OPERATORS:
            if value.startswith(operator):
                return operator, value[len(operator):]
        if "*" in value or "?" in value:
            return "LIKE", value.replace("*", "%").replace("?", "_")
    return "=", value
