"""Null-safe comparison helpers.

``equal`` and ``equivalent`` accept None on either side, which makes them
the natural way to compare optional fields such as the components of a
Quantity. The normalization helpers implement the tolerant parts of
equivalence: whitespace folding for strings and scale alignment for
decimals.
"""

from __future__ import annotations

import decimal
from typing import Any, cast


def equal(left: Any, right: Any) -> bool:
    """Return True if both are None or left strictly equals right.

    Examples:
        >>> equal(None, None)
        True
    """
    if left is None or right is None:
        return left is None and right is None
    return bool(left.equal(right))


def equivalent(left: Any, right: Any) -> bool:
    """Return True if both are None or left is equivalent to right."""
    if left is None or right is None:
        return left is None and right is None
    return bool(left.equivalent(right))


def normalized_string(value: str) -> str:
    """Collapse whitespace runs to one space and trim both ends.

    Examples:
        >>> normalized_string("  Test \\t\\r\\n Value ")
        'Test Value'
    """
    return " ".join(value.split())


def normalized_string_equal(left: str, right: str) -> bool:
    """Compare two strings after whitespace normalization."""
    return normalized_string(left) == normalized_string(right)


def least_precision_decimals(
    left: decimal.Decimal, right: decimal.Decimal
) -> tuple[decimal.Decimal, decimal.Decimal]:
    """Bring two decimals to a common scale.

    Both operands are quantized to the finer of the two exponents, so
    ``47.1`` and ``47.10`` become ``47.10`` and ``47.10`` while ``47.12``
    keeps its second fractional digit. Moving to a finer exponent only
    appends zeros, so no rounding ever happens and the pair compares equal
    exactly when the operands are numerically equal.

    Examples:
        >>> least_precision_decimals(decimal.Decimal("47.1"), decimal.Decimal("47.10"))
        (Decimal('47.10'), Decimal('47.10'))
    """
    left_exp = cast(int, left.as_tuple().exponent)
    right_exp = cast(int, right.as_tuple().exponent)

    exponent = min(left_exp, right_exp)
    digits = max(len(left.as_tuple().digits), len(right.as_tuple().digits))
    # wide enough that quantize never signals InvalidOperation
    context = decimal.Context(prec=digits + abs(left_exp - right_exp) + 1)
    quantum = decimal.Decimal((0, (1,), exponent))
    return (
        left.quantize(quantum, context=context),
        right.quantize(quantum, context=context),
    )


__all__ = [
    "equal",
    "equivalent",
    "normalized_string",
    "normalized_string_equal",
    "least_precision_decimals",
]
