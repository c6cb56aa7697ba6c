"""Validation utilities for himodel.

Range checks shared by the validating constructors. Each check raises
ValidationError naming the offending component.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, ParamSpec, TypeVar

from himodel.errors import ValidationError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    Both bounds are inclusive. Parameters passed as None are skipped.

    Examples:
        >>> @validate_range(month=(1, 12))
        ... def first_of(year: int, month: int) -> None:
        ...     pass

        >>> first_of(2024, 13)
        Traceback (most recent call last):
        ...
        ValidationError: month must be between 1 and 12, got 13
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind_partial(*args, **kwargs)
            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if value is not None:
                    check_range(param_name, value, min_val, max_val)
            return func(*args, **kwargs)

        return wrapper

    return decorator


def check_range(name: str, value: int, min_val: int, max_val: int) -> None:
    """Raise ValidationError unless min_val <= value <= max_val.

    Booleans and non-integers are rejected as well.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < min_val or value > max_val:
        raise ValidationError(
            f"{name} must be between {min_val} and {max_val}, got {value}"
        )


__all__ = [
    "validate_range",
    "check_range",
]
