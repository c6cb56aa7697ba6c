"""himodel exception hierarchy.

All himodel-specific exceptions inherit from HiModelError.
"""

from __future__ import annotations


class HiModelError(Exception):
    """Base exception for all himodel errors."""

    pass


class ValidationError(HiModelError):
    """Invalid input passed to a validating constructor.

    Validating constructors are meant for trusted call sites whose input is
    already known to be good, so this error signals a programming error.
    Untrusted literals go through the ``parse`` entry points instead.

    Examples:
        - Month value outside 1-12
        - A string containing control characters
        - A collection without an item type
    """

    pass


class ParseError(HiModelError):
    """Failed to parse a literal.

    Carries the offending literal and the name of the grammar it was
    checked against. No value is constructed when this is raised.

    Attributes:
        literal: The rejected input.
        grammar: Name of the expected grammar (e.g. "date", "dateTime").

    Examples:
        >>> err = ParseError("2020-13", "date")
        >>> str(err)
        "not a valid date literal: '2020-13'"
    """

    def __init__(self, literal: str, grammar: str) -> None:
        super().__init__(f"not a valid {grammar} literal: {literal!r}")
        self.literal = literal
        self.grammar = grammar


class TimezoneError(HiModelError):
    """Invalid UTC offset.

    Examples:
        - Offset outside -14:00 to +14:00
        - Malformed offset string
    """

    pass


__all__ = [
    "HiModelError",
    "ValidationError",
    "ParseError",
    "TimezoneError",
]
