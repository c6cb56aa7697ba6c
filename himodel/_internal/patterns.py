"""Literal grammars for himodel primitive values.

Every pattern is compiled with ``re.ASCII`` so that ``\\d`` and ``\\s``
only match ASCII characters, and is applied with ``fullmatch`` so that a
trailing newline never slips through the ``$`` anchor.

This module is not part of the public API.
"""

from __future__ import annotations

import logging
import re

from himodel._internal.constants import NANOSECOND_DIGITS
from himodel.errors import ParseError

logger = logging.getLogger(__name__)

# Four-digit year 0001-9999; the all-zero year is excluded by the digit groups
_YEAR = r"(\d(?:\d(?:\d[1-9]|[1-9]0)|[1-9]00)|[1-9]000)"
_MONTH = r"(0[1-9]|1[0-2])"
_DAY = r"(0[1-9]|[1-2]\d|3[0-1])"
_HOUR = r"([01]\d|2[0-3])"
_MINUTE = r"([0-5]\d)"
_SECOND = r"([0-5]\d|60)"
_FRACTION = r"(?:\.(\d+))?"
_OFFSET = r"(Z|[+-](?:(?:0\d|1[0-3]):[0-5]\d|14:00))"

DATE_PATTERN = re.compile(
    rf"^{_YEAR}(?:-{_MONTH}(?:-{_DAY})?)?$",
    re.ASCII,
)

DATE_TIME_PATTERN = re.compile(
    rf"^{_YEAR}(?:-{_MONTH}(?:-{_DAY}"
    rf"(?:T{_HOUR}:{_MINUTE}:{_SECOND}{_FRACTION}{_OFFSET})?)?)?$",
    re.ASCII,
)

TIME_PATTERN = re.compile(
    rf"^{_HOUR}:{_MINUTE}:{_SECOND}{_FRACTION}$",
    re.ASCII,
)

FLUENT_TIME_PATTERN = re.compile(
    rf"^{_HOUR}(?::{_MINUTE}(?::{_SECOND}{_FRACTION})?)?$",
    re.ASCII,
)

OFFSET_PATTERN = re.compile(r"^([+-])(\d{1,2}):(\d{1,2})$", re.ASCII)

DECIMAL_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)

STRING_PATTERN = re.compile("^[\r\n\t\u0020-\uFFFF]*$")

CODE_PATTERN = re.compile(r"^[^\s]+(?:\s[^\s]+)*$", re.ASCII)

ID_PATTERN = re.compile(r"^[A-Za-z0-9\-.]{1,64}$", re.ASCII)

URI_PATTERN = re.compile(r"^\S*$", re.ASCII)


def match_literal(pattern: re.Pattern[str], literal: str, grammar: str) -> re.Match[str]:
    """Match a literal against a grammar or raise ParseError.

    Args:
        pattern: The compiled grammar.
        literal: The input to check.
        grammar: Grammar name reported in the error.

    Returns:
        The match object, with one group per literal component.

    Raises:
        ParseError: If the literal does not match.
    """
    match = pattern.fullmatch(literal) if isinstance(literal, str) else None
    if match is None:
        logger.debug("rejected %s literal %r", grammar, literal)
        raise ParseError(literal, grammar)
    return match


def matches(pattern: re.Pattern[str], value: str) -> bool:
    """Return True if the whole value matches the pattern."""
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def parse_nanosecond(fraction: str | None) -> int:
    """Convert a fractional-seconds digit string to nanoseconds.

    The digits are truncated, not rounded, to nanosecond resolution:
    shorter input is right-padded with zeros and excess digits are
    discarded.

    Examples:
        >>> parse_nanosecond("239")
        239000000
        >>> parse_nanosecond("2397381239")
        239738123
        >>> parse_nanosecond("")
        0
    """
    if not fraction:
        return 0
    return int(fraction[:NANOSECOND_DIGITS].ljust(NANOSECOND_DIGITS, "0"))


__all__ = [
    "DATE_PATTERN",
    "DATE_TIME_PATTERN",
    "TIME_PATTERN",
    "FLUENT_TIME_PATTERN",
    "OFFSET_PATTERN",
    "DECIMAL_PATTERN",
    "STRING_PATTERN",
    "CODE_PATTERN",
    "ID_PATTERN",
    "URI_PATTERN",
    "match_literal",
    "matches",
    "parse_nanosecond",
]
