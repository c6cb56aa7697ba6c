"""Internal utilities for himodel.

This module contains private implementation details:
    - Constants and limits
    - Literal grammars
    - Range validation
    - Calendar ordinal helper

Note: This module is not part of the public API.
"""

from __future__ import annotations

from himodel._internal.calendar import ymd_to_ordinal
from himodel._internal.patterns import match_literal, matches, parse_nanosecond
from himodel._internal.validation import check_range, validate_range

__all__: list[str] = [
    "check_range",
    "match_literal",
    "matches",
    "parse_nanosecond",
    "validate_range",
    "ymd_to_ordinal",
]
