"""Internal constants for himodel.

These constants define the limits and well-known names used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MICROSECOND: int = 1_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Fractional seconds are kept to nanosecond resolution
NANOSECOND_DIGITS: int = 9
MAX_NANOSECOND: int = NANOS_PER_SECOND - 1

# Year band accepted by the date grammars
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Day-of-month is only range checked, not checked against the month length
MAX_DAY: int = 31

# Leap second tolerance: a second value of 60 is stored verbatim
MAX_SECOND: int = 60

# Timezone offset limits (in seconds), +/- 14 hours
MAX_UTC_OFFSET_SECONDS: int = 14 * SECONDS_PER_HOUR

# Type specification names
NAMESPACE_NAME: str = "FHIR"
ELEMENT_TYPE_NAME: str = "Element"
COLLECTION_TYPE_NAME: str = "Collection"

# Well-known system URIs
UCUM_SYSTEM_URI: str = "http://unitsofmeasure.org"


__all__ = [
    "NANOS_PER_SECOND",
    "NANOS_PER_MICROSECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "NANOSECOND_DIGITS",
    "MAX_NANOSECOND",
    "MIN_YEAR",
    "MAX_YEAR",
    "MAX_DAY",
    "MAX_SECOND",
    "MAX_UTC_OFFSET_SECONDS",
    "NAMESPACE_NAME",
    "ELEMENT_TYPE_NAME",
    "COLLECTION_TYPE_NAME",
    "UCUM_SYSTEM_URI",
]
