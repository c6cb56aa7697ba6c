"""Timezone representation using a fixed UTC offset.

This module provides the Timezone class for the constant offsets that
date-time literals carry. There is no timezone database and no daylight
saving: an offset is just a signed number of seconds.
"""

from __future__ import annotations

import datetime as _datetime
from typing import ClassVar

from himodel._internal.constants import (
    MAX_UTC_OFFSET_SECONDS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from himodel._internal.patterns import OFFSET_PATTERN
from himodel.errors import TimezoneError


class Timezone:
    """A timezone represented as a fixed UTC offset.

    The offset is stored in seconds from UTC, with positive values being
    east of UTC and negative values west of UTC. A zero offset is always
    the shared UTC instance and renders as ``Z``.

    Examples:
        >>> Timezone.from_string("Z").is_utc
        True

        >>> Timezone.from_string("+00:00") is Timezone.utc()
        True

        >>> str(Timezone.from_string("-05:30"))
        '-05:30'
    """

    __slots__ = ("_offset_seconds",)

    _utc_instance: ClassVar[Timezone | None] = None

    def __init__(self, offset_seconds: int) -> None:
        """Create a Timezone with the specified UTC offset.

        Args:
            offset_seconds: UTC offset in seconds.

        Raises:
            TimezoneError: If offset_seconds is outside +/- 14 hours.
        """
        if isinstance(offset_seconds, bool) or not isinstance(offset_seconds, int):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )

        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )

        self._offset_seconds: int = offset_seconds

    @classmethod
    def utc(cls) -> Timezone:
        """Return the shared zero-offset instance."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0)
        return cls._utc_instance

    @classmethod
    def of(cls, offset_seconds: int) -> Timezone:
        """Return a Timezone for the offset, reusing the UTC instance for zero."""
        if offset_seconds == 0:
            return cls.utc()
        return cls(offset_seconds)

    @classmethod
    def from_string(cls, s: str) -> Timezone:
        """Resolve an offset suffix of a date-time literal.

        Accepts ``Z`` or ``+HH:MM`` / ``-HH:MM``. The suffix is expected to
        have passed the date-time grammar already.

        Raises:
            TimezoneError: If the string is not an offset.

        Examples:
            >>> Timezone.from_string("+05:30").offset_seconds
            19800
        """
        if s == "Z":
            return cls.utc()

        match = OFFSET_PATTERN.fullmatch(s) if isinstance(s, str) else None
        if match is None:
            raise TimezoneError(f"not a valid time zone offset: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        offset = int(hours_str) * SECONDS_PER_HOUR + int(minutes_str) * SECONDS_PER_MINUTE
        if sign_str == "-":
            offset = -offset
        return cls.of(offset)

    @classmethod
    def from_utcoffset(cls, offset: _datetime.timedelta) -> Timezone:
        """Create a Timezone from a ``tzinfo.utcoffset()`` result.

        Sub-second parts of the offset are dropped.
        """
        return cls.of(int(offset.total_seconds()))

    @property
    def offset_seconds(self) -> int:
        """Return the UTC offset in seconds."""
        return self._offset_seconds

    @property
    def is_utc(self) -> bool:
        """Return True if the offset is zero."""
        return self._offset_seconds == 0

    def to_tzinfo(self) -> _datetime.timezone:
        """Return the equivalent standard-library fixed-offset tzinfo."""
        if self.is_utc:
            return _datetime.timezone.utc
        return _datetime.timezone(_datetime.timedelta(seconds=self._offset_seconds))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timezone):
            return NotImplemented
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        if self.is_utc:
            return "Timezone.utc()"
        return f"Timezone(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        """Return the offset as ``Z``, ``+HH:MM`` or ``-HH:MM``."""
        if self._offset_seconds == 0:
            return "Z"

        total_minutes = abs(self._offset_seconds) // SECONDS_PER_MINUTE
        hours = total_minutes // 60
        minutes = total_minutes % 60
        sign = "+" if self._offset_seconds > 0 else "-"

        return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = ["Timezone"]
