"""Date-time value with year to nanosecond precision.

This module provides DateTimeType for literals such as ``2020``,
``2020-03-15`` or ``2020-03-15T13:14:15.123+01:00``. A value that reaches
into the time of day always carries a fixed UTC offset.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Any, ClassVar

from himodel._internal.calendar import ymd_to_ordinal
from himodel._internal.constants import (
    MAX_DAY,
    MAX_NANOSECOND,
    MAX_SECOND,
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from himodel._internal.patterns import DATE_TIME_PATTERN, match_literal, parse_nanosecond
from himodel._internal.validation import validate_range
from himodel.core.date import DateType
from himodel.core.registry import BUILTIN_TYPES
from himodel.core.temporal import TemporalType
from himodel.core.time import format_time_of_day
from himodel.core.typespec import TypeSpecification
from himodel.errors import ValidationError
from himodel.units.datatype import DataType
from himodel.units.precision import Precision
from himodel.units.timezone import Timezone


class DateTimeType(TemporalType):
    """A date, optionally with a time of day and a UTC offset.

    The precision decides which fields are meaningful. At HOUR precision
    and finer the value always carries a Timezone. A coarser value keeps
    the offset of its source, if it had one, but does not render it.
    Fields below the precision are reset to their minimum.

    Two values that both carry an offset are compared by the instant they
    denote, so ``10:00:00+01:00`` equals ``09:00:00Z`` when precisions
    match, and ``2020-03-15T00:00:00Z`` is equivalent to its truncation to
    DAY precision. Values without an offset are compared field by field. A value
    with an offset and one without are never equal or equivalent.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: Hour (0-23).
        minute: Minute (0-59).
        second: Second (0-60).
        nanosecond: Nanosecond (0-999,999,999).
        tz: The UTC offset, or None for a date-only value without one.
        precision: Any precision from YEAR to NANOSECOND.

    Examples:
        >>> dt = DateTimeType.parse("2020-03-15T13:14:15+00:00")
        >>> str(dt)
        '2020-03-15T13:14:15Z'

        >>> dt.with_precision(Precision.DAY)
        DateTimeType(2020, 3, 15, 0, 0, 0, 0, tz=Timezone.utc(), precision=Precision.DAY)
    """

    __slots__ = ("_year", "_month", "_day", "_hour", "_minute", "_second", "_nanosecond", "_tz")

    DATA_TYPE: ClassVar[DataType] = DataType.DATE_TIME
    TYPE_SPEC: ClassVar[TypeSpecification] = BUILTIN_TYPES["dateTime"]
    LOWEST_PRECISION: ClassVar[Precision] = Precision.YEAR
    HIGHEST_PRECISION: ClassVar[Precision] = Precision.NANOSECOND
    NIL_PRECISION: ClassVar[Precision] = Precision.NANOSECOND

    @validate_range(
        year=(MIN_YEAR, MAX_YEAR),
        month=(1, 12),
        day=(1, MAX_DAY),
        hour=(0, 23),
        minute=(0, 59),
        second=(0, MAX_SECOND),
        nanosecond=(0, MAX_NANOSECOND),
    )
    def __init__(
        self,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        *,
        tz: Timezone | None = None,
        precision: Precision = Precision.NANOSECOND,
    ) -> None:
        """Create a DateTimeType from its fields.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month (1-31).
            hour: Hour (0-23).
            minute: Minute (0-59).
            second: Second (0-60).
            nanosecond: Nanosecond (0-999,999,999).
            tz: UTC offset. Defaults to UTC at HOUR precision or finer;
                below HOUR it is kept for comparison but not rendered.
            precision: Target precision, clamped to YEAR..NANOSECOND.

        Raises:
            ValidationError: If any field is out of range.
        """
        if tz is not None and not isinstance(tz, Timezone):
            raise ValidationError(f"tz must be a Timezone, got {type(tz).__name__}")
        self._set(
            (year, month, day, hour, minute, second, nanosecond), tz, self._clamp(precision)
        )

    def _set(self, fields: tuple[int, ...], tz: Timezone | None, precision: Precision) -> None:
        year, month, day, hour, minute, second, nanosecond = fields
        if precision < Precision.MONTH:
            month = 1
        if precision < Precision.DAY:
            day = 1
        if precision < Precision.HOUR:
            hour = 0
        elif tz is None:
            tz = Timezone.utc()
        if precision < Precision.MINUTE:
            minute = 0
        if precision < Precision.SECOND:
            second = 0
        if precision < Precision.NANOSECOND:
            nanosecond = 0
        self._nil = False
        self._precision = precision
        self._year = year
        self._month = month
        self._day = day
        self._hour = hour
        self._minute = minute
        self._second = second
        self._nanosecond = nanosecond
        self._tz = tz

    @classmethod
    def _create(
        cls, fields: tuple[int, ...], tz: Timezone | None, precision: Precision
    ) -> DateTimeType:
        instance = object.__new__(cls)
        instance._set(fields, tz, precision)
        return instance

    @classmethod
    def nil(cls, precision: Precision | None = None) -> DateTimeType:
        """Return the absent date-time, at NANOSECOND precision by default."""
        instance = cls._create(
            (MIN_YEAR, 1, 1, 0, 0, 0, 0), None, cls._clamp(precision or cls.NIL_PRECISION)
        )
        instance._nil = True
        return instance

    @classmethod
    def parse(cls, literal: str) -> DateTimeType:
        """Parse a date-time literal.

        The accepted form is ``YYYY[-MM[-DD[Thh:mm:ss[.fraction](Z|+hh:mm|-hh:mm)]]]``.
        The rightmost component present determines the precision, and the
        offset is mandatory once a time of day is given.

        Raises:
            ParseError: If the literal does not match the date-time grammar.

        Examples:
            >>> DateTimeType.parse("2020-03").precision
            <Precision.MONTH: 2>
            >>> str(DateTimeType.parse("2020-03-15T13:14:15.5-05:30"))
            '2020-03-15T13:14:15.500000000-05:30'
        """
        match = match_literal(DATE_TIME_PATTERN, literal, "dateTime")
        year, month, day, hour, minute, second, fraction, offset = match.groups()

        precision = Precision.YEAR
        if month is not None:
            precision = Precision.MONTH
        if day is not None:
            precision = Precision.DAY
        if second is not None:
            precision = Precision.SECOND
        if fraction is not None:
            precision = Precision.NANOSECOND

        fields = (
            int(year),
            int(month or 1),
            int(day or 1),
            int(hour or 0),
            int(minute or 0),
            int(second or 0),
            parse_nanosecond(fraction),
        )
        tz = Timezone.from_string(offset) if offset is not None else None
        return cls._create(fields, tz, precision)

    @classmethod
    def from_datetime(
        cls, value: _datetime.datetime, precision: Precision = Precision.NANOSECOND
    ) -> DateTimeType:
        """Create a DateTimeType from a standard-library datetime.

        An aware datetime keeps its UTC offset; a naive one is taken as UTC.

        Examples:
            >>> import datetime
            >>> str(DateTimeType.from_datetime(datetime.datetime(2020, 3, 15, 13), Precision.HOUR))
            '2020-03-15T13Z'
        """
        offset = value.utcoffset()
        tz = Timezone.from_utcoffset(offset) if offset is not None else None
        return cls(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond * NANOS_PER_MICROSECOND,
            tz=tz,
            precision=precision,
        )

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def nanosecond(self) -> int:
        return self._nanosecond

    @property
    def tz(self) -> Timezone | None:
        return self._tz

    def with_precision(self, precision: Precision) -> DateTimeType:
        """Return a copy limited to a coarser (or equal) precision.

        Fields below the new precision are reset; all others are kept.
        Asking for a finer precision than the value has keeps the reset
        fields at their minimum.
        """
        if self._nil:
            return type(self).nil(precision)
        return self._create(self._all_fields(), self._tz, self._clamp(precision))

    def date(self) -> DateType:
        """Return the date part, at most at DAY precision."""
        if self._nil:
            return DateType.nil(min(self._precision, Precision.DAY))
        return DateType._create(
            self._year, self._month, self._day, min(self._precision, Precision.DAY)
        )

    def to_datetime(self) -> _datetime.datetime | None:
        """Convert to a standard-library datetime, or None for the nil value.

        The result is aware when the value carries an offset and naive
        otherwise. Nanoseconds are truncated to microseconds and days past
        the end of the month roll over.

        Raises:
            ValidationError: If the second is 60.
        """
        if self._nil:
            return None
        if self._second == MAX_SECOND:
            raise ValidationError(f"cannot convert leap second to datetime.datetime: {self}")
        day = _datetime.date.fromordinal(ymd_to_ordinal(self._year, self._month, self._day))
        return _datetime.datetime(
            day.year,
            day.month,
            day.day,
            self._hour,
            self._minute,
            self._second,
            self._nanosecond // NANOS_PER_MICROSECOND,
            tzinfo=self._tz.to_tzinfo() if self._tz is not None else None,
        )

    def _all_fields(self) -> tuple[int, ...]:
        return (
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            self._nanosecond,
        )

    def _instant(self, tz: Timezone) -> int:
        """Return nanoseconds since 0001-01-01T00:00Z at the given offset."""
        seconds = (
            ymd_to_ordinal(self._year, self._month, self._day) * SECONDS_PER_DAY
            + self._hour * SECONDS_PER_HOUR
            + self._minute * SECONDS_PER_MINUTE
            + self._second
            - tz.offset_seconds
        )
        return seconds * NANOS_PER_SECOND + self._nanosecond

    def _fields(self) -> tuple[Any, ...]:
        if self._tz is None:
            return self._all_fields()
        return (self._instant(self._tz),)

    def _same_value(self, other: TemporalType) -> bool:
        if not isinstance(other, DateTimeType):
            return False
        if (self._tz is None) != (other._tz is None):
            return False
        return self._fields() == other._fields()

    def __repr__(self) -> str:
        if self._nil:
            return f"DateTimeType.nil(precision=Precision.{self._precision.name})"
        fields = ", ".join(str(field) for field in self._all_fields())
        return (
            f"DateTimeType({fields}, tz={self._tz!r}, "
            f"precision=Precision.{self._precision.name})"
        )

    def __str__(self) -> str:
        if self._nil:
            return ""
        result = f"{self._year:04d}"
        if self._precision >= Precision.MONTH:
            result += f"-{self._month:02d}"
        if self._precision >= Precision.DAY:
            result += f"-{self._day:02d}"
        if self._precision >= Precision.HOUR and self._tz is not None:
            result += "T" + format_time_of_day(
                self._precision, self._hour, self._minute, self._second, self._nanosecond
            )
            result += str(self._tz)
        return result


__all__ = ["DateTimeType"]
