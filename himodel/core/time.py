"""Time-of-day value with hour to nanosecond precision.

This module provides TimeType for times of day without a date or an
offset, such as ``17:22:21.123``.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Any, ClassVar

from himodel._internal.constants import MAX_NANOSECOND, MAX_SECOND, NANOS_PER_MICROSECOND
from himodel._internal.patterns import (
    FLUENT_TIME_PATTERN,
    TIME_PATTERN,
    match_literal,
    parse_nanosecond,
)
from himodel._internal.validation import validate_range
from himodel.core.registry import BUILTIN_TYPES
from himodel.core.temporal import TemporalType
from himodel.core.typespec import TypeSpecification
from himodel.errors import ValidationError
from himodel.units.datatype import DataType
from himodel.units.precision import Precision


def _precision_of(minute: str | None, second: str | None, fraction: str | None) -> Precision:
    if fraction is not None:
        return Precision.NANOSECOND
    if second is not None:
        return Precision.SECOND
    if minute is not None:
        return Precision.MINUTE
    return Precision.HOUR


class TimeType(TemporalType):
    """A time of day with nanosecond resolution.

    Fields below the precision are reset to 0. A second value of 60 is
    kept as given; there is no carry into the minute.

    Attributes:
        hour: Hour (0-23).
        minute: Minute (0-59).
        second: Second (0-60).
        nanosecond: Nanosecond (0-999,999,999).
        precision: One of HOUR, MINUTE, SECOND or NANOSECOND.

    Examples:
        >>> t = TimeType(16, 28, 47, 837173635)
        >>> str(t)
        '16:28:47.837173635'

        >>> t = TimeType.parse_fluent("13")
        >>> t.precision, str(t)
        (<Precision.HOUR: 4>, '13')
    """

    __slots__ = ("_hour", "_minute", "_second", "_nanosecond")

    DATA_TYPE: ClassVar[DataType] = DataType.TIME
    TYPE_SPEC: ClassVar[TypeSpecification] = BUILTIN_TYPES["time"]
    LOWEST_PRECISION: ClassVar[Precision] = Precision.HOUR
    HIGHEST_PRECISION: ClassVar[Precision] = Precision.NANOSECOND
    NIL_PRECISION: ClassVar[Precision] = Precision.HOUR

    @validate_range(
        hour=(0, 23), minute=(0, 59), second=(0, MAX_SECOND), nanosecond=(0, MAX_NANOSECOND)
    )
    def __init__(
        self,
        hour: int,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        *,
        precision: Precision = Precision.NANOSECOND,
    ) -> None:
        """Create a TimeType from its fields.

        Args:
            hour: Hour (0-23).
            minute: Minute (0-59).
            second: Second (0-60).
            nanosecond: Nanosecond (0-999,999,999).
            precision: Target precision, clamped to HOUR..NANOSECOND.

        Raises:
            ValidationError: If any field is out of range.
        """
        self._set(hour, minute, second, nanosecond, self._clamp(precision))

    def _set(
        self, hour: int, minute: int, second: int, nanosecond: int, precision: Precision
    ) -> None:
        if precision < Precision.MINUTE:
            minute = 0
        if precision < Precision.SECOND:
            second = 0
        if precision < Precision.NANOSECOND:
            nanosecond = 0
        self._nil = False
        self._precision = precision
        self._hour = hour
        self._minute = minute
        self._second = second
        self._nanosecond = nanosecond

    @classmethod
    def _create(
        cls, hour: int, minute: int, second: int, nanosecond: int, precision: Precision
    ) -> TimeType:
        instance = object.__new__(cls)
        instance._set(hour, minute, second, nanosecond, precision)
        return instance

    @classmethod
    def nil(cls, precision: Precision | None = None) -> TimeType:
        """Return the absent time of day, at HOUR precision by default."""
        instance = cls._create(0, 0, 0, 0, cls._clamp(precision or cls.NIL_PRECISION))
        instance._nil = True
        return instance

    @classmethod
    def parse(cls, literal: str) -> TimeType:
        """Parse a strict ``HH:MM:SS[.fraction]`` literal.

        Raises:
            ParseError: If the literal does not match the time grammar.

        Examples:
            >>> TimeType.parse("17:22:21").precision
            <Precision.SECOND: 6>
            >>> TimeType.parse("17:22:21.1234567891").nanosecond
            123456789
        """
        return cls._from_match(match_literal(TIME_PATTERN, literal, "time"))

    @classmethod
    def parse_fluent(cls, literal: str) -> TimeType:
        """Parse a lenient ``HH[:MM[:SS[.fraction]]]`` literal.

        Raises:
            ParseError: If the literal does not match the fluent time grammar.

        Examples:
            >>> TimeType.parse_fluent("17:22").precision
            <Precision.MINUTE: 5>
        """
        return cls._from_match(match_literal(FLUENT_TIME_PATTERN, literal, "fluent time"))

    @classmethod
    def _from_match(cls, match: Any) -> TimeType:
        hour, minute, second, fraction = match.groups()
        return cls._create(
            int(hour),
            int(minute or 0),
            int(second or 0),
            parse_nanosecond(fraction),
            _precision_of(minute, second, fraction),
        )

    @classmethod
    def from_time(
        cls, value: _datetime.time, precision: Precision = Precision.NANOSECOND
    ) -> TimeType:
        """Create a TimeType from a standard-library time.

        Any tzinfo on the time is ignored.
        """
        return cls(
            value.hour,
            value.minute,
            value.second,
            value.microsecond * NANOS_PER_MICROSECOND,
            precision=precision,
        )

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

    def to_time(self) -> _datetime.time | None:
        """Convert to a standard-library time, or None for the nil value.

        Nanoseconds are truncated to microseconds.

        Raises:
            ValidationError: If the second is 60, which the standard
                library cannot represent.
        """
        if self._nil:
            return None
        if self._second == MAX_SECOND:
            raise ValidationError(f"cannot convert leap second to datetime.time: {self}")
        return _datetime.time(
            self._hour,
            self._minute,
            self._second,
            self._nanosecond // NANOS_PER_MICROSECOND,
        )

    def _fields(self) -> tuple[Any, ...]:
        return (self._hour, self._minute, self._second, self._nanosecond)

    def __repr__(self) -> str:
        if self._nil:
            return f"TimeType.nil(precision=Precision.{self._precision.name})"
        return (
            f"TimeType({self._hour}, {self._minute}, {self._second}, {self._nanosecond}, "
            f"precision=Precision.{self._precision.name})"
        )

    def __str__(self) -> str:
        if self._nil:
            return ""
        return format_time_of_day(
            self._precision, self._hour, self._minute, self._second, self._nanosecond
        )


def format_time_of_day(
    precision: Precision, hour: int, minute: int, second: int, nanosecond: int
) -> str:
    """Render the time-of-day fields implied by the precision.

    Shared with DateTimeType, which renders its time part the same way.

    Examples:
        >>> format_time_of_day(Precision.MINUTE, 9, 5, 0, 0)
        '09:05'
    """
    result = f"{hour:02d}"
    if precision >= Precision.MINUTE:
        result += f":{minute:02d}"
    if precision >= Precision.SECOND:
        result += f":{second:02d}"
    if precision >= Precision.NANOSECOND:
        result += f".{nanosecond:09d}"
    return result


__all__ = ["TimeType", "format_time_of_day"]
