"""Date value with year, month or day precision.

This module provides DateType for calendar dates as they appear in
health-data literals such as ``2020``, ``2020-03`` or ``2020-03-15``.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Any, ClassVar

from himodel._internal.calendar import ymd_to_ordinal
from himodel._internal.constants import MAX_DAY, MAX_YEAR, MIN_YEAR
from himodel._internal.patterns import DATE_PATTERN, match_literal
from himodel._internal.validation import validate_range
from himodel.core.registry import BUILTIN_TYPES
from himodel.core.temporal import TemporalType
from himodel.core.typespec import TypeSpecification
from himodel.units.datatype import DataType
from himodel.units.precision import Precision


class DateType(TemporalType):
    """A calendar date that may be only partially specified.

    The precision records which fields were given. Fields below it are
    reset to 1, so ``DateType(2020, 5, 17, precision=Precision.YEAR)`` and
    ``DateType.parse("2020")`` are the same value.

    Day values are only checked against 1-31, not against the length of
    the month: ``2020-02-30`` is accepted.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12), 1 below month precision.
        day: The day of the month (1-31), 1 below day precision.
        precision: One of YEAR, MONTH or DAY.

    Examples:
        >>> d = DateType.parse("2020-03")
        >>> d.precision
        <Precision.MONTH: 2>
        >>> d.day
        1
        >>> str(d)
        '2020-03'

        >>> str(DateType(2020, 3, 15, precision=Precision.YEAR))
        '2020'
    """

    __slots__ = ("_year", "_month", "_day")

    DATA_TYPE: ClassVar[DataType] = DataType.DATE
    TYPE_SPEC: ClassVar[TypeSpecification] = BUILTIN_TYPES["date"]
    LOWEST_PRECISION: ClassVar[Precision] = Precision.YEAR
    HIGHEST_PRECISION: ClassVar[Precision] = Precision.DAY
    NIL_PRECISION: ClassVar[Precision] = Precision.DAY

    @validate_range(year=(MIN_YEAR, MAX_YEAR), month=(1, 12), day=(1, MAX_DAY))
    def __init__(
        self,
        year: int,
        month: int = 1,
        day: int = 1,
        *,
        precision: Precision = Precision.DAY,
    ) -> None:
        """Create a DateType from calendar fields.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month (1-31).
            precision: Target precision, clamped to YEAR..DAY.

        Raises:
            ValidationError: If any field is out of range.
        """
        self._set(year, month, day, self._clamp(precision))

    def _set(self, year: int, month: int, day: int, precision: Precision) -> None:
        if precision < Precision.MONTH:
            month = 1
        if precision < Precision.DAY:
            day = 1
        self._nil = False
        self._precision = precision
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def _create(cls, year: int, month: int, day: int, precision: Precision) -> DateType:
        """Build a value from fields already known to be in range."""
        instance = object.__new__(cls)
        instance._set(year, month, day, precision)
        return instance

    @classmethod
    def nil(cls, precision: Precision | None = None) -> DateType:
        """Return the absent date.

        Args:
            precision: Precision the absent value records, DAY by default.

        Examples:
            >>> d = DateType.nil()
            >>> d.is_nil, str(d)
            (True, '')
        """
        instance = cls._create(MIN_YEAR, 1, 1, cls._clamp(precision or cls.NIL_PRECISION))
        instance._nil = True
        return instance

    @classmethod
    def parse(cls, literal: str) -> DateType:
        """Parse a ``YYYY[-MM[-DD]]`` literal.

        The rightmost component present determines the precision.

        Raises:
            ParseError: If the literal does not match the date grammar.

        Examples:
            >>> DateType.parse("2020-03-15")
            DateType(2020, 3, 15, precision=Precision.DAY)
        """
        match = match_literal(DATE_PATTERN, literal, "date")
        year, month, day = match.groups()

        precision = Precision.YEAR
        if day is not None:
            precision = Precision.DAY
        elif month is not None:
            precision = Precision.MONTH

        return cls._create(int(year), int(month or 1), int(day or 1), precision)

    @classmethod
    def from_date(cls, value: _datetime.date, precision: Precision = Precision.DAY) -> DateType:
        """Create a DateType from a standard-library date.

        A datetime is accepted too; its time of day is ignored.
        """
        return cls(value.year, value.month, value.day, precision=precision)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def to_ordinal(self) -> int:
        """Return the proleptic Gregorian day number of this date.

        Days past the end of the month roll over into the next month.
        """
        return ymd_to_ordinal(self._year, self._month, self._day)

    def to_date(self) -> _datetime.date | None:
        """Convert to a standard-library date, or None for the nil value.

        Examples:
            >>> DateType.parse("2020-02-30").to_date()
            datetime.date(2020, 3, 1)
        """
        if self._nil:
            return None
        return _datetime.date.fromordinal(self.to_ordinal())

    def _fields(self) -> tuple[Any, ...]:
        return (self._year, self._month, self._day)

    def __repr__(self) -> str:
        if self._nil:
            return f"DateType.nil(precision=Precision.{self._precision.name})"
        return (
            f"DateType({self._year}, {self._month}, {self._day}, "
            f"precision=Precision.{self._precision.name})"
        )

    def __str__(self) -> str:
        """Return the literal form, limited to the precision.

        Examples:
            >>> str(DateType.parse("2020-03-15"))
            '2020-03-15'
        """
        if self._nil:
            return ""
        result = f"{self._year:04d}"
        if self._precision >= Precision.MONTH:
            result += f"-{self._month:02d}"
        if self._precision >= Precision.DAY:
            result += f"-{self._day:02d}"
        return result


__all__ = ["DateType"]
