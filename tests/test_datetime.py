"""Tests for the DateTimeType class.

This module covers:
- Construction, precision clamping and truncation
- Parsing at every precision, offsets and rendering back
- Instant-based comparison across offsets
- Nil values
- Conversion to and from datetime.datetime
"""

from __future__ import annotations

import datetime

import pytest

from himodel.core.date import DateType
from himodel.core.datetime import DateTimeType
from himodel.errors import ParseError, ValidationError
from himodel.units.datatype import DataType
from himodel.units.precision import Precision
from himodel.units.timezone import Timezone


class TestDateTimeConstruction:
    """Tests for DateTimeType construction."""

    def test_full_value(self) -> None:
        """Create a date-time at nanosecond precision, UTC by default."""
        dt = DateTimeType(2020, 3, 15, 13, 14, 15, 123_456_789)
        assert dt.precision is Precision.NANOSECOND
        assert dt.tz is Timezone.utc()
        assert str(dt) == "2020-03-15T13:14:15.123456789Z"

    def test_with_offset(self) -> None:
        """An explicit timezone is kept."""
        dt = DateTimeType(2020, 3, 15, 13, 14, 15, tz=Timezone(3600), precision=Precision.SECOND)
        assert str(dt) == "2020-03-15T13:14:15+01:00"

    def test_offset_not_rendered_below_hour(self) -> None:
        """Values coarser than HOUR keep their offset but do not render it."""
        dt = DateTimeType(2020, 3, 15, 13, tz=Timezone(3600), precision=Precision.DAY)
        assert dt.tz == Timezone(3600)
        assert str(dt) == "2020-03-15"

    def test_hour_and_minute_precision_render(self) -> None:
        """Coarse time precisions render only the fields they reach."""
        assert str(DateTimeType(2020, 3, 15, 13, 14, precision=Precision.HOUR)) == "2020-03-15T13Z"
        assert str(DateTimeType(2020, 3, 15, 13, 14, precision=Precision.MINUTE)) == "2020-03-15T13:14Z"

    def test_invalid_timezone(self) -> None:
        """tz must be a Timezone."""
        with pytest.raises(ValidationError, match="tz must be a Timezone"):
            DateTimeType(2020, tz="Z")  # type: ignore[arg-type]

    def test_invalid_field(self) -> None:
        """Out-of-range fields raise ValidationError."""
        with pytest.raises(ValidationError, match="hour must be between 0 and 23"):
            DateTimeType(2020, 1, 1, 24)

    def test_data_type(self) -> None:
        """A date-time reports the dateTime tag."""
        dt = DateTimeType(2020)
        assert dt.data_type is DataType.DATE_TIME
        assert str(dt.type_spec) == "FHIR.dateTime"
        assert dt.lowest_precision is Precision.YEAR


class TestDateTimeTruncation:
    """Tests for precision truncation."""

    SOURCE = DateTimeType(2021, 7, 19, 13, 14, 15, 987_654_321, tz=Timezone(-18000))

    @pytest.mark.parametrize(
        ("precision", "expected"),
        [
            (Precision.YEAR, (2021, 1, 1, 0, 0, 0, 0)),
            (Precision.MONTH, (2021, 7, 1, 0, 0, 0, 0)),
            (Precision.DAY, (2021, 7, 19, 0, 0, 0, 0)),
            (Precision.HOUR, (2021, 7, 19, 13, 0, 0, 0)),
            (Precision.MINUTE, (2021, 7, 19, 13, 14, 0, 0)),
            (Precision.SECOND, (2021, 7, 19, 13, 14, 15, 0)),
            (Precision.NANOSECOND, (2021, 7, 19, 13, 14, 15, 987_654_321)),
        ],
    )
    def test_with_precision(self, precision: Precision, expected: tuple[int, ...]) -> None:
        """Exactly the fields below the precision are reset."""
        dt = self.SOURCE.with_precision(precision)
        fields = (dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second, dt.nanosecond)
        assert fields == expected
        assert dt.precision is precision

    def test_with_precision_keeps_offset(self) -> None:
        """The offset survives truncation to any precision."""
        assert self.SOURCE.with_precision(Precision.HOUR).tz == Timezone(-18000)
        assert self.SOURCE.with_precision(Precision.DAY).tz == Timezone(-18000)
        assert str(self.SOURCE.with_precision(Precision.DAY)) == "2021-07-19"

    def test_truncated_midnight_equivalent_to_source(self) -> None:
        """A midnight value is equivalent, but not equal, to its DAY truncation."""
        dt = DateTimeType.parse("2020-03-15T00:00:00Z")
        truncated = dt.with_precision(Precision.DAY)
        assert dt.equivalent(truncated)
        assert truncated.equivalent(dt)
        assert not dt.equal(truncated)

    def test_truncated_value_compares_by_instant(self) -> None:
        """Truncated values with offsets compare by the instant they denote."""
        dt = DateTimeType.parse("2020-03-15T13:14:15+01:00")
        truncated = dt.with_precision(Precision.DAY)
        assert not dt.equivalent(truncated)
        assert truncated.equivalent(DateTimeType.parse("2020-03-14T23:00:00Z"))

    def test_truncated_value_never_matches_date_only_literal(self) -> None:
        """A truncated value with an offset differs from a parsed date-only value."""
        truncated = DateTimeType.parse("2020-03-15T00:00:00Z").with_precision(Precision.DAY)
        assert str(truncated) == "2020-03-15"
        assert not truncated.equivalent(DateTimeType.parse("2020-03-15"))

    def test_constructor_matches_with_precision(self) -> None:
        """Building at a precision equals truncating a finer value."""
        built = DateTimeType(2021, 7, 19, 13, 14, 15, tz=Timezone(-18000), precision=Precision.MINUTE)
        assert built == self.SOURCE.with_precision(Precision.MINUTE)

    def test_date_part(self) -> None:
        """date() returns the date at most at DAY precision."""
        assert self.SOURCE.date() == DateType(2021, 7, 19)
        assert DateTimeType.parse("2021-07").date() == DateType.parse("2021-07")


class TestDateTimeParse:
    """Tests for DateTimeType.parse."""

    @pytest.mark.parametrize(
        ("literal", "precision"),
        [
            ("2020", Precision.YEAR),
            ("2020-03", Precision.MONTH),
            ("2020-03-15", Precision.DAY),
            ("2020-03-15T13:14:15Z", Precision.SECOND),
            ("2020-03-15T13:14:15+05:30", Precision.SECOND),
            ("2020-03-15T13:14:15-14:00", Precision.SECOND),
            ("2020-03-15T13:14:15.123456789+14:00", Precision.NANOSECOND),
            ("2020-12-31T23:59:60Z", Precision.SECOND),
        ],
    )
    def test_round_trip(self, literal: str, precision: Precision) -> None:
        """Parsing then rendering returns the literal."""
        dt = DateTimeType.parse(literal)
        assert dt.precision is precision
        assert str(dt) == literal

    def test_zero_offset_renders_as_z(self) -> None:
        """+00:00 is rendered as Z."""
        dt = DateTimeType.parse("2020-03-15T13:14:15+00:00")
        assert dt.tz is Timezone.utc()
        assert str(dt) == "2020-03-15T13:14:15Z"

    def test_fraction_truncated(self) -> None:
        """Fraction digits beyond nine are discarded."""
        dt = DateTimeType.parse("2020-03-15T13:14:15.2397381239Z")
        assert dt.nanosecond == 239738123

    def test_date_only_has_no_timezone(self) -> None:
        """Date-only literals carry no offset."""
        assert DateTimeType.parse("2020-03-15").tz is None

    @pytest.mark.parametrize(
        "literal",
        [
            "",
            "2020-03-15T13:14:15",
            "2020-03-15T13:14Z",
            "2020-03-15T13Z",
            "2020-03T13:14:15Z",
            "2020-03-15T13:14:15+14:30",
            "2020-03-15T13:14:15+15:00",
            "2020-03-15T24:00:00Z",
            "2020-03-15 13:14:15Z",
        ],
    )
    def test_invalid_literal(self, literal: str) -> None:
        """Literals outside the date-time grammar raise ParseError."""
        with pytest.raises(ParseError) as exc_info:
            DateTimeType.parse(literal)
        assert exc_info.value.grammar == "dateTime"


class TestDateTimeComparison:
    """Tests for equal and equivalent."""

    def test_same_instant_different_offset(self) -> None:
        """Values denoting the same instant are equal."""
        a = DateTimeType.parse("2020-03-15T10:00:00+01:00")
        b = DateTimeType.parse("2020-03-15T09:00:00Z")
        assert a.equal(b)
        assert a.equivalent(b)
        assert hash(a) == hash(b)

    def test_instant_across_day_boundary(self) -> None:
        """Offsets may move the instant into another day."""
        a = DateTimeType.parse("2020-03-01T01:00:00+02:00")
        b = DateTimeType.parse("2020-02-29T23:00:00Z")
        assert a.equal(b)

    def test_precision_differs(self) -> None:
        """Equal instants at different precisions are only equivalent."""
        a = DateTimeType.parse("2020-03-15T09:00:00Z")
        b = DateTimeType.parse("2020-03-15T09:00:00.000Z")
        assert not a.equal(b)
        assert a.equivalent(b)

    def test_different_instant(self) -> None:
        """Different instants are neither equal nor equivalent."""
        a = DateTimeType.parse("2020-03-15T09:00:00Z")
        b = DateTimeType.parse("2020-03-15T09:00:00+01:00")
        assert not a.equal(b)
        assert not a.equivalent(b)

    def test_date_only_values(self) -> None:
        """Date-only values compare field by field."""
        assert DateTimeType.parse("2020-03").equivalent(DateTimeType.parse("2020-03-01"))
        assert not DateTimeType.parse("2020-03").equal(DateTimeType.parse("2020-03-01"))
        assert DateTimeType.parse("2020-03").equal(DateTimeType(2020, 3, 9, precision=Precision.MONTH))

    def test_offset_and_no_offset(self) -> None:
        """A value with an offset never matches one without."""
        a = DateTimeType.parse("2020-03-15")
        b = DateTimeType.parse("2020-03-15T00:00:00Z")
        assert not a.equal(b)
        assert not a.equivalent(b)

    def test_nil(self) -> None:
        """Nil date-times."""
        nil = DateTimeType.nil()
        assert nil.is_nil
        assert nil.precision is Precision.NANOSECOND
        assert str(nil) == ""
        assert nil.equal(DateTimeType.nil())
        assert nil.equivalent(DateTimeType.nil(Precision.DAY))
        assert not nil.equal(DateTimeType(2020))
        assert nil.with_precision(Precision.DAY).is_nil
        assert nil.date().is_nil


class TestDateTimeConversion:
    """Tests for conversion to and from datetime.datetime."""

    def test_from_aware_datetime(self) -> None:
        """An aware datetime keeps its offset."""
        value = datetime.datetime(
            2020, 3, 15, 13, 14, 15, 500, tzinfo=datetime.timezone(datetime.timedelta(hours=2))
        )
        dt = DateTimeType.from_datetime(value)
        assert dt.tz == Timezone(7200)
        assert dt.nanosecond == 500_000

    def test_from_datetime_keeps_offset_below_hour(self) -> None:
        """A DAY-precision value keeps the offset of its source datetime."""
        value = datetime.datetime(
            2020, 3, 15, tzinfo=datetime.timezone(datetime.timedelta(hours=2))
        )
        dt = DateTimeType.from_datetime(value, Precision.DAY)
        assert dt.tz == Timezone(7200)
        assert str(dt) == "2020-03-15"
        assert dt.equivalent(DateTimeType.parse("2020-03-14T22:00:00Z"))

    def test_from_naive_datetime(self) -> None:
        """A naive datetime is taken as UTC."""
        dt = DateTimeType.from_datetime(datetime.datetime(2020, 3, 15, 13), Precision.HOUR)
        assert str(dt) == "2020-03-15T13Z"

    def test_to_datetime_aware(self) -> None:
        """to_datetime returns an aware datetime for time precisions."""
        dt = DateTimeType.parse("2020-03-15T13:14:15.123456789+01:00")
        value = dt.to_datetime()
        assert value == datetime.datetime(
            2020, 3, 15, 12, 14, 15, 123456, tzinfo=datetime.timezone.utc
        )
        assert value is not None and value.utcoffset() == datetime.timedelta(hours=1)

    def test_to_datetime_naive(self) -> None:
        """to_datetime returns a naive datetime for date precisions."""
        value = DateTimeType.parse("2020-03").to_datetime()
        assert value == datetime.datetime(2020, 3, 1)
        assert value is not None and value.tzinfo is None

    def test_to_datetime_leap_second(self) -> None:
        """A leap second cannot be converted."""
        with pytest.raises(ValidationError, match="leap second"):
            DateTimeType.parse("2020-12-31T23:59:60Z").to_datetime()

    def test_to_datetime_nil(self) -> None:
        """A nil date-time converts to None."""
        assert DateTimeType.nil().to_datetime() is None

    def test_repr(self) -> None:
        """repr shows the fields, timezone and precision."""
        dt = DateTimeType.parse("2020-03-15T13:14:15Z")
        assert repr(dt) == (
            "DateTimeType(2020, 3, 15, 13, 14, 15, 0, tz=Timezone.utc(), "
            "precision=Precision.SECOND)"
        )
