"""Precision and absence handling shared by the temporal value types.

DateType, DateTimeType and TimeType each hold a precision limited to a
band of the Precision scale. Fields below the precision are reset to their
minimum when the value is built, so two values of equal precision can be
compared field by field without consulting the precision again.
"""

from __future__ import annotations

from typing import Any, ClassVar

from himodel.core.base import PrimitiveType
from himodel.units.precision import Precision


class TemporalType(PrimitiveType):
    """Base class of date, date-time and time-of-day values.

    Subclasses declare their precision band through LOWEST_PRECISION and
    HIGHEST_PRECISION, the precision of their nil value through
    NIL_PRECISION, and provide ``_fields`` (the clamped field tuple that
    strict and tolerant comparison share).
    """

    __slots__ = ("_precision",)

    LOWEST_PRECISION: ClassVar[Precision] = Precision.YEAR
    HIGHEST_PRECISION: ClassVar[Precision] = Precision.NANOSECOND
    NIL_PRECISION: ClassVar[Precision] = Precision.NANOSECOND

    @property
    def precision(self) -> Precision:
        """Return how much of the value was specified."""
        return self._precision

    @property
    def lowest_precision(self) -> Precision:
        """Return the coarsest precision this kind of value can have."""
        return self.LOWEST_PRECISION

    @classmethod
    def _clamp(cls, precision: Precision) -> Precision:
        return Precision(precision).clamp(cls.LOWEST_PRECISION, cls.HIGHEST_PRECISION)

    def _fields(self) -> tuple[Any, ...]:
        raise NotImplementedError

    def _same_value(self, other: TemporalType) -> bool:
        return self._fields() == other._fields()

    def equal(self, other: object) -> bool:
        """Strict comparison: same kind, same precision and same value.

        Two nil values of the same kind are equal; a nil value never equals
        a present one.
        """
        if not isinstance(other, TemporalType) or not self._same_kind(other):
            return False
        absent = self._nil_state_matches(other)
        if absent is not None:
            return absent
        return self._precision == other._precision and self._same_value(other)

    def equivalent(self, other: object) -> bool:
        """Tolerant comparison: same kind and same value at any precision.

        Examples:
            >>> from himodel.core.time import TimeType
            >>> a = TimeType.parse("17:22:00.00")
            >>> b = TimeType.parse_fluent("17:22")
            >>> a.equivalent(b), a.equal(b)
            (True, False)
        """
        if not isinstance(other, TemporalType) or not self._same_kind(other):
            return False
        absent = self._nil_state_matches(other)
        if absent is not None:
            return absent
        return self._same_value(other)

    def __hash__(self) -> int:
        if self._nil:
            return hash((self.DATA_TYPE, None))
        return hash((self.DATA_TYPE, self._precision, self._fields()))


__all__ = ["TemporalType"]
