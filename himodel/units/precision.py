"""Precision enumeration for temporal values.

This module provides the Precision enum recording how much of a temporal
literal was actually specified.
"""

from __future__ import annotations

from enum import IntEnum


class Precision(IntEnum):
    """Granularity of a temporal value, from coarsest to finest.

    Members are ordered, so precisions compare with the usual operators.
    NANOSECOND stands for any fractional-second value; fractions are kept
    to nanosecond resolution.

    Examples:
        >>> Precision.YEAR < Precision.DAY
        True

        >>> Precision.HOUR.has_time
        True

        >>> Precision.MINUTE.clamp(Precision.YEAR, Precision.DAY)
        <Precision.DAY: 3>
    """

    YEAR = 1
    MONTH = 2
    DAY = 3
    HOUR = 4
    MINUTE = 5
    SECOND = 6
    NANOSECOND = 7

    @property
    def has_time(self) -> bool:
        """Return True if this precision reaches into the time of day."""
        return self >= Precision.HOUR

    def clamp(self, lowest: Precision, highest: Precision) -> Precision:
        """Limit this precision to the band [lowest, highest].

        Args:
            lowest: Coarsest allowed precision.
            highest: Finest allowed precision.

        Returns:
            The precision nearest to self within the band.
        """
        if self < lowest:
            return lowest
        if self > highest:
            return highest
        return self


__all__ = ["Precision"]
