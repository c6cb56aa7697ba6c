"""Fixed-point decimal value.

This module provides DecimalType, a wrapper around ``decimal.Decimal``
that keeps the scale of its input and never renders in exponent
notation.
"""

from __future__ import annotations

import decimal
from typing import ClassVar

from himodel._internal.patterns import DECIMAL_PATTERN, match_literal
from himodel.comparison import least_precision_decimals
from himodel.core.base import PrimitiveType
from himodel.core.registry import BUILTIN_TYPES
from himodel.core.typespec import TypeSpecification
from himodel.errors import ValidationError
from himodel.units.datatype import DataType

_ZERO = decimal.Decimal(0)


class DecimalType(PrimitiveType):
    """A decimal number with its scale preserved.

    ``equal`` compares numeric values, so ``47.10`` equals ``47.1``.
    ``equivalent`` first brings both operands to a common scale.

    Examples:
        >>> str(DecimalType.parse("47.10"))
        '47.10'

        >>> str(DecimalType.parse("1.5e3"))
        '1500'

        >>> DecimalType.parse("47.12").equivalent(DecimalType.parse("47.1"))
        False
    """

    __slots__ = ("_value",)

    DATA_TYPE: ClassVar[DataType] = DataType.DECIMAL
    TYPE_SPEC: ClassVar[TypeSpecification] = BUILTIN_TYPES["decimal"]

    def __init__(self, value: decimal.Decimal) -> None:
        """Create a DecimalType from a finite Decimal.

        Raises:
            ValidationError: If value is not a Decimal, or is NaN or infinite.
        """
        if not isinstance(value, decimal.Decimal):
            raise ValidationError(f"value must be a Decimal, got {type(value).__name__}")
        if not value.is_finite():
            raise ValidationError(f"value must be finite, got {value}")
        self._nil = False
        self._value = value

    @classmethod
    def nil(cls) -> DecimalType:
        """Return the absent decimal."""
        instance = cls(_ZERO)
        instance._nil = True
        return instance

    @classmethod
    def from_int(cls, value: int) -> DecimalType:
        """Create a DecimalType from an integer."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"value must be an integer, got {type(value).__name__}")
        return cls(decimal.Decimal(value))

    @classmethod
    def from_float(cls, value: float) -> DecimalType:
        """Create a DecimalType from the shortest representation of a float.

        Examples:
            >>> str(DecimalType.from_float(0.1))
            '0.1'
        """
        return cls(decimal.Decimal(repr(float(value))))

    @classmethod
    def parse(cls, literal: str) -> DecimalType:
        """Parse a decimal literal, exponent notation allowed.

        Raises:
            ParseError: If the literal is not a decimal number.
        """
        match_literal(DECIMAL_PATTERN, literal, "decimal")
        return cls(decimal.Decimal(literal))

    @property
    def value(self) -> decimal.Decimal:
        return self._value

    def negate(self) -> DecimalType:
        """Return the value with the opposite sign; nil stays nil."""
        if self._nil:
            return self
        return type(self)(self._value.copy_negate())

    def equal(self, other: object) -> bool:
        if not isinstance(other, DecimalType) or not self._same_kind(other):
            return False
        absent = self._nil_state_matches(other)
        if absent is not None:
            return absent
        return self._value == other._value

    def equivalent(self, other: object) -> bool:
        if not isinstance(other, DecimalType) or not self._same_kind(other):
            return False
        absent = self._nil_state_matches(other)
        if absent is not None:
            return absent
        left, right = least_precision_decimals(self._value, other._value)
        return left == right

    def __int__(self) -> int:
        return int(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __hash__(self) -> int:
        if self._nil:
            return hash((self.DATA_TYPE, None))
        return hash((self.DATA_TYPE, self._value))

    def __repr__(self) -> str:
        if self._nil:
            return "DecimalType.nil()"
        return f"DecimalType(Decimal({str(self)!r}))"

    def __str__(self) -> str:
        if self._nil:
            return ""
        return format(self._value, "f")


__all__ = ["DecimalType"]
