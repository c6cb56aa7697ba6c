"""Quantity compound value.

A Quantity is a measured amount: a decimal value, an optional comparator
code, a human-readable unit and a coded unit from a unit system. Unlike the
primitive values it is mutable; the ``set_*`` modifiers replace one field
at a time and return the same instance.
"""

from __future__ import annotations

from typing import ClassVar

from himodel import comparison
from himodel._internal import constants
from himodel.core.base import Element
from himodel.core.decimal import DecimalType
from himodel.core.registry import BUILTIN_TYPES
from himodel.core.string import CodeType, StringType
from himodel.core.typespec import TypeSpecification
from himodel.core.uri import URIType
from himodel.units.datatype import DataType

LESS_THAN_COMPARATOR = CodeType("<")
LESS_OR_EQUAL_COMPARATOR = CodeType("<=")
GREATER_THAN_COMPARATOR = CodeType(">")
GREATER_OR_EQUAL_COMPARATOR = CodeType(">=")

UCUM_SYSTEM_URI = URIType(constants.UCUM_SYSTEM_URI)


class QuantityType(Element):
    """A measured amount with its unit.

    All fields are optional. ``equal`` compares every field;
    ``equivalent`` ignores the comparator and the display unit and compares
    value, system and code.

    Examples:
        >>> q = QuantityType(DecimalType.parse("47.1"), unit=StringType("gram"),
        ...                  system=UCUM_SYSTEM_URI, code=CodeType("g"))
        >>> str(q)
        '47.1 g'
        >>> q.set_comparator(LESS_THAN_COMPARATOR) is q
        True
    """

    __slots__ = ("_value", "_comparator", "_unit", "_system", "_code")

    DATA_TYPE: ClassVar[DataType] = DataType.QUANTITY
    TYPE_SPEC: ClassVar[TypeSpecification] = BUILTIN_TYPES["Quantity"]

    def __init__(
        self,
        value: DecimalType | None = None,
        comparator: CodeType | None = None,
        unit: StringType | None = None,
        system: URIType | None = None,
        code: CodeType | None = None,
    ) -> None:
        self._value = value
        self._comparator = comparator
        self._unit = unit
        self._system = system
        self._code = code

    @property
    def value(self) -> DecimalType | None:
        return self._value

    @property
    def comparator(self) -> CodeType | None:
        return self._comparator

    @property
    def unit(self) -> StringType | None:
        return self._unit

    @property
    def system(self) -> URIType | None:
        return self._system

    @property
    def code(self) -> CodeType | None:
        return self._code

    def set_value(self, value: DecimalType | None) -> QuantityType:
        self._value = value
        return self

    def set_comparator(self, comparator: CodeType | None) -> QuantityType:
        self._comparator = comparator
        return self

    def set_unit(self, unit: StringType | None) -> QuantityType:
        self._unit = unit
        return self

    def set_system(self, system: URIType | None) -> QuantityType:
        self._system = system
        return self

    def set_code(self, code: CodeType | None) -> QuantityType:
        self._code = code
        return self

    def is_empty(self) -> bool:
        """Return True if no field is set."""
        return (
            self._value is None
            and self._comparator is None
            and self._unit is None
            and self._system is None
            and self._code is None
        )

    def equal(self, other: object) -> bool:
        if not isinstance(other, QuantityType):
            return False
        return (
            comparison.equal(self._value, other._value)
            and comparison.equal(self._comparator, other._comparator)
            and comparison.equal(self._unit, other._unit)
            and comparison.equal(self._system, other._system)
            and comparison.equal(self._code, other._code)
        )

    def equivalent(self, other: object) -> bool:
        if not isinstance(other, QuantityType):
            return False
        return (
            comparison.equal(self._value, other._value)
            and comparison.equal(self._system, other._system)
            and comparison.equal(self._code, other._code)
        )

    def __repr__(self) -> str:
        return (
            f"QuantityType(value={self._value!r}, comparator={self._comparator!r}, "
            f"unit={self._unit!r}, system={self._system!r}, code={self._code!r})"
        )

    def __str__(self) -> str:
        parts = [str(field) for field in (self._value, self._code) if field is not None]
        return " ".join(part for part in parts if part)


__all__ = [
    "QuantityType",
    "LESS_THAN_COMPARATOR",
    "LESS_OR_EQUAL_COMPARATOR",
    "GREATER_THAN_COMPARATOR",
    "GREATER_OR_EQUAL_COMPARATOR",
    "UCUM_SYSTEM_URI",
]
