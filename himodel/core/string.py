"""String-like primitive values.

Plain strings, codes, ids and markdown share one implementation and may
be compared with each other: a code ``"g"`` equals a string ``"g"``.
Each kind checks its own literal pattern.
"""

from __future__ import annotations

import re
from typing import ClassVar

from himodel._internal.patterns import (
    CODE_PATTERN,
    ID_PATTERN,
    STRING_PATTERN,
    match_literal,
    matches,
)
from himodel.comparison import normalized_string_equal
from himodel.core.base import Accessor, PrimitiveType
from himodel.core.registry import BUILTIN_TYPES
from himodel.core.typespec import TypeSpecification
from himodel.errors import ValidationError
from himodel.units.datatype import DataType

_STRING_DATA_TYPES = frozenset(
    {DataType.STRING, DataType.CODE, DataType.ID, DataType.MARKDOWN}
)


def is_string(accessor: Accessor | None) -> bool:
    """Return True for string, code, id and markdown values."""
    return accessor is not None and getattr(accessor, "data_type", None) in _STRING_DATA_TYPES


class StringType(PrimitiveType):
    """A plain string value.

    The validating constructor checks the pattern of the kind and raises
    ValidationError; ``parse`` raises ParseError instead. ``unchecked``
    skips the check for input that has been validated already.

    Examples:
        >>> StringType("g") == CodeType("g")
        True

        >>> StringType("Test  Value").equivalent(StringType(" Test Value "))
        True
    """

    __slots__ = ("_value",)

    DATA_TYPE: ClassVar[DataType] = DataType.STRING
    TYPE_SPEC: ClassVar[TypeSpecification] = BUILTIN_TYPES["string"]
    PATTERN: ClassVar[re.Pattern[str]] = STRING_PATTERN

    def __init__(self, value: str) -> None:
        if not matches(self.PATTERN, value):
            raise ValidationError(f"not a valid {self.DATA_TYPE.value}: {value!r}")
        self._nil = False
        self._value = value

    @classmethod
    def _create(cls, value: str, nil: bool = False) -> StringType:
        instance = object.__new__(cls)
        instance._nil = nil
        instance._value = value
        return instance

    @classmethod
    def unchecked(cls, value: str) -> StringType:
        """Create a value without checking the pattern."""
        return cls._create(value)

    @classmethod
    def nil(cls) -> StringType:
        """Return the absent value of this kind."""
        return cls._create("", nil=True)

    @classmethod
    def parse(cls, literal: str) -> StringType:
        """Check a literal against the pattern of this kind.

        Raises:
            ParseError: If the literal does not match.
        """
        match_literal(cls.PATTERN, literal, cls.DATA_TYPE.value)
        return cls._create(literal)

    @property
    def value(self) -> str:
        return self._value

    def _same_kind(self, other: object) -> bool:
        return isinstance(other, StringType) and is_string(other)

    def equal(self, other: object) -> bool:
        if not isinstance(other, StringType) or not self._same_kind(other):
            return False
        absent = self._nil_state_matches(other)
        if absent is not None:
            return absent
        return self._value == other._value

    def equivalent(self, other: object) -> bool:
        if not isinstance(other, StringType) or not self._same_kind(other):
            return False
        absent = self._nil_state_matches(other)
        if absent is not None:
            return absent
        return normalized_string_equal(self._value, other._value)

    def __hash__(self) -> int:
        if self._nil:
            return hash((StringType, None))
        return hash((StringType, self._value))

    def __repr__(self) -> str:
        if self._nil:
            return f"{type(self).__name__}.nil()"
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return self._value


class CodeType(StringType):
    """A code: tokens separated by single whitespace characters."""

    __slots__ = ()

    DATA_TYPE: ClassVar[DataType] = DataType.CODE
    TYPE_SPEC: ClassVar[TypeSpecification] = BUILTIN_TYPES["code"]
    PATTERN: ClassVar[re.Pattern[str]] = CODE_PATTERN


class IDType(StringType):
    """An id: 1 to 64 letters, digits, dashes and dots."""

    __slots__ = ()

    DATA_TYPE: ClassVar[DataType] = DataType.ID
    TYPE_SPEC: ClassVar[TypeSpecification] = BUILTIN_TYPES["id"]
    PATTERN: ClassVar[re.Pattern[str]] = ID_PATTERN


class MarkdownType(StringType):
    """A markdown string, with the same character rules as a plain string."""

    __slots__ = ()

    DATA_TYPE: ClassVar[DataType] = DataType.MARKDOWN
    TYPE_SPEC: ClassVar[TypeSpecification] = BUILTIN_TYPES["markdown"]


__all__ = [
    "StringType",
    "CodeType",
    "IDType",
    "MarkdownType",
    "is_string",
]
