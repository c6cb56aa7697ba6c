"""URI primitive value.

A URI only ever compares with another URI; it is never equal to a string
with the same characters.
"""

from __future__ import annotations

from typing import ClassVar

from himodel._internal.patterns import URI_PATTERN, match_literal, matches
from himodel.core.base import Accessor, PrimitiveType
from himodel.core.registry import BUILTIN_TYPES
from himodel.core.typespec import TypeSpecification
from himodel.errors import ValidationError
from himodel.units.datatype import DataType


def is_uri(accessor: Accessor | None) -> bool:
    """Return True for uri values."""
    return accessor is not None and getattr(accessor, "data_type", None) is DataType.URI


class URIType(PrimitiveType):
    """A URI without whitespace.

    Equivalence is the same as equality; no normalization is applied.

    Examples:
        >>> URIType("http://unitsofmeasure.org").equal(URIType("http://unitsofmeasure.org"))
        True
    """

    __slots__ = ("_value",)

    DATA_TYPE: ClassVar[DataType] = DataType.URI
    TYPE_SPEC: ClassVar[TypeSpecification] = BUILTIN_TYPES["uri"]

    def __init__(self, value: str) -> None:
        if not matches(URI_PATTERN, value):
            raise ValidationError(f"not a valid uri: {value!r}")
        self._nil = False
        self._value = value

    @classmethod
    def nil(cls) -> URIType:
        instance = object.__new__(cls)
        instance._nil = True
        instance._value = ""
        return instance

    @classmethod
    def parse(cls, literal: str) -> URIType:
        """Parse a URI literal.

        Raises:
            ParseError: If the literal contains whitespace.
        """
        match_literal(URI_PATTERN, literal, "uri")
        return cls(literal)

    @property
    def value(self) -> str:
        return self._value

    def equal(self, other: object) -> bool:
        if not (isinstance(other, URIType) and is_uri(other)):
            return False
        absent = self._nil_state_matches(other)
        if absent is not None:
            return absent
        return self._value == other._value

    def equivalent(self, other: object) -> bool:
        return self.equal(other)

    def __hash__(self) -> int:
        if self._nil:
            return hash((self.DATA_TYPE, None))
        return hash((self.DATA_TYPE, self._value))

    def __repr__(self) -> str:
        if self._nil:
            return "URIType.nil()"
        return f"URIType({self._value!r})"

    def __str__(self) -> str:
        return self._value


__all__ = ["URIType", "is_uri"]
